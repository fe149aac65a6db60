# -*- encoding: utf-8 -*-
# @File   : lines.py
# @Time   : 2024/10/12 22:05:17

"""One-line classification, the only place that knows the INI syntax.

    ```ini
    ; comment, or
    # comment
    [section]
    key = value
    ```

Anything else (`[broken`, a bare word, ...) classifies as `None`
and gets skipped by the parser.
"""

from dataclasses import dataclass

COMMENT_PREFIXES = (';', '#')
SECTION_START = '['
SECTION_END = ']'
PAIRING = '='


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class SectionHeader:
    name: str


@dataclass(frozen=True)
class KeyValue:
    key: str
    value: str


Line = Blank | Comment | SectionHeader | KeyValue


def classify(line: str) -> Line | None:
    stripped = line.strip()
    if not stripped:
        return Blank()
    if stripped.startswith(COMMENT_PREFIXES):
        return Comment(stripped[1:].strip())
    # `[]`, `[ ]`, `[a` and `a]` are NOT headers,
    # they just fall through to the pairing check below.
    if (stripped.startswith(SECTION_START)
            and stripped.endswith(SECTION_END)
            and (name := stripped[1:-1].strip())):
        return SectionHeader(name)
    if PAIRING in stripped:
        key, val = stripped.split(PAIRING, 1)
        return KeyValue(key.strip(), val.strip())
    return None
