# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10

"""
Basically INI Structure: ordered sections of ordered `key=value` pairs.

Order is what `dict` gives us, i.e. first insertion wins the position,
and overwriting a key (or section) never moves it.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from warnings import warn

from .lines import COMMENT_PREFIXES, PAIRING

_LINE_BREAKS = ('\r', '\n')


def _breaks_line(text: str) -> bool:
    return any(i in text for i in _LINE_BREAKS)


def _lost_on_save(text: str) -> bool:
    """Surrounding spaces get trimmed, line breaks split the line."""
    return text != text.strip() or _breaks_line(text)


def _bad_key(key: str) -> bool:
    # `k=1` reloads as `k`, `;k` reloads as a comment.
    return (_lost_on_save(key) or PAIRING in key
            or key.startswith(COMMENT_PREFIXES))


def _bad_section_name(name: str) -> bool:
    return not name or _lost_on_save(name)


class IniSection(MutableMapping[str, str]):
    """INI section dict.

    All pairs MUST be `str: str` (an empty string is fine for values),
    anything else fails with `TypeError` on setting.

    Nothing gets rejected for content, however some names, keys and values
    won't read back the same once saved, and trigger a `UserWarning`:
    - names, keys or values with line breaks or surrounding spaces,
    - empty section names,
    - keys containing `=`, or starting with `;` or `#`.
    """
    def __init__(
        self, name: str, pairs_to_import: Mapping[str, str] | None = None
    ) -> None:
        self.name = name
        self._data: dict[str, str] = {}
        if pairs_to_import:
            self.update(pairs_to_import)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f'Section name must be str, got {value!r}')
        if _bad_section_name(value):
            warn(f'Section name {value!r} will not survive being saved.')
        self._name = value

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f'[{self.name}] pairs must be str: str, got {key!r}: {value!r}')
        if _bad_key(key):
            warn(f'[{self.name}] key {key!r} will not survive being saved.')
        elif _lost_on_save(value):
            warn(f'[{self.name}] value of "{key}" ({value!r}) '
                 'will not survive being saved.')
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return NotImplemented
        # dict == dict ignores order, which we do care about.
        return (self.name == other.name
                and list(self._data.items()) == list(other._data.items()))

    def __str__(self) -> str:
        return f'[{self.name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """... is simply a group of sections, representing a whole INI file.

    Besides the mapping interface, `get()`, `set()`, `remove()` and
    `remove_section()` do the usual two-level work and never complain
    about something missing:

        ```python
        doc = IniDocument()
        doc.set('General', 'name', 'foo')
        doc.get('General', 'name')      # 'foo'
        doc.get('General', 'nope')      # None
        doc.get('General')              # the whole IniSection
        doc.remove('Nowhere', 'name')   # just no-op
        ```
    """
    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict.
        self.__raw[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return list(self.__raw.values()) == list(other.__raw.values())

    def __repr__(self) -> str:
        return f'<IniDocument {self.sections()}>'

    def sections(self) -> list[str]:
        return list(self.__raw)

    def setdefault(
        self, section: str,
        default: IniSection | Mapping[str, str] | None = None
    ) -> IniSection:
        """If `section` not in self, then append it, filled with `default`
        pairs if any. Either way returns the section."""
        if section not in self.__raw:
            self.__raw[section] = IniSection(section, default)
        return self.__raw[section]

    def get(
        self, section: str, key: str | None = None
    ) -> IniSection | str | None:
        """Two-level lookup, `None` if anything is missing.

        Unlike `dict.get()`, the second argument is a *key*, not a default:
        - `get(section)` gives the `IniSection` (or `None`),
        - `get(section, key)` gives the value (or `None`).
        """
        if section not in self.__raw:
            return None
        if key is None:
            return self.__raw[section]
        return self.__raw[section].get(key)

    def set(self, section: str, key: str, value: str) -> None:
        """Set a value, creating the section at the end if needed.

        Note that keys and values are NOT validated. Line breaks, spaces
        around them, `=` or a leading `;`/`#` in keys would not read back
        the same after saving; that's on the caller (see `IniSection`).
        """
        self.setdefault(section)[key] = value

    def remove(self, section: str, key: str) -> None:
        """Remove a key. The section is kept even if it gets empty."""
        if section in self.__raw:
            self.__raw[section].pop(key, None)

    def remove_section(self, section: str) -> None:
        self.__raw.pop(section, None)

    def clear(self) -> None:
        self.__raw.clear()

    def rename(self, old: str, new: str) -> bool:
        """Rename a section, keeping its position.

        Returns:
            `True` if succeed, otherwise `False`.
            May not success if `old` is not found or `new` already exists.
        """
        if old not in self.__raw or new in self.__raw:
            return False
        sections, datas = list(self.__raw), list(self.__raw.values())
        sections[sections.index(old)] = new
        self.__raw[old].name = new
        self.__raw = dict(zip(sections, datas))
        return True

    def update(self, another: 'IniDocument') -> None:
        """To merge `another` into self, section by section.

        Pairs of `another` win over existing ones.
        """
        for decl, data in another.items():
            self.setdefault(decl).update(data)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__raw.items()}
