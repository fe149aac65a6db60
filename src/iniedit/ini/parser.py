# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45

"""Read text into an `IniDocument`, and write it back.

Writing is *lossy on purpose*: comments, blank lines and spacing
around `=` are not kept, what comes out is always the canonical form:

    ```ini
    [section_name]
    key=value
    key2=value2

    [section2]
    key3=value3
    ```
"""

import logging
import os
from io import StringIO, TextIOBase
from os.path import dirname, exists, realpath
from re import compile as regex
from shutil import copymode
from tempfile import NamedTemporaryFile

import chardet

from ..abstract import FileHandler
from ..errors import KeyOutsideSection
from .lines import (
    PAIRING, SECTION_END, SECTION_START,
    KeyValue, SectionHeader, classify
)
from .model import IniDocument

# `\r\n`, old mac `\r` and `\n`.
# str.splitlines() would also split on \f, \x1c and friends.
_LINE_BREAK = regex(r'\r\n|\r|\n')
_BOM = '\ufeff'


def _current_umask() -> int:
    # there is no way to read it without setting it.
    mask = os.umask(0)
    os.umask(mask)
    return mask


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | None = None, encoding: str = 'utf-8', *,
        newline: str = '\n', blank_lines: int = 1
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._newline = newline
        self._blank_lines = blank_lines

    @staticmethod
    def parse(text: str, ins: IniDocument | None = None) -> IniDocument:
        """Parse decoded INI text.

        A header appearing twice re-opens the same section,
        and a duplicated key just overrides the former one.

        Raises:
            KeyOutsideSection: if any pair shows up before the first header.
        """
        if ins is None:
            ins = IniDocument()
        this_sect = None
        for lineno, i in enumerate(
            _LINE_BREAK.split(text.removeprefix(_BOM)), 1
        ):
            line = classify(i)
            if isinstance(line, SectionHeader):
                this_sect = ins.setdefault(line.name)
            elif isinstance(line, KeyValue):
                if this_sect is None:
                    raise KeyOutsideSection(lineno, i)
                if line.key in this_sect:
                    logging.warning(
                        f'{this_sect}: "{line.key}" already exists '
                        f'and got overrode (line {lineno}).')
                this_sect[line.key] = line.value
            elif line is None:
                logging.debug(f'Skipped malformed line {lineno}: {i!r}')
            # blanks and comments just go away.
        return ins

    @classmethod
    def readstream(
        cls, buf: TextIOBase, ins: IniDocument | None = None
    ) -> IniDocument:
        """Read a decoded chars stream.

        Just call `self.read()` if there's nothing special.
        """
        return cls.parse(buf.read(), ins)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        logging.debug(f'{filename}: chardet says {codec}')
        if codec['encoding'] is None:
            # nothing better to try, let it raise.
            codec = {'encoding': 'utf-8'}
        return StringIO(raw.decode(codec['encoding']))

    def read(self) -> IniDocument:
        """Read the file this parser is bound to.

        Raises:
            OSError: including `FileNotFoundError`, it's up to the caller.
        """
        if self._fn is None:
            raise FileNotFoundError('No file bound to this parser.')
        try:
            # newline='' so that `\r` endings reach `parse()` untouched.
            with open(self._fn, 'r', encoding=self._codec, newline='') as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            logging.warning(
                f'{self._fn} is not {self._codec}, guessing its encoding.')
            return self.readstream(self._decode_file(self._fn))

    @staticmethod
    def serialize(
        instance: IniDocument, newline: str = '\n', blank_lines: int = 1
    ) -> str:
        """Dump out the canonical text, returns `''` if there's no section."""
        blocks = []
        for name, pairs in instance.items():
            lines = [f'{SECTION_START}{name}{SECTION_END}']
            lines.extend(f'{k}{PAIRING}{v}' for k, v in pairs.items())
            blocks.append(''.join(i + newline for i in lines))
        return (newline * blank_lines).join(blocks)

    def dumps(self, instance: IniDocument) -> str:
        """`serialize()` with this parser's line ending and spacing."""
        return self.serialize(instance, self._newline, self._blank_lines)

    def write(self, instance: IniDocument) -> int:
        """Save to the file this parser is bound to.

        The text goes to a temp file beside the target first, which then
        replaces the target. So a failed save leaves the old file alone.
        Symlinks are followed, the file they point to gets replaced.
        A new file gets the usual `0o666 & ~umask` mode, an existing one
        keeps its mode.

        Returns:
            Size in bytes of what got written.
        """
        if self._fn is None:
            raise FileNotFoundError('No file bound to this parser.')
        target = realpath(self._fn)
        data = self.dumps(instance).encode(self._codec)
        fp = NamedTemporaryFile(
            'wb', dir=dirname(target),
            prefix='.iniedit-', suffix='.tmp', delete=False)
        try:
            with fp:
                fp.write(data)
                fp.flush()
                os.fsync(fp.fileno())
            if exists(target):
                copymode(target, fp.name)
            else:
                # mkstemp always makes it 0o600.
                os.chmod(fp.name, 0o666 & ~_current_umask())
            os.replace(fp.name, target)
        except BaseException:
            os.unlink(fp.name)
            raise
        logging.debug(f'Wrote {len(data)} bytes to {target}')
        return len(data)

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f' ({self._codec})'
