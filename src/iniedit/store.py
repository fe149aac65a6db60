# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2024/10/12 23:18:40

"""The usual entry: load an INI, poke at it, save it back.

    ```python
    store = IniStore.load('settings.ini')  # empty if it doesn't exist yet
    store.set('window', 'width', '800')
    store.save()
    ```

All comments in the INI file will be lost by saving.
"""

import logging
from os import PathLike, fspath

from .errors import StoreNotBound
from .ini import IniDocument, IniParser


class IniStore:
    def __init__(
        self, document: IniDocument | None = None,
        path: str | PathLike[str] | None = None,
        parser: IniParser | None = None
    ) -> None:
        self.document = document if document is not None else IniDocument()
        self._parser = parser if parser is not None else IniParser()
        if path is not None:
            self.path = path

    @property
    def path(self) -> str | None:
        return self._parser.filename

    @path.setter
    def path(self, value: str | PathLike[str] | None) -> None:
        self._parser.filename = None if value is None else fspath(value)

    @classmethod
    def load(
        cls, path: str | PathLike[str], encoding: str = 'utf-8', **fmt
    ) -> 'IniStore':
        """Load in an INI file.

        If the file doesn't exist, an empty store bound to `path` is
        returned, and the file gets created on `save()`.

        Args:
            fmt: `newline` and `blank_lines`, see `IniParser`.

        Raises:
            OSError: reading failed for other reasons than nonexistence.
            KeyOutsideSection: a pair was found before any section.
        """
        parser = IniParser(fspath(path), encoding, **fmt)
        try:
            document = parser.read()
        except FileNotFoundError:
            logging.info(f'{parser} not found, starting empty.')
            document = IniDocument()
        return cls(document, parser=parser)

    @classmethod
    def load_from_string(cls, text: str, **fmt) -> 'IniStore':
        """Create a store from a string.

        Does not bind a path, so `save()` won't work unless `path` is set
        manually.
        """
        return cls(IniParser.parse(text), None, IniParser(**fmt))

    def get(self, section: str, key: str) -> str | None:
        return self.document.get(section, key)

    def set(self, section: str, key: str, value: str) -> None:
        """If the section doesn't exist, it will be created.
        This will not save the file."""
        self.document.set(section, key, value)

    def remove(self, section: str, key: str) -> None:
        self.document.remove(section, key)

    def remove_section(self, section: str) -> None:
        self.document.remove_section(section)

    def save(self) -> int:
        """Save the INI file after being edited.

        Returns:
            Size in bytes of the file after writing.
        """
        if self.path is None:
            raise StoreNotBound(
                'No path is set. This is likely because '
                'the store was created using load_from_string().')
        return self._parser.write(self.document)

    def to_string(self) -> str:
        return self._parser.dumps(self.document)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f'<IniStore {self.path!r} {self.document.sections()}>'
