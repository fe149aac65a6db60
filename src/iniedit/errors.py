# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:03


class IniError(Exception):
    """Base of every error raised by `iniedit` itself."""
    pass


class KeyOutsideSection(IniError, ValueError):
    """A `key=value` line showed up before any `[section]` header."""
    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(
            f'line {lineno}: key-value pair found before any section: {line!r}')
        self.lineno = lineno
        self.line = line


class StoreNotBound(IniError, OSError):
    """`save()` got called on a store without a file path.

    Usually because it was created by `IniStore.load_from_string()`.
    """
    pass
