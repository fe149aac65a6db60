# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Reads a `T` from, and writes it back to, one file on disk.

    `filename` may be left as `None` for handlers that only work on
    in-memory text; `read()`/`write()` then have nothing to act on.
    """
    def __init__(self, filename: str | None = None) -> None:
        self._fn = filename

    @property
    def filename(self) -> str | None:
        return self._fn

    @filename.setter
    def filename(self, value: str | None) -> None:
        self._fn = value

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> int:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn or '<memory>'
