# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/11 21:11:01
# @Author : inireader contributors

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class FileReader(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return f"{self._fn}({self._codec})"


class FileWriter(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return f"{self._fn}({self._codec})"
