# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 21:14:08
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from collections.abc import Iterable


class LineStore(metaclass=ABCMeta):
    """Where an INI document lives, seen as a sequence of text lines.

    Subclasses read the *whole* content at once, and replace it as a unit.
    """
    def __init__(self, identity: str) -> None:
        self._id = identity

    @abstractmethod
    def read_lines(self) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def replace_lines(self, lines: Iterable[str]) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._id
