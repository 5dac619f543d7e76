# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 21:20:31
# @Author : Kariko Lin

from dataclasses import dataclass
from typing import Any


class InvalidSettingArgument(ValueError):
    """A section, setting name or value was not given (i.e. `None`)."""
    pass


def require(arg: Any, arg_name: str) -> None:
    if arg is None:
        raise InvalidSettingArgument(f'`{arg_name}` must not be None.')


@dataclass(frozen=True, order=True)
class Setting:
    """One `name=value` pair.

    Its only durable form is `str(self)`, which never re-adds quotes
    even if the value was quoted in the file.
    """
    name: str
    value: str = ''

    def __str__(self) -> str:
        return f'{self.name}={self.value}'
