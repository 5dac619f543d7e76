# -*- encoding: utf-8 -*-
# @File   : file.py
# @Time   : 2024/11/03 17:02:36
# @Author : Kariko Lin

import logging
from collections.abc import Iterable
from os import PathLike, fspath

from ..abstract import LineStore
from .engine import (
    DeleteSetting,
    ReadSetting,
    ReadSettings,
    ScanOperation,
    WriteSetting,
    WriteSettings,
    has_section,
    section_names
)
from .model import Setting, require
from .store import IniFileStore


class IniFile:
    """Reads and writes settings of one INI file (or any `LineStore`).

    Every call reads the whole content again, and every write replaces
    the whole content; lines a write doesn't touch stay byte-identical.

    Absence is never an error here: a missing section or setting gives
    the default, an empty list, an untouched file, or appended lines.
    Only `None` arguments raise (`InvalidSettingArgument`), before any IO.

    NOT thread safe. Serialize writes to the same file yourself.
    """
    def __init__(
        self, filename: str | PathLike | LineStore,
        encoding: str | None = None,
        newline: str | None = None
    ) -> None:
        if isinstance(filename, LineStore):
            self._store = filename
        else:
            self._store = IniFileStore(fspath(filename), encoding, newline)

    @property
    def store(self) -> LineStore:
        return self._store

    def _rewrite(self, op: ScanOperation) -> None:
        lines = self._store.read_lines()
        out = op.run(lines)
        if out == lines:
            logging.debug('%r left `%s` unchanged.', op, self._store)
            return
        self._store.replace_lines(out)

    def read_setting(
        self, section: str, name: str, default: str = ''
    ) -> Setting:
        """Setting `name` of `[section]`.

        If not found, its value is `default` (with trailing spaces removed).
        """
        op = ReadSetting(section, name, default)
        op.run(self._store.read_lines())
        return op.result

    def read_settings(self, section: str) -> list[Setting]:
        op = ReadSettings(section)
        op.run(self._store.read_lines())
        return op.settings

    def delete_setting(self, section: str, name: str) -> None:
        self._rewrite(DeleteSetting(section, name))

    def write_setting(self, section: str, setting: Setting) -> None:
        self._rewrite(WriteSetting(section, setting))

    def write_settings(
        self, section: str, settings: Iterable[Setting]
    ) -> None:
        self._rewrite(WriteSettings(section, settings))

    def has_section(self, section: str) -> bool:
        require(section, 'section')
        return has_section(self._store.read_lines(), section)

    def section_names(self) -> list[str]:
        return section_names(self._store.read_lines())

    # value level shortcuts.
    def get_value(self, section: str, name: str, default: str = '') -> str:
        return self.read_setting(section, name, default).value

    def set_value(self, section: str, name: str, value: str) -> None:
        self.write_setting(section, Setting(name, value))

    def get_key_value_pairs(self, section: str) -> list[tuple[str, str]]:
        return [(i.name, i.value) for i in self.read_settings(section)]

    def __str__(self) -> str:
        return f'INI file: {self._store}'
