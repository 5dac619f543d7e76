# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/11/04 20:31:09
# @Author : Kariko Lin

"""Snapshot an INI file as YAML / JSON, or apply a YAML snapshot back.

A snapshot is simply `{section: {name: value}}`. Since name based access
only reaches the *first* section of a name, later duplicates are skipped;
and duplicate names in a section collapse to the last one.
"""

import json
from collections.abc import Mapping
from warnings import warn

import yaml

from .ini.engine import read_settings, section_names, write_settings
from .ini.file import IniFile
from .ini.model import Setting

__all__ = ['InvalidSnapshot', 'snapshot', 'dump_yaml', 'dump_json',
           'load_yaml']


class InvalidSnapshot(Exception):
    """A YAML snapshot is not a mapping of sections to mappings."""
    pass


def snapshot(ini: IniFile) -> dict[str, dict[str, str]]:
    lines = ini.store.read_lines()
    ret: dict[str, dict[str, str]] = {}
    for i in section_names(lines):
        if i in ret:
            warn(f'[{i}] appears more than once in {ini.store}, '
                 'only the first one is exported.')
            continue
        ret[i] = {s.name: s.value for s in read_settings(lines, i)}
    return ret


def dump_yaml(ini: IniFile) -> str:
    return yaml.safe_dump(snapshot(ini), allow_unicode=True, sort_keys=False)


def dump_json(ini: IniFile, indent: int = 2) -> str:
    return json.dumps(snapshot(ini), ensure_ascii=False, indent=indent)


def _as_value(value: object) -> str:
    # `key:` with nothing behind loads as None.
    return '' if value is None else str(value)


def load_yaml(ini: IniFile, buf: str) -> None:
    """Merge every section of a YAML snapshot into `ini`.

    Goes through the same merge as `IniFile.write_settings()`,
    while the file is only replaced once.
    """
    data = yaml.safe_load(buf)
    if data is None:
        return
    if not isinstance(data, Mapping):
        raise InvalidSnapshot('Top level should map sections to settings.')
    lines = ini.store.read_lines()
    for section, pairs in data.items():
        if pairs is None:
            pairs = {}
        if not isinstance(pairs, Mapping):
            raise InvalidSnapshot(f'[{section}] should be a mapping.')
        lines = write_settings(lines, str(section), [
            Setting(str(k), _as_value(v)) for k, v in pairs.items()])
    ini.store.replace_lines(lines)
