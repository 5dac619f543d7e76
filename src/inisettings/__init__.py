# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:10:44
# @Author : Kariko Lin

import logging

from .abstract import LineStore
from .ini import (
    IniFile,
    IniFileStore,
    InvalidSettingArgument,
    MemoryLineStore,
    ParserState,
    Setting
)
from .export import InvalidSnapshot, dump_json, dump_yaml, load_yaml

__all__ = [
    'LineStore', 'IniFile', 'IniFileStore', 'MemoryLineStore',
    'Setting', 'ParserState', 'InvalidSettingArgument',
    'InvalidSnapshot', 'dump_json', 'dump_yaml', 'load_yaml'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
