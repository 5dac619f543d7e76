# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 17:40:21
# @Author : Kariko Lin

from .model import Setting, InvalidSettingArgument
from .engine import ParserState
from .file import IniFile
from .store import IniFileStore, MemoryLineStore


# 重名小节只认第一个，和写入时追加新小节的行为保持一致。
