# -*- encoding: utf-8 -*-
# @File   : grammar.py
# @Time   : 2024/11/02 22:03:47
# @Author : Kariko Lin

"""Recognizes the three line shapes of an INI file:

    ```ini
    [section]       ; section header, anything after `]` is ignored.
    name = value    ; setting, value may be wrapped in '' or "".
    ; anything else, kept verbatim.
    ```

Names given by callers are always escaped before they become a pattern,
so `[a.b]` never matches a section called `a.b` by accident of `.`
(and `(` won't blow up the compiler either).
"""

from re import compile as regex
from re import escape

from .model import Setting

_ANY_SECTION = regex(r'^\s*\[\s*(.*?)\s*\].*$')
_ANY_SETTING = regex(r'^\s*(.*?\S)\s*=\s*(.*)$')

QUOTES = ('"', "'")


def unquote(value: str) -> str:
    """Strip exactly *one* pair of matching outer quotes, if any.

    `"'x'"` gives `'x'`, and `"x'` is kept as is.
    """
    if len(value) > 1 and value[0] in QUOTES and value[0] == value[-1]:
        return value[1:-1]
    return value


def match_section_header(line: str) -> str | None:
    """Name of the section declared by `line`, trimmed but still quoted.

    `None` if `line` is not a section header.
    """
    if (m := _ANY_SECTION.match(line)) is None:
        return None
    return m.group(1)


def section_name(line: str) -> str | None:
    """Like `match_section_header()`, but with quotes removed."""
    name = match_section_header(line)
    return None if name is None else unquote(name)


def match_setting(line: str) -> tuple[str, str] | None:
    """`(name, raw_value)` of a setting line; the value keeps its quotes."""
    if (m := _ANY_SETTING.match(line)) is None:
        return None
    return m.group(1), m.group(2).rstrip()


def parse_setting(line: str) -> Setting | None:
    if (pair := match_setting(line)) is None:
        return None
    return Setting(pair[0], unquote(pair[1]))


def serialize(setting: Setting) -> str:
    return str(setting)


class SectionMatcher:
    """Matches the header of one specific section.

    The header may quote the name, i.e. `["global"]` is still `global`.
    """
    def __init__(self, section: str) -> None:
        self.name = section.strip()
        e = escape(self.name)
        self._pattern = regex(
            rf'''^\s*\[\s*(?:{e}|"{e}"|'{e}')\s*\].*$''')

    def match(self, line: str) -> bool:
        return self._pattern.match(line) is not None

    def __repr__(self) -> str:
        return f'SectionMatcher([{self.name}])'


class SettingMatcher:
    """Matches a setting line of one specific name."""
    def __init__(self, name: str) -> None:
        self.name = name.strip()
        self._pattern = regex(rf'^\s*{escape(self.name)}\s*=(.*)$')

    def match(self, line: str) -> bool:
        return self._pattern.match(line) is not None

    def value(self, line: str) -> str | None:
        """Unquoted value if `line` sets this name, otherwise `None`."""
        if (m := self._pattern.match(line)) is None:
            return None
        return unquote(m.group(1).strip())

    def __repr__(self) -> str:
        return f'SettingMatcher({self.name}=)'
