# -*- encoding: utf-8 -*-
# @File   : engine.py
# @Time   : 2024/11/03 00:12:55
# @Author : Kariko Lin

"""Single pass, section scoped scanning over the lines of an INI file.

Each operation is a tiny state machine:

    LOOKING_FOR_SECTION -> LOOKING_FOR_SETTING -> DONE_LOOKING

`transition()` decides the next state of *one* line and what to write out
for it, `finish()` decides what to append when lines run out.
Neither touches any file. `run()` just feeds lines through both.

Write operations emit every line they don't mean to change *verbatim*,
so hand-edited comments, blank lines and other sections survive.
"""

import logging
from abc import ABCMeta, abstractmethod
from collections.abc import Iterable, Sequence
from enum import Enum

from .grammar import (
    SectionMatcher,
    SettingMatcher,
    match_section_header,
    match_setting,
    parse_setting,
    section_name,
    serialize
)
from .model import Setting, require

__all__ = [
    'ParserState', 'Step', 'ScanOperation',
    'ReadSetting', 'ReadSettings', 'DeleteSetting',
    'WriteSetting', 'WriteSettings',
    'read_setting', 'read_settings', 'delete_setting',
    'write_setting', 'write_settings', 'has_section', 'section_names'
]


class ParserState(str, Enum):
    LOOKING_FOR_SECTION = 'looking for section'
    LOOKING_FOR_SETTING = 'looking for setting'
    DONE_LOOKING = 'done looking'


# (next state, lines to emit)
Step = tuple[ParserState, tuple[str, ...]]


def _new_section_block(
    section: str, lines: Iterable[str], first: bool = False
) -> list[str]:
    # no leading blank line for an empty file.
    head = [] if first else ['']
    return [*head, f'[{section}]', *lines, '']


class ScanOperation(metaclass=ABCMeta):
    """Base of all operations scoped to one section."""

    # read only operations don't need the rest of the file once done.
    stop_when_done = False

    def __init__(self, section: str) -> None:
        require(section, 'section')
        self._section = SectionMatcher(section)
        self.lines_seen = 0

    def reset(self) -> None:
        """Forget whatever a previous `run()` collected."""
        self.lines_seen = 0

    @property
    def section(self) -> str:
        return self._section.name

    def transition(self, state: ParserState, line: str) -> Step:
        if state is ParserState.LOOKING_FOR_SECTION:
            if self._section.match(line):
                return ParserState.LOOKING_FOR_SETTING, (line,)
            return state, (line,)
        if state is ParserState.LOOKING_FOR_SETTING:
            if match_section_header(line) is not None:
                return self.leave_section(line)
            return self.in_section(line)
        return state, (line,)

    @abstractmethod
    def in_section(self, line: str) -> Step:
        """Handle a non-header line inside the target section."""
        raise NotImplementedError

    def leave_section(self, header: str) -> Step:
        """Handle the header of the section right after the target one."""
        return ParserState.DONE_LOOKING, (header,)

    def finish(self, state: ParserState) -> Sequence[str]:
        """Lines to append once the input runs out in `state`."""
        return ()

    def run(self, lines: Iterable[str]) -> list[str]:
        self.reset()
        state = ParserState.LOOKING_FOR_SECTION
        out: list[str] = []
        for line in lines:
            self.lines_seen += 1
            state, emitted = self.transition(state, line)
            out.extend(emitted)
            if self.stop_when_done and state is ParserState.DONE_LOOKING:
                break
        out.extend(self.finish(state))
        logging.debug('%r on [%s] ended %s.', self, self.section, state.value)
        return out

    def __repr__(self) -> str:
        return type(self).__name__


class ReadSetting(ScanOperation):
    stop_when_done = True

    def __init__(self, section: str, name: str, default: str = '') -> None:
        super().__init__(section)
        require(name, 'name')
        self._name = name
        self._setting = SettingMatcher(name)
        # default got trimmed as well, though it's never read from file.
        self._default = (default or '').rstrip()
        self.value = self._default

    def reset(self) -> None:
        super().reset()
        self.value = self._default

    def in_section(self, line: str) -> Step:
        if (value := self._setting.value(line)) is None:
            return ParserState.LOOKING_FOR_SETTING, ()
        self.value = value
        return ParserState.DONE_LOOKING, ()

    @property
    def result(self) -> Setting:
        return Setting(self._name, self.value)


class ReadSettings(ScanOperation):
    """Every setting line of a section, in file order, duplicates kept."""
    stop_when_done = True

    def __init__(self, section: str) -> None:
        super().__init__(section)
        self.settings: list[Setting] = []

    def reset(self) -> None:
        super().reset()
        self.settings = []

    def in_section(self, line: str) -> Step:
        if (setting := parse_setting(line)) is not None:
            self.settings.append(setting)
        return ParserState.LOOKING_FOR_SETTING, ()


class DeleteSetting(ScanOperation):
    """Drops the *first* line setting `name` inside the section."""
    def __init__(self, section: str, name: str) -> None:
        super().__init__(section)
        require(name, 'name')
        self._setting = SettingMatcher(name)

    def in_section(self, line: str) -> Step:
        if self._setting.match(line):
            return ParserState.DONE_LOOKING, ()
        return ParserState.LOOKING_FOR_SETTING, (line,)


class WriteSetting(ScanOperation):
    """Overwrites the first line of the same name, or adds a new one.

    - found in section: replaced in place;
    - section ends first: inserted (with a blank line) before next header;
    - section missing: a new section block appended to the end.
    """
    def __init__(self, section: str, setting: Setting) -> None:
        super().__init__(section)
        require(setting, 'setting')
        require(setting.name, 'setting.name')
        require(setting.value, 'setting.value')
        self._line = serialize(setting)
        self._setting = SettingMatcher(setting.name)

    def in_section(self, line: str) -> Step:
        if self._setting.match(line):
            return ParserState.DONE_LOOKING, (self._line,)
        return ParserState.LOOKING_FOR_SETTING, (line,)

    def leave_section(self, header: str) -> Step:
        return ParserState.DONE_LOOKING, (self._line, '', header)

    def finish(self, state: ParserState) -> Sequence[str]:
        match state:
            case ParserState.LOOKING_FOR_SECTION:
                logging.info('Appending section [%s].', self.section)
                return _new_section_block(
                    self.section, [self._line], first=not self.lines_seen)
            case ParserState.LOOKING_FOR_SETTING:
                return [self._line, '']
            case _:
                return ()


class WriteSettings(ScanOperation):
    """Merges `settings` into the section.

    An existing line whose name is still *remaining* gets the LAST remaining
    setting of that name, then that name is done for good. Whatever remains
    when the section ends is added there, in the original order.
    """
    def __init__(self, section: str, settings: Iterable[Setting]) -> None:
        super().__init__(section)
        require(settings, 'settings')
        self._settings = list(settings)
        self.remaining: list[Setting] = list(self._settings)
        for i in self._settings:
            require(i, 'setting')
            require(i.name, 'setting.name')
            require(i.value, 'setting.value')

    def reset(self) -> None:
        super().reset()
        self.remaining = list(self._settings)

    def _flush(self, separated: bool = False) -> list[str]:
        ret = [serialize(i) for i in self.remaining]
        self.remaining.clear()
        if separated and ret:
            ret.append('')
        return ret

    def in_section(self, line: str) -> Step:
        if (pair := match_setting(line)) is None:
            return ParserState.LOOKING_FOR_SETTING, (line,)
        name = pair[0]
        matched = [i for i in self.remaining if i.name.strip() == name]
        if not matched:
            return ParserState.LOOKING_FOR_SETTING, (line,)
        self.remaining = [i for i in self.remaining if i.name.strip() != name]
        return ParserState.LOOKING_FOR_SETTING, (serialize(matched[-1]),)

    def leave_section(self, header: str) -> Step:
        return ParserState.DONE_LOOKING, (*self._flush(separated=True), header)

    def finish(self, state: ParserState) -> Sequence[str]:
        match state:
            case ParserState.LOOKING_FOR_SECTION:
                logging.info('Appending section [%s].', self.section)
                return _new_section_block(
                    self.section, self._flush(), first=not self.lines_seen)
            case ParserState.LOOKING_FOR_SETTING:
                return self._flush(separated=True)
            case _:
                return ()


def read_setting(
    lines: Iterable[str], section: str, name: str, default: str = ''
) -> Setting:
    op = ReadSetting(section, name, default)
    op.run(lines)
    return op.result


def read_settings(lines: Iterable[str], section: str) -> list[Setting]:
    op = ReadSettings(section)
    op.run(lines)
    return op.settings


def delete_setting(
    lines: Iterable[str], section: str, name: str
) -> list[str]:
    return DeleteSetting(section, name).run(lines)


def write_setting(
    lines: Iterable[str], section: str, setting: Setting
) -> list[str]:
    return WriteSetting(section, setting).run(lines)


def write_settings(
    lines: Iterable[str], section: str, settings: Iterable[Setting]
) -> list[str]:
    return WriteSettings(section, settings).run(lines)


def has_section(lines: Iterable[str], section: str) -> bool:
    require(section, 'section')
    matcher = SectionMatcher(section)
    return any(matcher.match(i) for i in lines)


def section_names(lines: Iterable[str]) -> list[str]:
    """Every section header name, in file order; duplicates kept."""
    return [name for i in lines if (name := section_name(i)) is not None]
