# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2024/11/03 15:40:12
# @Author : Kariko Lin

import logging
import os
from collections.abc import Iterable
from os.path import abspath, dirname, exists
from shutil import copymode
from tempfile import mkstemp

from chardet import detect as guess_codec

from ..abstract import LineStore


def split_lines(buf: str) -> list[str]:
    """Lines of `buf`, without line breaks (either `\\n` or `\\r\\n`)."""
    lines = buf.replace('\r\n', '\n').split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


class MemoryLineStore(LineStore):
    def __init__(self, lines: Iterable[str] = (), identity: str = '<memory>'):
        super().__init__(identity)
        self.lines = list(lines)

    def read_lines(self) -> list[str]:
        return list(self.lines)

    def replace_lines(self, lines: Iterable[str]) -> None:
        self.lines = list(lines)


class IniFileStore(LineStore):
    """An INI file on disk.

    The file is created (empty) if it doesn't exist yet.
    Any `OSError` goes straight to the caller.
    """
    def __init__(
        self, filename: str,
        encoding: str | None = None,
        newline: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        # None: keep whatever the file uses, see `read_lines()`.
        self._newline = newline
        if not exists(filename):
            logging.info('Creating empty INI file `%s`.', filename)
            with open(filename, 'w', encoding=self.encoding):
                pass

    @property
    def encoding(self) -> str:
        """Codec used to write; the detected one after a `read_lines()`."""
        return self._codec or 'utf-8'

    @property
    def newline(self) -> str:
        """Line break to write; the detected one after `read_lines()`."""
        return self._newline or '\n'

    def _decode(self, raw: bytes) -> str:
        # when encoding is not given, try utf-8 (with or without BOM) first,
        # and when it got wrong, just fallback to `chardet`.
        try:
            return raw.decode(self._codec or 'utf-8-sig')
        except UnicodeDecodeError:
            pass

        codec = guess_codec(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            logging.warning(
                'Unsure about the encoding of `%s`, reading as latin-1.',
                self._id)
            # every byte is valid latin-1, so writing back keeps them.
            codec = {'encoding': 'latin-1'}
        elif codec['encoding'].lower() == 'ascii':
            codec = {'encoding': 'utf-8'}
        logging.debug('`%s` is decoded as %s.', self._id, codec['encoding'])
        self._codec = codec['encoding']
        try:
            return raw.decode(self._codec)
        except UnicodeDecodeError:
            logging.warning(
                '`%s` is not really %s, reading as latin-1.',
                self._id, self._codec)
            self._codec = 'latin-1'
            return raw.decode(self._codec)

    def read_lines(self) -> list[str]:
        with open(self._id, 'rb') as fp:
            raw = fp.read()
        buf = self._decode(raw)
        if buf.startswith('\ufeff'):
            buf = buf[1:]
        if self._newline is None:
            self._newline = '\r\n' if '\r\n' in buf else '\n'
        return split_lines(buf)

    def replace_lines(self, lines: Iterable[str]) -> None:
        """Write to a temp file beside the target, then swap them.

        A failure leaves the original file as it was.
        """
        fd, tmp = mkstemp(
            prefix='.ini-', suffix='.tmp', dir=dirname(abspath(self._id)))
        try:
            with open(fd, 'w', encoding=self.encoding, newline='') as fp:
                for i in lines:
                    fp.write(i)
                    fp.write(self.newline)
            if exists(self._id):
                copymode(self._id, tmp)
            os.replace(tmp, self._id)
        except BaseException:
            if exists(tmp):
                os.remove(tmp)
            raise

    def __str__(self) -> str:
        return f'{self._id} ({self.encoding})'
