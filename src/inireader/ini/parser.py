# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 23:13:03
# @Author : inireader contributors

"""Single pass INI reader.

Each line gets classified on its own, with no lookahead:

    - blank, or starting with `;`: skipped.
    - `[Name]`: opens (or re-opens) section `Name`.
    - `key = value`: stored into the currently open section.

Anything else, or a pair before any section, is a `MalformedLineError`.
"""

import logging
from io import StringIO
from typing import Iterable

import chardet

from .model import IniSection, IniTable
from ..abstract import FileReader


class MalformedLineError(ValueError):
    """To record lines the parser could not make sense of."""

    def __init__(self, line: str, lineno: int) -> None:
        super().__init__(f'Could not parse line {lineno}: "{line}"')
        self.line = line
        self.lineno = lineno


def _clean_value(value: str) -> str:
    if not value:
        return value

    # a `;` within quotes is not a comment.
    # unterminated quote: keep the rest as is, `;` included.
    offset = value.find('"', 1) if value[0] == '"' else 0
    if offset != -1 and (idx := value.find(';', offset)) != -1:
        value = value[:idx]

    value = value.strip()
    if len(value) > 1 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    return value


class IniParser(FileReader[IniTable]):
    def __init__(self, filename: str, encoding: str | None = 'utf-8'):
        codec = encoding or 'utf-8'
        # utf-8 files may start with a BOM, drop it like any other reader.
        if codec.lower().replace('_', '-') in ('utf-8', 'utf8'):
            codec = 'utf-8-sig'
        super().__init__(filename, codec)

    @staticmethod
    def parse(lines: Iterable[str]) -> IniTable:
        """Build an `IniTable` from already decoded lines.

        Line endings may be kept or not, lines are trimmed anyway.
        Stops at the first malformed line, no partial table is returned.

        Raises:
            MalformedLineError: a line is neither blank, comment,
                section header nor `key=value`; or a pair
                shows up before any section header.
        """
        ret = IniTable()
        this_sect: IniSection | None = None
        for lineno, i in enumerate(lines, 1):
            i = i.strip()
            if not i or i[0] == ';':
                continue

            if i[0] == '[' and i[-1] == ']':
                this_sect = ret._open_section(i[1:-1])
                continue

            key, sep, val = i.partition('=')
            if not sep or this_sect is None:
                raise MalformedLineError(i, lineno)
            this_sect._put(key.strip(), _clean_value(val))
        return ret

    @staticmethod
    def parse_string(text: str) -> IniTable:
        # only \n, \r and \r\n end a line, same as `read()`.
        return IniParser.parse(StringIO(text, newline=None).readlines())

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            logging.warning(
                f'Unsure about encoding of `{filename}` ({codec}), '
                'falling back to utf-8 with replacements.')
            return StringIO(raw.decode('utf-8-sig', errors='replace'))

        logging.warning(
            f'Decoding `{filename}` as {codec["encoding"]} '
            f'(confidence {codec["confidence"]:.2f}).')
        return StringIO(raw.decode(codec['encoding'], errors='replace'))

    def read(self) -> IniTable:
        """Read the file this `IniParser` points to.

        Raises:
            FileNotFoundError: the file does not exist.
            MalformedLineError: see `IniParser.parse()`.
        """
        try:
            # read everything first, so a wrong codec never leaves
            # us with half a table.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                lines = fp.readlines()
        except UnicodeDecodeError as e:
            logging.warning(f'`{self._fn}` is not {self._codec}: {e}')
            lines = self._decode_file(self._fn).readlines()
        return self.parse(lines)

    def __str__(self) -> str:
        return "INI file: " + super().__str__()


def parse(lines: Iterable[str]) -> IniTable:
    """Shortcut of `IniParser.parse()`."""
    return IniParser.parse(lines)
