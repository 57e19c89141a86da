# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 22:12:02
# @Author : inireader contributors

"""
Basically a two-level INI lookup table: section -> (key -> value).

Both levels are case-insensitive. Names get folded into an upper form
with `fold()` when stored, and again on every lookup.

The table is filled by `IniParser` and is read only afterwards,
so both classes here are plain `Mapping`s, not `MutableMapping`s.
"""

import logging
from collections.abc import Mapping
from typing import Iterator


class InvalidArgumentError(ValueError):
    """Raised when `IniTable.get()` receives `None` as section or key."""
    pass


def fold(name: str) -> str:
    """Case-fold a section or key name for storage and lookup.

    Upper-cases one character at a time, independent of the locale.
    A character whose upper form is longer than itself (e.g. `'ß'`)
    is kept as is, so a name never changes length.
    """
    return ''.join(
        u if len(u := c.upper()) == 1 else c for c in name)


class IniSection(Mapping[str, str]):
    """Key-value pairs of one INI section.

    Keys are stored folded, i.e. `section['Foo']` and `section['FOO']`
    are the same entry.
    """

    def __init__(self, section_name: str) -> None:
        self._name = section_name
        self.__data: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__data[fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold(key) in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))

    def _put(self, key: str, value: str) -> None:
        """for IniParser only. Last write wins."""
        key = fold(key)
        if key in self.__data:
            logging.debug(
                f'[{self._name}] "{key}" overwritten: '
                f'"{self.__data[key]}" -> "{value}"')
        self.__data[key] = value

    def to_dict(self) -> dict[str, str]:
        return self.__data.copy()


class IniTable(Mapping[str, IniSection]):
    """A parsed INI document.

        ```ini
        ; comment lines are skipped.
        [Section]
        Key = value           ; trailing comment is dropped
        Quoted = "a;b"        ; but not inside quotes
        ```

    Use `self.get(section, key, default)` for lookups; a missing section
    or key gives back `default`, never an exception.
    """

    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold(key) in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return f'<IniTable {list(self.__sections)}>'

    def _open_section(self, name: str) -> IniSection:
        """for IniParser only.

        Re-opening an existing section hands back the same one,
        with its entries kept.
        """
        name = fold(name)
        if name in self.__sections:
            logging.debug(f'[{name}] declared again, merging.')
            return self.__sections[name]
        return self.__sections.setdefault(name, IniSection(name))

    def get(
        self, section: str, key: str, default: str | None = None
    ) -> str | None:
        """Get the value of `key` within `section`.

        Returns `default` (which is `None` unless given)
        if either the section or the key does not exist.

        Raises:
            InvalidArgumentError: `section` or `key` is `None`.
        """
        if section is None:
            raise InvalidArgumentError('section must not be None.')
        if key is None:
            raise InvalidArgumentError('key must not be None.')

        if (sect := self.__sections.get(fold(section))) is None:
            return default
        if key not in sect:
            return default
        return sect[key]

    def to_dict(self) -> dict[str, dict[str, str]]:
        """A plain nested dict copy, e.g. for dumping."""
        return {k: v.to_dict() for k, v in self.__sections.items()}
