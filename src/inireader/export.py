# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2026/10/15 14:27:48
# @Author : inireader contributors

"""Dump a parsed `IniTable` for inspection.

NOT an INI writer: the output is JSON or YAML of
`{SECTION: {KEY: value}}`, with names in folded form.
"""

import json

import yaml

from .abstract import FileWriter
from .ini.model import IniTable


class IniJsonDumper(FileWriter[IniTable]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename, encoding)

    def write(self, instance: IniTable, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(instance.to_dict(), fp, ensure_ascii=False, indent=indent)


class IniYamlDumper(FileWriter[IniTable]):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename, encoding)

    def write(self, instance: IniTable) -> None:
        # keep section order as parsed, pyyaml sorts by default.
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                instance.to_dict(), fp,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False)
