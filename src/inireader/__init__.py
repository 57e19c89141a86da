# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/16 20:05:33
# @Author : inireader contributors

import logging

from .ini import (
    IniParser,
    IniSection,
    IniTable,
    InvalidArgumentError,
    MalformedLineError,
    fold,
    parse
)
from .export import IniJsonDumper, IniYamlDumper

__all__ = [
    'IniTable', 'IniSection', 'IniParser', 'parse', 'fold',
    'MalformedLineError', 'InvalidArgumentError',
    'IniJsonDumper', 'IniYamlDumper'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
