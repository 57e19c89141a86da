# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/14 09:42:17
# @Author : inireader contributors

from .model import IniSection, IniTable, InvalidArgumentError, fold
from .parser import IniParser, MalformedLineError, parse
