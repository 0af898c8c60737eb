# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:29:40
# @Author : Kariko Lin

from .model import Section, Document
from .parser import IniParser, parse, parse_ini_file, strip_comments
