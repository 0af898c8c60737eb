# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:05:12
# @Author : Kariko Lin

import logging

from .errors import (
    IniError, MalformedLine, InvalidDocument, IniIOError,
    FileNotFound, PermissionDenied, InterruptedRead, UnexpectedEof,
    OtherIoError
)
from .ini import (
    Document, Section, IniParser, parse, parse_ini_file, strip_comments
)
from .export import IniJsonParser, IniYamlParser, to_json, to_yaml

__version__ = '0.2.0'

__all__ = [
    'Document', 'Section', 'IniParser',
    'parse', 'parse_ini_file', 'strip_comments',
    'IniJsonParser', 'IniYamlParser', 'to_json', 'to_yaml',
    'IniError', 'MalformedLine', 'InvalidDocument', 'IniIOError',
    'FileNotFound', 'PermissionDenied', 'InterruptedRead', 'UnexpectedEof',
    'OtherIoError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
