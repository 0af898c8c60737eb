# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/11/03 14:22:36
# @Author : Kariko Lin

"""Convert a `Document` from/to JSON and YAML.

Both keep the same shape as `Document.to_dict()`:
an object of sections, each an object of string pairs.
"""

import json
from collections.abc import Mapping
from os import PathLike
from typing import Any

import yaml

from .abstract import FileHandler
from .errors import InvalidDocument, from_os_error
from .ini.model import Document


def _validate(src: Any) -> Document:
    if not isinstance(src, Mapping):
        raise InvalidDocument(
            f'expected a mapping of sections, got {type(src).__name__}.')
    for name, pairs in src.items():
        if not isinstance(name, str) or not isinstance(pairs, Mapping):
            raise InvalidDocument(f'section {name!r} is not a mapping.')
        for k, v in pairs.items():
            # no type coercion: values must already be text.
            if not isinstance(k, str) or not isinstance(v, str):
                raise InvalidDocument(
                    f'[{name}] {k!r} = {v!r} is not a pair of strings.')
    return Document(src)


def to_json(doc: Document, indent: int | None = 2) -> str:
    return json.dumps(doc.to_dict(), ensure_ascii=False, indent=indent)


def to_yaml(doc: Document) -> str:
    # pyyaml sorts keys by default, which loses the file order.
    return yaml.safe_dump(
        doc.to_dict(), allow_unicode=True, sort_keys=False,
        default_flow_style=False)


class IniJsonParser(FileHandler[Document]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> Document:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                src = json.load(fp)
        except json.JSONDecodeError as e:
            raise InvalidDocument(f'{self._fn}: {e}') from e
        except (OSError, UnicodeDecodeError) as e:
            raise from_os_error(self._fn, e) from e
        return _validate(src)

    def write(self, instance: Document, indent: int | None = 2) -> None:
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                fp.write(to_json(instance, indent))
        except OSError as e:
            raise from_os_error(self._fn, e) from e


class IniYamlParser(FileHandler[Document]):
    """YAML 形式的 INI 文档。

    注意：YAML 会把`1`、`yes`之类的值读成数字或布尔，
    这里不做类型转换，遇到非字符串的值直接报`InvalidDocument`。
    写出时 pyyaml 会自动给这类值加引号。
    """
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> Document:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                src = yaml.safe_load(fp)
        except yaml.YAMLError as e:
            raise InvalidDocument(f'{self._fn}: {e}') from e
        except (OSError, UnicodeDecodeError) as e:
            raise from_os_error(self._fn, e) from e
        # empty yaml
        return _validate({} if src is None else src)

    def write(self, instance: Document) -> None:
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                fp.write(to_yaml(instance))
        except OSError as e:
            raise from_os_error(self._fn, e) from e
