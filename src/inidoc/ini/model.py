# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 21:30:17
# @Author : Kariko Lin

"""
Basically INI structure: sections of `str: str` pairs, nothing nested.

Both types are read-only mappings. A document is built once,
either by `ini.parser` or from a plain nested dict.
"""

from collections.abc import Iterator, Mapping


class Section(Mapping[str, str]):
    """INI 小节字典。

    所有键值对均为`str: str`（值可以是空串）。重复的键以最后一次为准。
    """

    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = section_name
        # always owned; never keep ptr to caller's dict.
        self._data: dict[str, str] = dict(pairs) if pairs else {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class Document(Mapping[str, Section]):
    """INI 文件表示。形如：

        ```ini
        [section]
        key = value  ; 注释
        # 另一种注释
        [another]
        url = http://host/?a=b  ; 只按第一个`=`拆分
        ```

    以`doc.section(name)`访问时，找不到的小节返回空小节而不报错；
    `doc[name]`则与普通字典一样抛出`KeyError`。
    """

    def __init__(
        self, sections: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        self.__raw: dict[str, Section] = {}
        for name, pairs in (sections or {}).items():
            self.__raw[name] = Section(name, pairs)

    def __getitem__(self, key: str) -> Section:
        return self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Document):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __repr__(self) -> str:
        return f'Document({self.to_dict()!r})'

    def __str__(self) -> str:
        return self.dumps()

    def section(self, name: str) -> Section:
        """Get the section, or an empty (detached) one if `name` is absent."""
        if name in self.__raw:
            return self.__raw[name]
        return Section(name)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__raw.items()}

    def dumps(self, *, delimiter: str = ' = ', blank_lines: int = 0) -> str:
        """Render back to INI text, in insertion order.

        Args:
            delimiter: how to connect key with value?
            blank_lines: how many lines between sections?
        """
        chunks = []
        for data in self.__raw.values():
            lines = [str(data)]
            lines.extend(f'{k}{delimiter}{v}' for k, v in data.items())
            chunks.append('\n'.join(lines) + '\n')
        return ('\n' * blank_lines).join(chunks)

    # for ini.parser only.
    def _setdefault(self, name: str) -> Section:
        if name not in self.__raw:
            self.__raw[name] = Section(name)
        return self.__raw[name]

    @staticmethod
    def _assign(section: Section, key: str, value: str) -> None:
        section._data[key] = value
