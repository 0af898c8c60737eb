# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/02 22:04:51
# @Author : Kariko Lin

"""Plain INI reading, in two steps:

1. `strip_comments()` trims every line and cuts it at the first `;` or `#`.
   No quoting or escaping is honored, so `url = a#b` becomes `url = a`.
2. `parse()` walks the cleaned lines once, tracking the current section.

Line count is kept through step 1,
so line numbers in `MalformedLine` match the original text.
"""

import logging
from dataclasses import dataclass, field
from os import PathLike
from warnings import warn

from chardet import detect as guess_codec

from .model import Document, Section
from ..abstract import FileHandler
from ..errors import MalformedLine, OtherIoError, from_os_error

__all__ = ['strip_comments', 'parse', 'IniParser', 'parse_ini_file']

COMMENT_MARKERS = (';', '#')
KV_SEPARATOR = '='
CODEC_CONFIDENCE = 0.8

logger = logging.getLogger(__name__)


def _physical_lines(text: str) -> list[str]:
    # only '\n' counts, a trailing one doesn't open a new line.
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


def strip_comments(text: str) -> str:
    """Remove comments, keeping exactly one output line per input line."""
    ret = []
    for line in _physical_lines(text):
        line = line.strip()
        cut = min(
            (idx for i in COMMENT_MARKERS if (idx := line.find(i)) != -1),
            default=len(line))
        ret.append(line[:cut].rstrip() + '\n')
    return ''.join(ret)


@dataclass
class _Assembler:
    doc: Document = field(default_factory=Document)
    current: Section | None = None

    def feed(self, lineno: int, line: str) -> None:
        if not line:
            return
        if line.startswith('[') and line.endswith(']'):
            # repeated section reuses (merges into) the existing one.
            self.current = self.doc._setdefault(line[1:-1].strip())
            return
        key, sep, val = line.partition(KV_SEPARATOR)
        if not sep:
            raise MalformedLine(lineno, line, MalformedLine.NO_SEPARATOR)
        if self.current is None:
            raise MalformedLine(lineno, line, MalformedLine.NO_SECTION)
        Document._assign(self.current, key.strip(), val.strip())


def parse(text: str) -> Document:
    """Parse INI text into a `Document`.

    Raises:
        MalformedLine: on the first bad line, no partial result.
    """
    state = _Assembler()
    lines = _physical_lines(strip_comments(text))
    for lineno, line in enumerate(lines, start=1):
        state.feed(lineno, line.strip())
    logger.debug(
        'parsed %d line(s) into %d section(s)', len(lines), len(state.doc))
    return state.doc


class IniParser(FileHandler[Document]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def _decode(self, raw: bytes) -> str:
        if self._codec is not None:
            return raw.decode(self._codec)
        try:
            return raw.decode('utf-8-sig')
        except UnicodeDecodeError:
            pass

        codec = guess_codec(raw)
        if codec['encoding'] is None or codec['confidence'] < CODEC_CONFIDENCE:
            logger.warning(
                '%s: unable to guess the encoding, fallback to utf-8.',
                self._fn)
            codec = {'encoding': 'utf-8-sig'}
        else:
            logger.debug('%s: detected %s', self._fn, codec['encoding'])
        return raw.decode(codec['encoding'])

    def read(self) -> Document:
        """读取`IniParser`实例指定的文件。

        文件名不以`.ini`结尾时仅给出`UserWarning`，照常读取。
        I/O 失败会按种类转为对应的`IniIOError`子类。
        """
        return self._read(stacklevel=3)

    def _read(self, stacklevel: int) -> Document:
        # stacklevel points the warning at whoever called into the package.
        if not self._fn.endswith('.ini'):
            warn(f'"{self._fn}" must end with \'.ini\'.',
                 stacklevel=stacklevel)
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
            text = self._decode(raw)
        except (OSError, EOFError, UnicodeDecodeError) as e:
            raise from_os_error(self._fn, e) from e
        except LookupError as e:  # unknown codec name
            raise OtherIoError(self._fn, str(e)) from e
        return parse(text)

    def write(
        self, instance: Document, *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> None:
        """保存到一个 INI 文件。"""
        try:
            with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
                fp.write(instance.dumps(
                    delimiter=delimiter, blank_lines=blank_lines))
        except OSError as e:
            raise from_os_error(self._fn, e) from e

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


def parse_ini_file(
    filename: str | PathLike[str], encoding: str | None = None
) -> Document:
    return IniParser(filename, encoding)._read(stacklevel=3)
