# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 21:15:03
# @Author : Kariko Lin

"""Errors raised by `inidoc`.

They carry data only. How to show them (colors etc.) is up to the caller,
see `inidoc.cli`.
"""


class IniError(Exception):
    """Base of every error raised by this package."""
    pass


class MalformedLine(IniError):
    """A line which is neither blank, a `[section]` header,
    nor a usable `key = value` pair."""
    NO_SEPARATOR = 'expected "key = value" pair'
    NO_SECTION = 'key/value pair outside of any section'

    def __init__(
        self, line_number: int, text: str, reason: str = NO_SEPARATOR
    ) -> None:
        self.line_number = line_number
        self.text = text
        self.reason = reason
        super().__init__(f'line {line_number}: {reason}: {text!r}')


class InvalidDocument(IniError):
    """Converter input that doesn't look like `{section: {key: value}}`."""
    pass


class IniIOError(IniError):
    """Reading (or writing) a file failed.

    Always chained to the original `OSError` (see `__cause__`).
    """
    def __init__(self, filename: str, detail: str) -> None:
        self.filename = filename
        super().__init__(f'Unable to access {filename}: {detail}.')


class FileNotFound(IniIOError):
    pass


class PermissionDenied(IniIOError):
    pass


class InterruptedRead(IniIOError):
    pass


class UnexpectedEof(IniIOError):
    pass


class OtherIoError(IniIOError):
    pass


# checked in order, subclasses before `OSError`.
_IO_KINDS: tuple[tuple[type[BaseException], type[IniIOError], str], ...] = (
    (FileNotFoundError, FileNotFound, 'not found'),
    (PermissionError, PermissionDenied, 'permission denied'),
    (InterruptedError, InterruptedRead,
     'the read operation was interrupted by a signal'),
    (EOFError, UnexpectedEof, 'unexpected end of file'),
    (UnicodeDecodeError, OtherIoError, 'content is not decodable text'),
)


def from_os_error(filename: str, err: BaseException) -> IniIOError:
    """Map an I/O failure onto its `IniIOError` kind (not raised here)."""
    for cause, kind, detail in _IO_KINDS:
        if isinstance(err, cause):
            return kind(filename, detail)
    return OtherIoError(filename, str(err) or 'unknown error occurred')
