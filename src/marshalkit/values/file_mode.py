"""POSIX permission bits written as three octal digits (``644``)."""

from __future__ import annotations

import logging
import re
import stat
from typing import Any

from marshalkit.core.exceptions import InvalidOctalModeError
from marshalkit.values.base import TextMarshaler, TextInput

logger = logging.getLogger(__name__)

MAX_MODE = 0o777

_OCTAL = re.compile(r"[0-7]+")


def format_mode(value: int) -> str:
    if not 0 <= value <= MAX_MODE:
        logger.debug("Mode %r is outside 000-777", value)
        raise InvalidOctalModeError()
    return f"{value:03o}"


def parse_mode(text: str) -> int:
    # Only the digits are checked; "1000" parses and fails when formatted.
    if not _OCTAL.fullmatch(text):
        logger.debug("Rejected octal mode %r", text)
        raise InvalidOctalModeError()
    return int(text, 8)


class Mode(TextMarshaler, int):
    error = InvalidOctalModeError

    def __repr__(self) -> str:
        return f"Mode({int(self):#o})"

    def file_mode(self) -> int:
        """Permission bits as accepted by ``os.chmod``."""
        return int(self)

    def symbolic(self) -> str:
        """``ls -l`` style permissions, e.g. ``rw-r--r--``."""
        format_mode(int(self))
        return stat.filemode(int(self))[1:]

    def marshal_text(self) -> str:
        return format_mode(int(self))

    @classmethod
    def unmarshal_text(cls, text: TextInput) -> "Mode":
        return cls(parse_mode(cls._decode_text(text)))

    @classmethod
    def from_primitive(cls, value: Any) -> "Mode":
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise InvalidOctalModeError()
