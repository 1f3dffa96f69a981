"""Human readable byte sizes.

Sizes use binary multiples with the unit names ``kB``, ``MB`` ... ``EB``.
Formatting picks the largest unit not exceeding the value and keeps one
decimal digit below ten units, so ``1024`` is ``1.0kB`` while ``12288`` is
``12kB`` and ``1000 * 1024 ** 2`` stays ``1000MB``.
"""

from __future__ import annotations

import decimal
import logging
import math
import re
from typing import Any

from marshalkit.core.exceptions import InvalidFormatError
from marshalkit.values.base import TextMarshaler, TextInput

logger = logging.getLogger(__name__)

MAX_BYTES = 2**64 - 1

UNITS = {
    "B": 1,
    "kB": 1024,
    "MB": 1024**2,
    "GB": 1024**3,
    "TB": 1024**4,
    "PB": 1024**5,
    "EB": 1024**6,
}

# Largest first, "B" is handled separately.
_FORMAT_UNITS = sorted(((m, u) for u, m in UNITS.items() if m > 1), reverse=True)

_PATTERN = re.compile(
    r"(?P<number>(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    r"(?P<unit>[kMGTPE]?B)"
)


def format_bytes(value: int) -> str:
    if not 0 <= value <= MAX_BYTES:
        raise InvalidFormatError()
    if value < 1024:
        return f"{value}B"
    for multiplier, unit in _FORMAT_UNITS:
        if value >= multiplier:
            break
    quotient = math.floor(value / multiplier * 10 + 0.5) / 10
    if quotient < 10:
        return f"{quotient:.1f}{unit}"
    return f"{quotient:.0f}{unit}"


def parse_bytes(text: str) -> int:
    """Parse strings like ``250kB`` or ``1.5GB`` into a byte count.

    Raises:
        InvalidFormatError: unknown unit, malformed number or out of range
    """
    match = _PATTERN.fullmatch(text.strip())
    if match is None:
        logger.debug("Rejected byte size %r", text)
        raise InvalidFormatError()
    try:
        multiplier = UNITS[match.group("unit")]
        number = decimal.Decimal(match.group("number")) * multiplier
        if number > MAX_BYTES:
            # "16EB" is how format_bytes rounds the largest counts.
            if number - MAX_BYTES > multiplier // 10:
                raise InvalidFormatError()
            return MAX_BYTES
        return int(number.to_integral_value(rounding=decimal.ROUND_HALF_EVEN))
    except (decimal.DecimalException, InvalidFormatError):
        logger.debug("Byte size %r is out of range", text)
        raise InvalidFormatError() from None


class Bytes(TextMarshaler, int):
    """Number of bytes, rendered as ``1.0kB``, ``12kB``, ``1000MB`` ..."""

    error = InvalidFormatError

    def __new__(cls, value: int = 0):
        if not 0 <= value <= MAX_BYTES:
            raise InvalidFormatError()
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Bytes({int(self)})"

    def bytes(self) -> int:
        return int(self)

    def marshal_text(self) -> str:
        return format_bytes(int(self))

    @classmethod
    def unmarshal_text(cls, text: TextInput) -> "Bytes":
        return cls(parse_bytes(cls._decode_text(text)))

    @classmethod
    def from_primitive(cls, value: Any) -> "Bytes":
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise InvalidFormatError()
