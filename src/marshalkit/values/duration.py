"""Signed time spans with nanosecond resolution.

Durations are written as a sequence of decimal numbers with unit suffixes,
for example ``300ms``, ``-1.5h`` or ``2h45m``. Valid units are ``ns``,
``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``.
"""

from __future__ import annotations

import logging
import re
from datetime import timedelta
from typing import Any

from marshalkit.core.exceptions import DurationSyntaxError, InvalidDurationError
from marshalkit.values.base import TextMarshaler, TextInput

logger = logging.getLogger(__name__)

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

MIN_DURATION = -(1 << 63)
MAX_DURATION = (1 << 63) - 1

UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_ITEM = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)")


def _with_fraction(value: int, unit: int) -> str:
    whole, rest = divmod(value, unit)
    digits = len(str(unit)) - 1
    fraction = f"{rest:0{digits}d}".rstrip("0")
    if fraction:
        return f"{whole}.{fraction}"
    return str(whole)


def format_duration(ns: int) -> str:
    """Render a nanosecond count, e.g. ``-1ns``, ``1.5s``, ``20h0m0s``."""
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    u = abs(ns)

    if u < SECOND:
        if u < MICROSECOND:
            return f"{sign}{u}ns"
        if u < MILLISECOND:
            return f"{sign}{_with_fraction(u, MICROSECOND)}us"
        return f"{sign}{_with_fraction(u, MILLISECOND)}ms"

    minutes, rest = divmod(u, MINUTE)
    text = f"{_with_fraction(rest, SECOND)}s"
    if minutes:
        hours, minutes = divmod(minutes, 60)
        text = f"{minutes}m{text}"
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def parse_duration(text: str) -> int:
    """Parse a duration string into nanoseconds.

    The bare literal ``0`` is accepted without a unit.

    Raises:
        DurationSyntaxError: message names the offending input
    """
    s = text
    negative = False
    if s and s[0] in "-+":
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return 0
    if not s:
        raise _invalid(text)

    total = 0
    while s:
        match = _ITEM.match(s)
        whole, frac, unit = match.group("whole"), match.group("frac"), match.group("unit")
        if not whole and not frac:
            raise _invalid(text)
        if not unit:
            logger.debug("Duration %r is missing a unit", text)
            raise DurationSyntaxError(f"time: missing unit in duration {text}")
        if unit not in UNITS:
            logger.debug("Duration %r has unknown unit %r", text, unit)
            raise DurationSyntaxError(f"time: unknown unit {unit} in duration {text}")

        scale = UNITS[unit]
        total += int(whole or "0") * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        if total > -MIN_DURATION:
            raise _invalid(text)
        s = s[match.end():]

    if negative:
        return -total
    if total > MAX_DURATION:
        raise _invalid(text)
    return total


def _invalid(text: str) -> DurationSyntaxError:
    logger.debug("Rejected duration %r", text)
    return DurationSyntaxError(f"time: invalid duration {text}")


class Duration(TextMarshaler, int):
    """Nanosecond count rendered with the duration grammar (``1h30m0s``)."""

    error = InvalidDurationError

    def __new__(cls, value: int = 0):
        if not MIN_DURATION <= value <= MAX_DURATION:
            raise InvalidDurationError()
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Duration({int(self)})"

    def nanoseconds(self) -> int:
        return int(self)

    def to_timedelta(self) -> timedelta:
        """Convert to ``timedelta``, truncating below microseconds."""
        microseconds = abs(int(self)) // MICROSECOND
        if self < 0:
            microseconds = -microseconds
        return timedelta(microseconds=microseconds)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> "Duration":
        seconds = td.days * 86400 + td.seconds
        return cls(seconds * SECOND + td.microseconds * MICROSECOND)

    def marshal_text(self) -> str:
        return format_duration(int(self))

    @classmethod
    def unmarshal_text(cls, text: TextInput) -> "Duration":
        try:
            decoded = cls._decode_text(text)
        except InvalidDurationError:
            shown = bytes(text).decode("utf-8", "replace") if isinstance(text, (bytes, bytearray)) else text
            raise DurationSyntaxError(f"time: invalid duration {shown}") from None
        return cls(parse_duration(decoded))

    @classmethod
    def from_primitive(cls, value: Any) -> "Duration":
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, timedelta):
            return cls.from_timedelta(value)
        raise InvalidDurationError()
