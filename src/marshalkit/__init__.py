"""marshalkit.

Value types that control how byte sizes, checkboxes, durations, file modes
and URLs are written to and read from text and JSON.

Public API:
    >>> from marshalkit import Bytes, Duration
    >>> Bytes(12 * 1024).marshal_text()
    '12kB'
    >>> Duration.unmarshal_text("20h").marshal_text()
    '20h0m0s'
"""

from marshalkit.core.encoding import argparse_type, dumps, loads_as, to_jsonable
from marshalkit.core.exceptions import (
    DurationSyntaxError,
    InvalidDurationError,
    InvalidFormatError,
    InvalidOctalModeError,
    InvalidURLError,
    MarshalError,
)
from marshalkit.values import URL, Bytes, Checkbox, Duration, Mode, TextMarshaler

__version__ = "0.1.0"

__all__ = [
    "Bytes",
    "Checkbox",
    "Duration",
    "Mode",
    "URL",
    "TextMarshaler",
    "MarshalError",
    "InvalidFormatError",
    "InvalidDurationError",
    "DurationSyntaxError",
    "InvalidOctalModeError",
    "InvalidURLError",
    "argparse_type",
    "dumps",
    "loads_as",
    "to_jsonable",
]
