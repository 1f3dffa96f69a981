"""Value types with text and JSON codecs.

Each type can be used on its own, embedded in pydantic models, or passed as
an ``argparse`` ``type=`` through ``marshalkit.core.encoding.argparse_type``.
"""

from marshalkit.values.base import TextMarshaler
from marshalkit.values.byte_size import Bytes, format_bytes, parse_bytes
from marshalkit.values.checkbox import Checkbox
from marshalkit.values.duration import Duration, format_duration, parse_duration
from marshalkit.values.file_mode import Mode, format_mode, parse_mode
from marshalkit.values.url import URL, format_url, parse_url

__all__ = [
    "TextMarshaler",
    "Bytes",
    "Checkbox",
    "Duration",
    "Mode",
    "URL",
    "format_bytes",
    "parse_bytes",
    "format_duration",
    "parse_duration",
    "format_mode",
    "parse_mode",
    "format_url",
    "parse_url",
]
