from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import SplitResult, urlsplit, urlunsplit

from marshalkit.core.exceptions import InvalidURLError
from marshalkit.values.base import TextMarshaler, TextInput

logger = logging.getLogger(__name__)


def format_url(parts: SplitResult) -> str:
    return urlunsplit(parts)


def parse_url(text: str) -> SplitResult:
    """Split ``text`` with ``urllib.parse``; no further validation is done."""
    if not text:
        raise InvalidURLError()
    try:
        parts = urlsplit(text)
        # Port errors are only raised on access.
        parts.port
    except ValueError as e:
        logger.debug("Rejected url %r: %s", text, e)
        raise InvalidURLError() from None
    return parts


@dataclass(frozen=True)
class URL(TextMarshaler):
    parts: SplitResult

    error = InvalidURLError

    @classmethod
    def _json_schema(cls) -> Dict[str, Any]:
        return {"type": "string", "format": "uri"}

    def __str__(self) -> str:
        return self.marshal_text()

    @property
    def scheme(self) -> str:
        return self.parts.scheme

    @property
    def hostname(self) -> Optional[str]:
        return self.parts.hostname

    @property
    def port(self) -> Optional[int]:
        return self.parts.port

    def geturl(self) -> str:
        return self.parts.geturl()

    def marshal_text(self) -> str:
        return format_url(self.parts)

    @classmethod
    def unmarshal_text(cls, text: TextInput) -> "URL":
        return cls(parse_url(cls._decode_text(text)))

    @classmethod
    def from_primitive(cls, value: Any) -> "URL":
        if isinstance(value, SplitResult):
            return cls(value)
        raise InvalidURLError()
