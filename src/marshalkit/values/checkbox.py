"""HTML-form style checkbox values.

A checked box is sent as the string ``"on"``; an unchecked one is encoded as
the JSON literal ``false``. Both ``true`` and ``false`` literals are accepted
on input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from marshalkit.core.exceptions import InvalidFormatError
from marshalkit.values.base import TextMarshaler, TextInput

logger = logging.getLogger(__name__)

ON = "on"
OFF = "off"

_TEXT_VALUES = {"on": True, "true": True, "off": False, "false": False}


@dataclass(frozen=True)
class Checkbox(TextMarshaler):
    value: bool = False

    error = InvalidFormatError

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise InvalidFormatError()

    def __bool__(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return self.marshal_text()

    def bool(self) -> bool:
        return self.value

    def marshal_text(self) -> str:
        return ON if self.value else OFF

    @classmethod
    def unmarshal_text(cls, text: TextInput) -> "Checkbox":
        token = cls._decode_text(text)
        if token not in _TEXT_VALUES:
            logger.debug("Rejected checkbox token %r", token)
            raise InvalidFormatError()
        return cls(_TEXT_VALUES[token])

    def to_json_value(self) -> Any:
        # Unchecked boxes are the bare literal, not "off".
        return ON if self.value else False

    @classmethod
    def from_json_value(cls, value: Any) -> "Checkbox":
        if isinstance(value, bool):
            return cls(value)
        if value == ON:
            return cls(True)
        logger.debug("Rejected checkbox JSON value %r", value)
        raise InvalidFormatError()

    @classmethod
    def from_primitive(cls, value: Any) -> "Checkbox":
        if isinstance(value, bool):
            return cls(value)
        raise InvalidFormatError()

    @classmethod
    def _json_schema(cls) -> Dict[str, Any]:
        return {"anyOf": [{"type": "string", "enum": [ON]}, {"type": "boolean"}]}
