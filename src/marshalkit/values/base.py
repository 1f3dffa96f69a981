"""Shared text/JSON codec contract for marshalkit value types.

Each value type implements ``marshal_text`` and ``unmarshal_text``; the JSON
codec is derived from the text codec here. Types whose JSON form is not simply
the quoted text form (the checkbox) override ``to_json_value`` and
``from_json_value``.

The pydantic hook lets every type be used directly as a model field:

    >>> class Limits(BaseModel):
    ...     max_upload: Bytes
    >>> Limits.model_validate_json('{"max_upload": "250kB"}').max_upload
    Bytes(256000)
"""

from __future__ import annotations

import json
from typing import Any, ClassVar, Dict, Type, TypeVar, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from marshalkit.core.exceptions import MarshalError

T = TypeVar("T", bound="TextMarshaler")

TextInput = Union[str, bytes, bytearray]


class TextMarshaler:
    """Mixin implementing the JSON codec on top of the text codec."""

    # Raised for input of the wrong JSON kind or undecodable input.
    error: ClassVar[Type[MarshalError]] = MarshalError

    def marshal_text(self) -> str:
        raise NotImplementedError

    @classmethod
    def unmarshal_text(cls: Type[T], text: TextInput) -> T:
        raise NotImplementedError

    def to_json_value(self) -> Any:
        """Return the JSON-compatible Python value for this instance."""
        return self.marshal_text()

    @classmethod
    def from_json_value(cls: Type[T], value: Any) -> T:
        """Build an instance from an already decoded JSON value."""
        if not isinstance(value, str) or not value:
            raise cls.error()
        return cls.unmarshal_text(value)

    @classmethod
    def from_primitive(cls: Type[T], value: Any) -> T:
        """Build an instance from the wrapped primitive (int, bool, ...)."""
        raise cls.error()

    def marshal_json(self) -> str:
        return json.dumps(self.to_json_value())

    @classmethod
    def unmarshal_json(cls: Type[T], data: TextInput) -> T:
        try:
            value = json.loads(data)
        except ValueError:
            raise cls.error() from None
        return cls.from_json_value(value)

    @classmethod
    def _decode_text(cls, text: TextInput) -> str:
        if isinstance(text, (bytes, bytearray)):
            try:
                return bytes(text).decode("utf-8")
            except UnicodeDecodeError:
                raise cls.error() from None
        if not isinstance(text, str):
            raise cls.error()
        return text

    @classmethod
    def _validate_python(cls: Type[T], value: Any) -> T:
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, bytes, bytearray)):
            return cls.unmarshal_text(value)
        return cls.from_primitive(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_plain_validator_function(cls.from_json_value),
            python_schema=core_schema.no_info_plain_validator_function(cls._validate_python),
            # Both dump modes emit the JSON value.
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_json_value(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return cls._json_schema()

    @classmethod
    def _json_schema(cls) -> Dict[str, Any]:
        return {"type": "string"}
