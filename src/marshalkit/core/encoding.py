"""Helpers for serializing structures that embed marshalkit values.

``json`` writes ``int`` subclasses as plain numbers and knows nothing about
the other wrappers, so values are swapped for their JSON form before dumping.
"""

from __future__ import annotations

import argparse
import json
from typing import Any, Callable, Type, TypeVar

from marshalkit.core.exceptions import MarshalError
from marshalkit.values.base import TextMarshaler, TextInput

T = TypeVar("T", bound=TextMarshaler)


def to_jsonable(obj: Any) -> Any:
    """Recursively replace marshalkit values inside obj with their JSON values.

    - Dict keys that are marshalkit values become their text form.
    - Tuples become lists.
    - Everything else is returned untouched.
    """

    if isinstance(obj, TextMarshaler):
        return obj.to_json_value()

    if isinstance(obj, (list, tuple)):
        return [to_jsonable(x) for x in obj]

    if isinstance(obj, dict):
        return {
            (k.marshal_text() if isinstance(k, TextMarshaler) else k): to_jsonable(v)
            for k, v in obj.items()
        }

    return obj


def dumps(obj: Any, **kwargs: Any) -> str:
    return json.dumps(to_jsonable(obj), **kwargs)


def loads_as(cls: Type[T], data: TextInput) -> T:
    return cls.unmarshal_json(data)


def argparse_type(cls: Type[T]) -> Callable[[str], T]:
    """Return a callable usable as ``add_argument(type=...)``.

    Example:
        >>> parser.add_argument("--timeout", type=argparse_type(Duration))
    """

    def _parse(text: str) -> T:
        try:
            return cls.unmarshal_text(text)
        except MarshalError as e:
            raise argparse.ArgumentTypeError(f"{text!r}: {e}") from None

    _parse.__name__ = cls.__name__
    return _parse
