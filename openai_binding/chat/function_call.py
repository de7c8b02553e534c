"""Function-call argument codec.

On the wire a function call looks like::

    {"name": "get_weather", "arguments": "{\\"city\\": \\"Paris\\"}"}

``arguments`` is a JSON document *encoded inside a string*. :class:`FunctionCall`
hides that quirk: in memory ``arguments`` is a plain ``dict`` and the string
encoding happens only at the serialization boundary (``to_wire`` and any
pydantic dump of a model embedding a ``FunctionCall``).
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_serializer

from ..base.errors import DecodeError, TypeMismatchError

FunctionCallArguments = Dict[str, Any]

T = TypeVar("T")

MISSING = "missing"


def decode_arguments(text: Union[str, bytes]) -> FunctionCallArguments:
    """Parse a string-encoded arguments document into a mapping.

    JSON ``null`` decodes to an empty mapping.

    Raises:
        DecodeError: if ``text`` is not valid JSON or not a JSON object.
    """
    try:
        value = json.loads(text)
    except ValueError as exc:
        raise DecodeError(f"function call arguments are not valid JSON: {exc}", raw=exc) from exc
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"function call arguments must be a JSON object, got {type(value).__name__}")
    return value


def encode_arguments(arguments: Mapping[str, Any]) -> str:
    """Encode a mapping as the string carried in the ``arguments`` field."""
    return json.dumps(dict(arguments), ensure_ascii=False)


def _type_name(value: Any) -> str:
    return type(value).__name__


def function_call_argument_value(name: str, arguments: Mapping[str, Any], expected: Type[T]) -> T:
    """Return ``arguments[name]`` if it has type ``expected``.

    JSON has a single number type, so an ``int`` satisfies ``float`` (and is
    returned as ``float``). ``bool`` never satisfies ``int`` or ``float``.

    Raises:
        TypeMismatchError: when the argument is missing or of another type.
            ``actual`` is ``"missing"`` for absent arguments.
    """
    if name not in arguments:
        raise TypeMismatchError(name, MISSING, expected.__name__)
    value = arguments[name]
    if isinstance(value, bool) and expected is not bool:
        raise TypeMismatchError(name, _type_name(value), expected.__name__)
    if expected is float and isinstance(value, int):
        return float(value)  # type: ignore[return-value]
    if not isinstance(value, expected):
        raise TypeMismatchError(name, _type_name(value), expected.__name__)
    return value


class FunctionCall(BaseModel):
    """A function invocation requested by the model.

    Parameters
    ----------
    name:
        The function the model wants to call.
    arguments:
        Decoded arguments. Accepts a mapping, or the wire string which is
        parsed on validation (``DecodeError`` on malformed input).
    """

    name: str
    arguments: FunctionCallArguments = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _decode_wire_arguments(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, (str, bytes)):
            return decode_arguments(value)
        return value

    @model_serializer(mode="plain")
    def _serialize(self) -> Dict[str, str]:
        return {"name": self.name, "arguments": encode_arguments(self.arguments)}

    @classmethod
    def from_wire(cls, raw: Union[str, bytes, Mapping[str, Any]]) -> "FunctionCall":
        """Decode ``{"name": str, "arguments": "<json string>"}``.

        Raises:
            DecodeError: if the outer document or the arguments string is
                malformed.
        """
        if isinstance(raw, (str, bytes)):
            try:
                raw = json.loads(raw)
            except ValueError as exc:
                raise DecodeError(f"function call is not valid JSON: {exc}", raw=exc) from exc
        if not isinstance(raw, Mapping):
            raise DecodeError("function call must be a JSON object")
        name = raw.get("name")
        arguments = raw.get("arguments")
        if not isinstance(name, str):
            raise DecodeError("function call name must be a string")
        if not isinstance(arguments, str):
            raise DecodeError("function call arguments must be a JSON-encoded string")
        try:
            return cls(name=name, arguments=decode_arguments(arguments))
        except ValidationError as exc:
            raise DecodeError(f"invalid function call: {exc}", raw=exc) from exc

    def to_wire(self) -> Dict[str, str]:
        """Return the wire object with ``arguments`` encoded as a string."""
        return self.model_dump()

    def to_json(self) -> str:
        return json.dumps(self.to_wire(), ensure_ascii=False)

    def argument(self, name: str, expected: Type[T]) -> T:
        """Typed accessor; see :func:`function_call_argument_value`."""
        return function_call_argument_value(name, self.arguments, expected)


__all__ = [
    "FunctionCall",
    "FunctionCallArguments",
    "decode_arguments",
    "encode_arguments",
    "function_call_argument_value",
]
