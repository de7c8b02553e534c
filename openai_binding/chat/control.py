"""Function-call control values for chat requests.

The ``function_call`` directive of a chat request is a closed union of three
variants, each with its own wire shape:

- :data:`FUNCTION_CALL_NONE` -> ``"none"`` (the model must not call a function)
- :data:`FUNCTION_CALL_AUTO` -> ``"auto"`` (the model decides)
- ``FunctionCallName("f")`` -> ``{"name": "f"}`` (the model must call ``f``)

Variants are frozen dataclasses, so they are hashable and compare by value.
``encode_function_call_control`` is the single serialization point;
``decode_function_call_control`` accepts the three wire shapes back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from ..base.errors import DecodeError, InvalidArgumentError


@dataclass(frozen=True)
class FunctionCallNone:
    """The model must not call any function."""


@dataclass(frozen=True)
class FunctionCallAuto:
    """The model chooses whether to call a function."""


@dataclass(frozen=True)
class FunctionCallName:
    """The model is forced to call the function ``name``.

    Raises:
        InvalidArgumentError: if ``name`` is empty or whitespace.
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("function name must be a non-empty string")


FunctionCallControl = Union[FunctionCallNone, FunctionCallAuto, FunctionCallName]

FUNCTION_CALL_NONE = FunctionCallNone()
FUNCTION_CALL_AUTO = FunctionCallAuto()


def function_call_name(name: str) -> FunctionCallName:
    """Return the control value forcing a call to ``name``."""
    return FunctionCallName(name)


def encode_function_call_control(value: FunctionCallControl) -> Union[str, Dict[str, str]]:
    """Return the wire shape of a control value.

    Raises:
        InvalidArgumentError: if ``value`` is not one of the three variants.
    """
    if isinstance(value, FunctionCallNone):
        return "none"
    if isinstance(value, FunctionCallAuto):
        return "auto"
    if isinstance(value, FunctionCallName):
        return {"name": value.name}
    raise InvalidArgumentError(f"unsupported function_call control value: {value!r}")


def decode_function_call_control(raw: Any) -> FunctionCallControl:
    """Parse a wire shape back into a control value.

    Accepts ``"none"``, ``"auto"`` or an object with a non-empty string
    ``name``. Any other JSON value is a format error.

    Raises:
        DecodeError: for any other shape.
    """
    if raw == "none":
        return FUNCTION_CALL_NONE
    if raw == "auto":
        return FUNCTION_CALL_AUTO
    if isinstance(raw, Mapping):
        name = raw.get("name")
        if isinstance(name, str) and name.strip():
            return FunctionCallName(name)
    raise DecodeError(f"invalid function_call control value: {raw!r}")


def is_function_call_control(value: Any) -> bool:
    """Whether ``value`` is one of the three control variants."""
    return isinstance(value, (FunctionCallNone, FunctionCallAuto, FunctionCallName))


__all__ = [
    "FunctionCallNone",
    "FunctionCallAuto",
    "FunctionCallName",
    "FunctionCallControl",
    "FUNCTION_CALL_NONE",
    "FUNCTION_CALL_AUTO",
    "function_call_name",
    "encode_function_call_control",
    "decode_function_call_control",
    "is_function_call_control",
]
