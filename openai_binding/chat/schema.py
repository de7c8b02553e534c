"""JSON-Schema-like parameter descriptor for function declarations."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from ..models.base import APIModel


class JSONSchema(APIModel):
    """Recursive schema node; unset members are omitted on the wire."""

    type: Optional[str] = None
    description: Optional[str] = None
    properties: Optional[Dict[str, "JSONSchema"]] = None
    required: Optional[List[str]] = None
    enum: Optional[List[Any]] = None
    items: Optional["JSONSchema"] = None
    additional_properties: Optional["JSONSchema"] = Field(default=None, alias="additionalProperties")
    ref: Optional[str] = Field(default=None, alias="$ref")
    any_of: Optional[List["JSONSchema"]] = Field(default=None, alias="anyOf")
    all_of: Optional[List["JSONSchema"]] = Field(default=None, alias="allOf")
    one_of: Optional[List["JSONSchema"]] = Field(default=None, alias="oneOf")
    default: Optional[Any] = None
    pattern: Optional[str] = None
    min_items: Optional[int] = Field(default=None, alias="minItems")
    max_items: Optional[int] = Field(default=None, alias="maxItems")
    unique_items: Optional[bool] = Field(default=None, alias="uniqueItems")
    multiple_of: Optional[float] = Field(default=None, alias="multipleOf")
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_minimum: Optional[bool] = Field(default=None, alias="exclusiveMinimum")
    exclusive_maximum: Optional[bool] = Field(default=None, alias="exclusiveMaximum")


class Function(APIModel):
    """A function the model may call.

    ``name`` is the caller-defined identifier; ``parameters`` describes the
    arguments object the model should produce.
    """

    name: str
    description: Optional[str] = None
    parameters: Optional[JSONSchema] = None


__all__ = ["JSONSchema", "Function"]
