"""
Core type definitions: the tagged property value and geometry.
"""
import math
from typing import Any, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, model_validator


def format_number(value: Union[int, float]) -> str:
    """Render a number the way the editor displays it (``14.0`` -> ``14``)."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


class PropertyValue(BaseModel):
    """Closed tagged property value: string, number or boolean"""
    model_config = ConfigDict(frozen=True)

    type: Literal["string", "number", "boolean"]
    value: Union[StrictBool, StrictInt, StrictFloat, StrictStr]

    @model_validator(mode='after')
    def validate_tag_matches_value(self) -> 'PropertyValue':
        """Ensure the tag agrees with the payload"""
        value = self.value
        if self.type == "boolean":
            ok = isinstance(value, bool)
        elif self.type == "number":
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        else:
            ok = isinstance(value, str)
        if not ok:
            raise ValueError(f"Value {value!r} does not match property type '{self.type}'")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("Numeric property values must be finite")
        return self

    @classmethod
    def from_raw(cls, raw: Any) -> 'PropertyValue':
        """Build a tagged value from a decoded JSON scalar"""
        if isinstance(raw, PropertyValue):
            return raw
        if isinstance(raw, bool):
            return cls(type="boolean", value=raw)
        if isinstance(raw, (int, float)):
            return cls(type="number", value=raw)
        if isinstance(raw, str):
            return cls(type="string", value=raw)
        raise ValueError(
            f"Unsupported property value of type {type(raw).__name__}; "
            "expected string, number or boolean"
        )

    def render(self) -> str:
        """Text used when embedding the value into a generated document"""
        if self.type == "boolean":
            return "true" if self.value else "false"
        if self.type == "number":
            return format_number(self.value)
        return self.value

    def is_truthy(self) -> bool:
        """Empty strings, ``false`` and ``0`` count as absent"""
        return bool(self.value)


class Position(BaseModel):
    """Offset of a placed component from the canvas origin (top-left)"""
    model_config = ConfigDict(frozen=True)

    x: float = Field(default=0, allow_inf_nan=False, description="Horizontal offset in dp")
    y: float = Field(default=0, allow_inf_nan=False, description="Vertical offset in dp")


class Size(BaseModel):
    """Rendered size of a placed component"""
    model_config = ConfigDict(frozen=True)

    width: float = Field(default=0, ge=0, allow_inf_nan=False, description="Width in dp")
    height: float = Field(default=0, ge=0, allow_inf_nan=False, description="Height in dp")
