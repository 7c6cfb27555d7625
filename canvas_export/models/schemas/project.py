"""
Canvas model received from the editor.

The editor posts either a flat component shape::

    {"kind": "Button", "position": {...}, "size": {...}, "properties": {...}}

or its own nested shape, where the widget type lives under ``component``::

    {"id": "c-1", "component": {"type": "Button", "name": "Button"}, ...}

Both decode into the same ``PlacedComponent``.
"""
import re
from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from .core import PropertyValue, Position, Size, format_number


DEFAULT_PACKAGE_NAME = "com.androidbuilder.app"
DEFAULT_TARGET_SDK = "34"
DEFAULT_MIN_SDK = "21"
DEFAULT_VERSION_CODE = "1"
DEFAULT_VERSION_NAME = "1.0.0"

# Java identifier segments joined by dots
KIND_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class ProjectSettings(BaseModel):
    """Project-level build settings; absent fields resolve to defaults"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    theme: Optional[str] = None
    target_sdk_version: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("target_sdk_version", "targetSdkVersion", "targetSdk"),
    )
    min_sdk_version: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("min_sdk_version", "minSdkVersion", "minSdk"),
    )
    package_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("package_name", "packageName"),
    )
    version_code: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("version_code", "versionCode"),
    )
    version_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("version_name", "versionName"),
    )

    @field_validator('*', mode='before')
    @classmethod
    def coerce_setting(cls, v: Any) -> Any:
        """Numbers become strings; blank strings count as absent"""
        if isinstance(v, bool):
            return v
        if isinstance(v, (int, float)):
            return format_number(v)
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def resolved_package_name(self) -> str:
        return self.package_name or DEFAULT_PACKAGE_NAME

    @property
    def resolved_target_sdk(self) -> str:
        return self.target_sdk_version or DEFAULT_TARGET_SDK

    @property
    def resolved_min_sdk(self) -> str:
        return self.min_sdk_version or DEFAULT_MIN_SDK

    @property
    def resolved_version_code(self) -> str:
        return self.version_code or DEFAULT_VERSION_CODE

    @property
    def resolved_version_name(self) -> str:
        return self.version_name or DEFAULT_VERSION_NAME


class PlacedComponent(BaseModel):
    """One widget instance dropped on the canvas"""
    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., min_length=1, description="Widget type tag, e.g. Button")
    name: Optional[str] = Field(default=None, description="Display name shown in the palette")
    instance_id: Optional[str] = Field(default=None, description="Editor canvas instance id")
    position: Position = Field(default_factory=Position)
    size: Size = Field(default_factory=Size)
    properties: Dict[str, PropertyValue] = Field(default_factory=dict)

    @model_validator(mode='before')
    @classmethod
    def unwrap_editor_shape(cls, data: Any) -> Any:
        """Lift ``component.type``/``component.name`` into the flat shape"""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        nested = data.pop("component", None)
        if not isinstance(nested, dict):
            nested = {}

        if "kind" not in data:
            kind = data.pop("type", None) or nested.get("type")
            if kind is not None:
                data["kind"] = kind

        if data.get("name") is None and nested.get("name") is not None:
            data["name"] = nested["name"]

        if "instance_id" not in data and "id" in data:
            instance_id = data.pop("id")
            data["instance_id"] = None if instance_id is None else str(instance_id)

        # The editor may omit geometry; both default to zeros
        for key in ("position", "size"):
            if data.get(key) is None:
                data.pop(key, None)

        if data.get("properties") is None:
            data["properties"] = nested.get("properties") or {}

        return data

    @field_validator('kind')
    @classmethod
    def validate_kind(cls, v: str) -> str:
        """Kind becomes an XML tag and a Java type: a simple or dotted name"""
        v = v.strip()
        if not KIND_PATTERN.match(v):
            raise ValueError(
                f"Invalid component kind: {v!r}. Expected a name like Button "
                "or androidx.cardview.widget.CardView"
            )
        return v

    @field_validator('properties', mode='before')
    @classmethod
    def tag_property_values(cls, v: Any) -> Any:
        """Convert raw scalars into tagged values, dropping nulls"""
        if not isinstance(v, dict):
            return v
        tagged = {}
        for key, raw in v.items():
            if raw is None:
                continue
            if isinstance(raw, dict) and set(raw) == {"type", "value"}:
                tagged[str(key)] = PropertyValue.model_validate(raw)
            else:
                tagged[str(key)] = PropertyValue.from_raw(raw)
        return tagged

    @property
    def display_name(self) -> str:
        return self.name or self.kind


class ProjectRecord(BaseModel):
    """The canvas model: identity, ordered components, and settings"""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None
    description: str = ""
    components: List[PlacedComponent] = Field(default_factory=list)
    settings: ProjectSettings = Field(default_factory=ProjectSettings)

    @field_validator('id', 'name', mode='before')
    @classmethod
    def coerce_identity(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return format_number(v)
        return v

    @field_validator('description', mode='before')
    @classmethod
    def default_description(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator('components', mode='before')
    @classmethod
    def default_components(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator('settings', mode='before')
    @classmethod
    def default_settings(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def is_identified(self) -> bool:
        """True when both ``id`` and ``name`` are present and non-empty"""
        return bool(self.id) and bool(self.name)
