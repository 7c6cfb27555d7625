"""
Maps generic canvas properties to Android XML attributes.
"""
from typing import Dict, Optional
from xml.sax.saxutils import escape

from canvas_export.models.schemas import PropertyValue


# Canvas property key -> Android attribute name
ATTRIBUTE_MAP: Dict[str, str] = {
    "text": "android:text",
    "hint": "android:hint",
    "textSize": "android:textSize",
    "textColor": "android:textColor",
    "backgroundColor": "android:background",
    "gravity": "android:gravity",
    "inputType": "android:inputType",
    "maxLines": "android:maxLines",
    "scaleType": "android:scaleType",
    "checked": "android:checked",
    "orientation": "android:orientation",
}

_ATTRIBUTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_attribute(text: str) -> str:
    """Escape text for use inside a double-quoted XML attribute"""
    return escape(text, _ATTRIBUTE_ENTITIES)


def escape_text(text: str) -> str:
    """Escape text for use as XML element content"""
    return escape(text)


def map_property(key: str, value: PropertyValue, escape_values: bool = False) -> Optional[str]:
    """
    Translate one canvas property into an Android attribute.

    Args:
        key: Canvas property key (e.g. ``textColor``)
        value: Tagged property value
        escape_values: XML-escape the rendered value

    Returns:
        ``attr="value"``, or None when the key is not on the whitelist
    """
    attribute = ATTRIBUTE_MAP.get(key)
    if attribute is None:
        return None

    rendered = value.render()
    if escape_values:
        rendered = escape_attribute(rendered)
    return f'{attribute}="{rendered}"'
