"""
Schema package for the canvas export service.

Canvas model in, generated project documents out.
"""

from .core import (
    PropertyValue,
    Position,
    Size,
    format_number,
)

from .project import (
    DEFAULT_PACKAGE_NAME,
    DEFAULT_TARGET_SDK,
    DEFAULT_MIN_SDK,
    DEFAULT_VERSION_CODE,
    DEFAULT_VERSION_NAME,
    ProjectSettings,
    PlacedComponent,
    ProjectRecord,
)

from .output import (
    OutputPaths,
    ExportResult,
    ExportResponse,
    ErrorResponse,
)

__all__ = [
    # Core types
    'PropertyValue',
    'Position',
    'Size',
    'format_number',

    # Canvas model
    'DEFAULT_PACKAGE_NAME',
    'DEFAULT_TARGET_SDK',
    'DEFAULT_MIN_SDK',
    'DEFAULT_VERSION_CODE',
    'DEFAULT_VERSION_NAME',
    'ProjectSettings',
    'PlacedComponent',
    'ProjectRecord',

    # Output
    'OutputPaths',
    'ExportResult',
    'ExportResponse',
    'ErrorResponse',
]
