"""
Models package.

Exports:
- schemas: canvas model, tagged property values and export output
"""

from .schemas import (
    PropertyValue,
    Position,
    Size,
    ProjectSettings,
    PlacedComponent,
    ProjectRecord,
    OutputPaths,
    ExportResult,
)

__all__ = [
    'PropertyValue',
    'Position',
    'Size',
    'ProjectSettings',
    'PlacedComponent',
    'ProjectRecord',
    'OutputPaths',
    'ExportResult',
]
