"""
Generation services - one generator per exported document.
"""

from canvas_export.services.generation.property_mapper import (
    ATTRIBUTE_MAP,
    map_property,
    escape_attribute,
    escape_text,
)

from canvas_export.services.generation.identifiers import (
    assign_identifier,
    assign_identifiers,
)

from canvas_export.services.generation.layout_generator import (
    layout_generator,
    LayoutGenerator,
    EMPTY_LAYOUT_TEMPLATE,
)

from canvas_export.services.generation.source_generator import (
    source_generator,
    SourceGenerator,
)

from canvas_export.services.generation.manifest_generator import (
    manifest_generator,
    ManifestGenerator,
    theme_style_name,
)

from canvas_export.services.generation.build_config_generator import (
    build_config_generator,
    BuildConfigGenerator,
    DEPENDENCIES,
)

from canvas_export.services.generation.resource_generator import (
    resource_generator,
    ResourceGenerator,
    component_string_resource,
)

from canvas_export.services.generation.readme_generator import (
    readme_generator,
    ReadmeGenerator,
)

__all__ = [
    # Property mapping
    'ATTRIBUTE_MAP',
    'map_property',
    'escape_attribute',
    'escape_text',

    # Identifiers
    'assign_identifier',
    'assign_identifiers',

    # Layout
    'layout_generator',
    'LayoutGenerator',
    'EMPTY_LAYOUT_TEMPLATE',

    # Entry-point source
    'source_generator',
    'SourceGenerator',

    # Manifest
    'manifest_generator',
    'ManifestGenerator',
    'theme_style_name',

    # Build configuration
    'build_config_generator',
    'BuildConfigGenerator',
    'DEPENDENCIES',

    # String resources
    'resource_generator',
    'ResourceGenerator',
    'component_string_resource',

    # Summary
    'readme_generator',
    'ReadmeGenerator',
]
