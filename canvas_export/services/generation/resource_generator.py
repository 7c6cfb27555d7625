"""
Resource Table Generator - res/values/strings.xml

Each component contributes at most one string resource. ``text`` takes
priority over ``hint``; a component with neither contributes nothing. The
resource keys reuse the component identifiers, so they line up with the ids
in the layout document.
"""
from typing import List, Optional, Sequence, Tuple

from canvas_export.models.schemas import PlacedComponent, ProjectRecord
from canvas_export.services.generation.identifiers import assign_identifiers
from canvas_export.services.generation.property_mapper import escape_text

RESOURCE_INDENT = "    "

# Checked in order; the first truthy one wins
TEXT_RESOURCE_KEYS = ("text", "hint")


def component_string_resource(
    component: PlacedComponent,
    identifier: str
) -> Optional[Tuple[str, str]]:
    """
    Resolve the single string resource a component contributes.

    Returns:
        ``(resource_name, value)`` or None
    """
    for key in TEXT_RESOURCE_KEYS:
        value = component.properties.get(key)
        if value is not None and value.is_truthy():
            return f"{identifier}_{key}", value.render()
    return None


class ResourceGenerator:
    """Generates the string resource table"""

    def generate(
        self,
        project: ProjectRecord,
        identifiers: Optional[Sequence[str]] = None,
        escape_values: bool = False
    ) -> str:
        if identifiers is None:
            identifiers = assign_identifiers(project.components)

        def text(value: str) -> str:
            return escape_text(value) if escape_values else value

        lines: List[str] = [
            '<?xml version="1.0" encoding="utf-8"?>',
            "<resources>",
            f'{RESOURCE_INDENT}<string name="app_name">{text(project.name or "")}</string>',
            f'{RESOURCE_INDENT}<string name="app_description">{text(project.description)}</string>',
            "",
            f"{RESOURCE_INDENT}<!-- Add your string resources here -->",
        ]
        for component, identifier in zip(project.components, identifiers):
            resource = component_string_resource(component, identifier)
            if resource is not None:
                name, value = resource
                lines.append(f'{RESOURCE_INDENT}<string name="{name}">{text(value)}</string>')
        lines.append("</resources>")

        return "\n".join(lines)


resource_generator = ResourceGenerator()
