"""
Layout Generator - activity_main.xml

Builds the Android layout document from the ordered canvas components.
Every element is absolutely placed inside a RelativeLayout using start/top
margins taken from the canvas position.
"""
from typing import List, Optional, Sequence

from canvas_export.models.schemas import PlacedComponent, format_number
from canvas_export.services.generation.identifiers import assign_identifiers
from canvas_export.services.generation.property_mapper import map_property
from canvas_export.utils.logging import get_logger

logger = get_logger(__name__)

XML_HEADER = '<?xml version="1.0" encoding="utf-8"?>'

# Root id referenced by MainActivity's window insets listener
ROOT_VIEW_ID = "main"

EMPTY_LAYOUT_TEMPLATE = f"""{XML_HEADER}
<LinearLayout xmlns:android="http://schemas.android.com/apk/res/android"
    android:id="@+id/{ROOT_VIEW_ID}"
    android:layout_width="match_parent"
    android:layout_height="match_parent"
    android:orientation="vertical"
    android:padding="16dp">

    <!-- Add your components here -->

</LinearLayout>"""

CONTAINER_OPEN = f"""{XML_HEADER}
<RelativeLayout xmlns:android="http://schemas.android.com/apk/res/android"
    android:id="@+id/{ROOT_VIEW_ID}"
    android:layout_width="match_parent"
    android:layout_height="match_parent"
    android:padding="16dp">

"""

CONTAINER_CLOSE = "</RelativeLayout>"

ATTRIBUTE_INDENT = "        "


class LayoutGenerator:
    """
    Generates the layout XML document.

    An empty canvas gets a fixed LinearLayout template; anything else goes
    through the RelativeLayout branch, one self-closing element per component.
    """

    def generate(
        self,
        components: Sequence[PlacedComponent],
        identifiers: Optional[Sequence[str]] = None,
        escape_values: bool = False
    ) -> str:
        """
        Build activity_main.xml.

        Args:
            components: Placed components in canvas order
            identifiers: Identifiers for ``components``; assigned when omitted
            escape_values: XML-escape mapped property values

        Returns:
            Layout document text
        """
        if not components:
            logger.debug("layout.generation.empty_template")
            return EMPTY_LAYOUT_TEMPLATE

        if identifiers is None:
            identifiers = assign_identifiers(components)

        parts = [CONTAINER_OPEN]
        for component, identifier in zip(components, identifiers):
            parts.append(self._render_element(component, identifier, escape_values))
        parts.append(CONTAINER_CLOSE)

        logger.debug(
            "layout.generation.completed",
            extra={"elements": len(components)}
        )
        return "".join(parts)

    def _render_element(
        self,
        component: PlacedComponent,
        identifier: str,
        escape_values: bool
    ) -> str:
        lines: List[str] = [
            f"    <{component.kind}",
            f'{ATTRIBUTE_INDENT}android:id="@+id/{identifier}"',
            f'{ATTRIBUTE_INDENT}android:layout_width="{format_number(component.size.width)}dp"',
            f'{ATTRIBUTE_INDENT}android:layout_height="{format_number(component.size.height)}dp"',
        ]

        # Zero offsets are omitted, not emitted as 0dp
        if component.position.x > 0:
            lines.append(
                f'{ATTRIBUTE_INDENT}android:layout_marginStart="{format_number(component.position.x)}dp"'
            )
        if component.position.y > 0:
            lines.append(
                f'{ATTRIBUTE_INDENT}android:layout_marginTop="{format_number(component.position.y)}dp"'
            )

        for key, value in component.properties.items():
            attribute = map_property(key, value, escape_values=escape_values)
            if attribute:
                lines.append(f"{ATTRIBUTE_INDENT}{attribute}")

        return "\n".join(lines) + " />\n\n"


layout_generator = LayoutGenerator()
