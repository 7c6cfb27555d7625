"""
Deterministic identifiers for placed components.

The ordinal is global across the sequence, so two components can never share
an identifier even when their kinds differ.
"""
from typing import List, Sequence

from canvas_export.models.schemas import PlacedComponent


def assign_identifier(kind: str, index: int) -> str:
    """
    ``Button`` at zero-based index 0 -> ``button_1``.

    Dotted kinds contribute their last segment, so
    ``androidx.cardview.widget.CardView`` at index 1 -> ``cardview_2``.
    """
    simple_name = kind.rsplit(".", 1)[-1]
    return f"{simple_name.lower()}_{index + 1}"


def assign_identifiers(components: Sequence[PlacedComponent]) -> List[str]:
    """Identifiers for a whole component sequence, in sequence order"""
    return [
        assign_identifier(component.kind, index)
        for index, component in enumerate(components)
    ]
