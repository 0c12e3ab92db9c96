"""Label and style formatting for info-tree rows.

Badges follow a fixed precedence independent of tag order.
Visibility styling picks the first of public, private, protected.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import MalformedReference
from .types import Badge, Label, Reference, SourceRange

BADGE_ORDER: tuple[Badge, ...] = (
    Badge("static", "S", "Static"),
    Badge("constructor", "C", "Constructor"),
    Badge("destructor", "D", "Destructor"),
    Badge("implicit", "I", "Implicit"),
    Badge("inherited", "I", "Inherited"),
    Badge("virtual", "V", "Virtual"),
    Badge("global", "G", "Global"),
)
VISIBILITY_ORDER = ("public", "private", "protected")
IMPLICIT_HINT = "label-implicit"
CALLER_STYLE = "icon icon-Method"


def badges_for_tags(tags: Iterable[str]) -> tuple[Badge, ...]:
    """Return badges for present tags in fixed display order."""
    present = set(tags)
    return tuple(badge for badge in BADGE_ORDER if badge.tag in present)


def require_range(reference: Reference) -> SourceRange:
    """Return the reference range, raising ``MalformedReference`` without a range or file."""
    if reference.range is None or not reference.range.file:
        raise MalformedReference(f"reference {reference.id!r} has no source file")
    return reference.range


def format_reference_label(reference: Reference) -> Label:
    """Build ``"<line>:<column>: <value>"`` label with ordered badges."""
    position = require_range(reference)
    return Label(
        text=f"{position.line}:{position.column}: {reference.display_value}",
        badges=badges_for_tags(reference.tags),
        hint=IMPLICIT_HINT if "implicit" in reference.tags else None,
    )


def format_property_label(name: str, value: object) -> Label:
    """Build a ``name: value`` property label."""
    return Label(text=str(value), key=name)


def visibility_for_tags(tags: Iterable[str]) -> str | None:
    """Classify tags as ``public``/``private``/``protected`` or ``None``."""
    present = set(tags)
    for visibility in VISIBILITY_ORDER:
        if visibility in present:
            return visibility
    return None


def visibility_style(tags: Iterable[str]) -> str | None:
    """Return the leaf style class for a tag set."""
    visibility = visibility_for_tags(tags)
    if visibility is None:
        return None
    return f"icon-visibility icon-{visibility}"


def icon_class(name: str) -> str:
    """Style class for property and category rows (``icon-Qualified-name``)."""
    return "icon-" + name.replace(" ", "-")


def file_icon_class(path: str) -> str:
    """Style class for file-group rows derived from the path suffix."""
    _stem, dot, suffix = path.rpartition(".")
    if not dot or "/" in suffix or not suffix:
        return "icon icon-file"
    return f"icon icon-file icon-{suffix.lower()}"
