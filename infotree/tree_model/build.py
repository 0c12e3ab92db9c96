"""Top-level info-tree construction for a selected symbol or file.

Symbols get property rows followed by reference-category rows; files get
file-scoped category rows only. Category rows expand lazily.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .grouping import (
    category_label,
    category_producer,
    category_style,
    file_category_producer,
)
from .labels import format_property_label, icon_class
from .types import FileHandle, Focus, ReferenceCategory, Symbol, TreeNode

if TYPE_CHECKING:
    from ..backend.protocol import CodeBackend

logger = logging.getLogger(__name__)


def build_for_symbol(backend: CodeBackend, symbol: Symbol) -> list[TreeNode]:
    """Return property rows then one lazy row per symbol reference category."""
    nodes: list[TreeNode] = []
    for name, value in backend.get_properties(symbol.id).items():
        nodes.append(
            TreeNode(
                id=f"{symbol.id}-property-{name.replace(' ', '-')}",
                label=format_property_label(name, value),
                style_class=icon_class(name),
                has_children=False,
                kind="property",
            )
        )

    reference_types = backend.get_reference_types(symbol.id)
    logger.debug("symbol %s: %d properties, %d categories", symbol.id, len(nodes), len(reference_types))
    for name, category_id in reference_types.items():
        category = ReferenceCategory(name=name, id=category_id)
        nodes.append(
            TreeNode(
                id=f"{symbol.id}-category-{category_id}",
                label=category_label(category),
                style_class=category_style(category),
                has_children=True,
                get_children=category_producer(backend, symbol, category),
                kind="category",
            )
        )
    return nodes


def build_for_file(backend: CodeBackend, file: FileHandle) -> list[TreeNode]:
    """Return one lazy row per file-scoped reference category."""
    nodes: list[TreeNode] = []
    reference_types = backend.get_file_reference_types(file.id)
    logger.debug("file %s: %d categories", file.id, len(reference_types))
    for name, category_id in reference_types.items():
        category = ReferenceCategory(name=name, id=category_id)
        nodes.append(
            TreeNode(
                id=f"{file.id}-category-{category_id}",
                label=category_label(category),
                style_class=category_style(category),
                has_children=True,
                get_children=file_category_producer(backend, file, category),
                kind="category",
            )
        )
    return nodes


def render(backend: CodeBackend, focus: Focus) -> list[TreeNode]:
    """Build top-level rows for whichever focus variant the host selected."""
    match focus:
        case Symbol():
            return build_for_symbol(backend, focus)
        case FileHandle():
            return build_for_file(backend, focus)
        case _:
            raise TypeError(f"unsupported info-tree focus: {type(focus).__name__}")


class InfoTree:
    """Info-tree provider bound to one backend."""

    def __init__(self, backend: CodeBackend) -> None:
        self.backend = backend

    def render(self, focus: Focus) -> list[TreeNode]:
        return render(self.backend, focus)
