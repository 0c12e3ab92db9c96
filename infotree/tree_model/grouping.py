"""Reference-category expansion and per-file grouping.

Aggregating categories ("Caller", "Usage") collapse references into one group
row per containing file, in first-seen order. Other categories and every
file-scoped category expand to flat leaf rows.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from . import call_chain
from .labels import (
    CALLER_STYLE,
    file_icon_class,
    format_reference_label,
    icon_class,
    require_range,
    visibility_style,
)
from .types import ChildProducer, FileHandle, Label, Reference, ReferenceCategory, Symbol, TreeNode

if TYPE_CHECKING:
    from ..backend.protocol import CodeBackend

logger = logging.getLogger(__name__)

CALLER = "Caller"
USAGE = "Usage"
THIS_CALLS = "This calls"
AGGREGATING_CATEGORIES = frozenset({CALLER, USAGE})


def category_label(category: ReferenceCategory) -> Label:
    """Label shared by a category row and the recursive rows it spawns."""
    return Label(text=category.name)


def category_style(category: ReferenceCategory) -> str:
    return icon_class(category.name)


def reference_leaf(reference: Reference, node_id: str | None = None) -> TreeNode:
    """Childless row for one reference, styled by its visibility tags."""
    return TreeNode(
        id=node_id,
        label=format_reference_label(reference),
        style_class=visibility_style(reference.tags),
        has_children=False,
        kind="reference",
        reference=reference,
    )


def file_id_of(reference: Reference) -> str:
    """Return the containing file id, raising ``MalformedReference`` if absent."""
    return require_range(reference).file


def group_by_file(references: Sequence[Reference]) -> dict[str, list[Reference]]:
    """Partition references by file id, keeping first-seen file order."""
    groups: dict[str, list[Reference]] = {}
    for reference in references:
        groups.setdefault(file_id_of(reference), []).append(reference)
    return groups


def load_category(
    backend: CodeBackend,
    symbol: Symbol,
    category: ReferenceCategory,
) -> list[TreeNode]:
    """Expand one symbol-scoped category row.

    Every call queries the backend again; nothing is cached between calls.
    """
    references = backend.get_references(symbol.id, category.id)
    logger.debug("category %r of %s: %d references", category.name, symbol.id, len(references))
    if category.name not in AGGREGATING_CATEGORIES:
        return [reference_leaf(reference) for reference in references]

    return [
        _file_group_node(backend, symbol, category, file_id, in_file)
        for file_id, in_file in group_by_file(references).items()
    ]


def load_file_category(
    backend: CodeBackend,
    file: FileHandle,
    category: ReferenceCategory,
) -> list[TreeNode]:
    """Expand one file-scoped category row into flat reference leaves."""
    references = backend.get_file_references(file.id, category.id)
    logger.debug("file category %r of %s: %d references", category.name, file.id, len(references))
    return [reference_leaf(reference) for reference in references]


def category_producer(
    backend: CodeBackend,
    symbol: Symbol,
    category: ReferenceCategory,
) -> ChildProducer:
    """Bind ``load_category`` to fixed arguments."""
    return lambda: load_category(backend, symbol, category)


def file_category_producer(
    backend: CodeBackend,
    file: FileHandle,
    category: ReferenceCategory,
) -> ChildProducer:
    """Bind ``load_file_category`` to fixed arguments."""
    return lambda: load_file_category(backend, file, category)


def _file_group_node(
    backend: CodeBackend,
    symbol: Symbol,
    category: ReferenceCategory,
    file_id: str,
    in_file: Sequence[Reference],
) -> TreeNode:
    file_info = backend.get_file_info(file_id)
    group_id = f"{symbol.id}-{category.id}-{file_id}"
    members = tuple(in_file)
    return TreeNode(
        id=group_id,
        label=Label(text=f"{file_info.name} ({len(members)})"),
        style_class=file_icon_class(file_info.path),
        has_children=True,
        get_children=lambda: _file_group_children(backend, symbol, category, group_id, members),
        kind="file_group",
    )


def _file_group_children(
    backend: CodeBackend,
    symbol: Symbol,
    category: ReferenceCategory,
    group_id: str,
    members: Sequence[Reference],
) -> list[TreeNode]:
    if category.name == CALLER:
        return [_caller_node(backend, symbol, category, caller) for caller in members]
    return [reference_leaf(reference, f"{group_id}-{reference.id}") for reference in members]


def _caller_node(
    backend: CodeBackend,
    symbol: Symbol,
    category: ReferenceCategory,
    caller: Reference,
) -> TreeNode:
    return TreeNode(
        id=caller.id,
        label=format_reference_label(caller),
        style_class=CALLER_STYLE,
        has_children=True,
        get_children=call_chain.call_chain_producer(backend, symbol, category, caller),
        kind="caller",
        reference=caller,
    )
