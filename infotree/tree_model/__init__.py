"""Lazy info-tree model: datatypes, labels, grouping, and builders.

``render`` is the host-facing entry point; category rows expand on demand
through ``load_category`` / ``load_file_category``.
"""

from __future__ import annotations

from .build import InfoTree, build_for_file, build_for_symbol, render
from .call_chain import build_call_chain
from .grouping import (
    AGGREGATING_CATEGORIES,
    CALLER,
    THIS_CALLS,
    USAGE,
    group_by_file,
    load_category,
    load_file_category,
)
from .labels import format_property_label, format_reference_label, visibility_for_tags
from .types import (
    Badge,
    FileHandle,
    Focus,
    Label,
    Reference,
    ReferenceCategory,
    SourceRange,
    Symbol,
    TreeNode,
)

__all__ = [
    "InfoTree",
    "render",
    "build_for_symbol",
    "build_for_file",
    "load_category",
    "load_file_category",
    "build_call_chain",
    "group_by_file",
    "AGGREGATING_CATEGORIES",
    "CALLER",
    "USAGE",
    "THIS_CALLS",
    "format_reference_label",
    "format_property_label",
    "visibility_for_tags",
    "Badge",
    "FileHandle",
    "Focus",
    "Label",
    "Reference",
    "ReferenceCategory",
    "SourceRange",
    "Symbol",
    "TreeNode",
]
