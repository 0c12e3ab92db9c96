"""Query contract consumed by info-tree builders.

Implementations raise ``NotFound``, ``BackendUnavailable``, or
``MalformedReference`` from ``infotree.errors``; builders never catch them.
"""

from __future__ import annotations

from typing import Protocol

from ..tree_model.types import FileHandle, Reference


class CodeBackend(Protocol):
    """Code-intelligence queries needed to build and expand info trees."""

    def get_properties(self, symbol_id: str) -> dict[str, str]:
        """Ordered ``name -> value`` properties of a symbol."""
        ...

    def get_reference_types(self, symbol_id: str) -> dict[str, int]:
        """Symbol-scoped ``category name -> category id`` mapping."""
        ...

    def get_references(self, symbol_id: str, category_id: int) -> list[Reference]:
        ...

    def get_file_reference_types(self, file_id: str) -> dict[str, int]:
        """File-scoped ``category name -> category id`` mapping."""
        ...

    def get_file_references(self, file_id: str, category_id: int) -> list[Reference]:
        ...

    def get_file_info(self, file_id: str) -> FileHandle:
        ...
