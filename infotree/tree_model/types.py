"""Info-tree datatypes shared by builders, backends, and renderers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class SourceRange:
    """Start position of a reference inside a file."""

    file: str
    line: int
    column: int


@dataclass(frozen=True)
class Reference:
    """One located occurrence returned for a category query."""

    id: str
    range: SourceRange
    display_value: str = ""
    tags: frozenset[str] = frozenset()
    mangled_name_hash: int = 0


@dataclass(frozen=True)
class Symbol:
    """A named code entity selected as tree focus.

    Properties are not stored here; they are read from the backend each time
    the tree is built.
    """

    id: str
    range: SourceRange | None = None
    display_value: str = ""
    tags: frozenset[str] = frozenset()
    mangled_name_hash: int = 0

    @classmethod
    def from_reference(cls, reference: Reference) -> Symbol:
        """Treat a reference (for example a caller) as a new focus symbol."""
        return cls(
            id=reference.id,
            range=reference.range,
            display_value=reference.display_value,
            tags=reference.tags,
            mangled_name_hash=reference.mangled_name_hash,
        )


@dataclass(frozen=True)
class FileHandle:
    """A source file selected as tree focus."""

    id: str
    name: str
    path: str


Focus = Union[Symbol, FileHandle]


@dataclass(frozen=True)
class ReferenceCategory:
    """Named relation kind paired with the backend's category id."""

    name: str
    id: int


@dataclass(frozen=True)
class Badge:
    """Single-letter marker shown before a reference label."""

    tag: str
    letter: str
    title: str


@dataclass(frozen=True)
class Label:
    """Display label of a tree node.

    Property rows carry ``key`` (``"name: value"`` pairs); reference rows carry
    ordered ``badges`` and an optional style ``hint``.
    """

    text: str
    key: str | None = None
    badges: tuple[Badge, ...] = ()
    hint: str | None = None

    def pair(self) -> tuple[str, str] | None:
        """Return ``(name, value)`` for property labels, else ``None``."""
        if self.key is None:
            return None
        return self.key, self.text

    def __str__(self) -> str:
        if self.key is not None:
            return f"{self.key}: {self.text}"
        markers = "".join(f"[{badge.letter}]" for badge in self.badges)
        return f"{markers} {self.text}" if markers else self.text


ChildProducer = Callable[[], "list[TreeNode]"]


@dataclass(frozen=True)
class TreeNode:
    """Lazy navigation unit handed to the hosting UI.

    ``get_children`` recomputes children from backend state on every call and
    is excluded from equality, so independent expansions compare equal.
    """

    id: str | None
    label: Label
    style_class: str | None = None
    has_children: bool = False
    get_children: ChildProducer | None = field(default=None, compare=False, repr=False)
    kind: str = "reference"
    reference: Reference | None = None

    def children(self) -> list[TreeNode]:
        """Invoke the child producer, returning ``[]`` for leaves."""
        if not self.has_children or self.get_children is None:
            return []
        return self.get_children()
