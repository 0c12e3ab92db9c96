"""Print info trees as indented, ANSI-styled terminal rows.

The printer expands lazy rows down to a fixed depth. The depth only limits
printing; deeper rows stay expandable in the model. Failures while expanding
one row become an inline error row so the rest of the tree still prints.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import InfoTreeError
from .syntax import colorize_value
from .tree_model.labels import visibility_for_tags
from .tree_model.types import TreeNode
from .ui_theme import DEFAULT_THEME, UITheme, visibility_color

logger = logging.getLogger(__name__)

VISIBILITY_MARKERS = {"public": "+", "private": "-", "protected": "#"}


def format_node_label(
    node: TreeNode,
    theme: UITheme | None = None,
    style: str | None = None,
) -> str:
    """Render one node label; ``style`` enables Pygments colouring of values."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    label = node.label

    pair = label.pair()
    if pair is not None:
        key, value = pair
        return f"{active_theme.property_key}{key}{reset}: {active_theme.property_value}{value}{reset}"
    if node.kind in {"category", "recursive"}:
        return f"{active_theme.category}{label.text}{reset}"
    if node.kind == "file_group":
        return f"{active_theme.file_group}{label.text}{reset}"

    reference = node.reference
    badges = "".join(f"{active_theme.badge}[{badge.letter}]{reset}" for badge in label.badges)
    prefix = f"{badges} " if badges else ""
    visibility = visibility_for_tags(reference.tags) if reference is not None else None
    if visibility is not None:
        prefix = f"{visibility_color(active_theme, visibility)}{VISIBILITY_MARKERS[visibility]}{reset} {prefix}"

    if reference is None or style is None:
        text = label.text
    else:
        position = f"{reference.range.line}:{reference.range.column}:"
        text = f"{position} {colorize_value(reference.display_value, style)}"
    if label.hint is not None:
        text = f"{active_theme.implicit}{text}{reset}"
    return prefix + text


def render_tree_lines(
    nodes: Sequence[TreeNode],
    depth: int,
    theme: UITheme | None = None,
    style: str | None = None,
) -> list[str]:
    """Return display rows for ``nodes``, expanding ``depth - 1`` levels below them."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    marker_color = active_theme.tree_marker
    lines: list[str] = []

    def walk(level_nodes: Sequence[TreeNode], level: int) -> None:
        """Depth-first traversal emitting one row per node."""
        indent = "  " * level
        for node in level_nodes:
            expand = node.has_children and level + 1 < depth
            if not node.has_children:
                marker = "  "
            else:
                marker = "▾ " if expand else "▸ "
            lines.append(f"{indent}{marker_color}{marker}{reset}{format_node_label(node, active_theme, style)}")
            if not expand:
                continue
            try:
                children = node.children()
            except InfoTreeError as exc:
                logger.debug("expanding %s failed: %s", node.id, exc)
                lines.append(f"{indent}    {active_theme.error}error: {exc}{reset}")
                continue
            walk(children, level + 1)

    walk(nodes, 0)
    return lines
