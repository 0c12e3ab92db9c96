"""Children of a caller row: a recursive "Caller" row plus call sites.

The recursive row re-expands the caller category with the caller itself as
focus, so callers of callers can be browsed without limit. There is no
visited-set and no depth cap; expansion ends where the backend reports no
callers. Mutually recursive functions therefore expand forever on demand.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import grouping
from .types import ChildProducer, Reference, ReferenceCategory, Symbol, TreeNode

if TYPE_CHECKING:
    from ..backend.protocol import CodeBackend

logger = logging.getLogger(__name__)


def recursive_caller_node(
    backend: CodeBackend,
    category: ReferenceCategory,
    caller: Reference,
) -> TreeNode:
    """Row that repeats the category row, focused on ``caller``."""
    return TreeNode(
        id=f"Caller-{caller.id}",
        label=grouping.category_label(category),
        style_class=grouping.category_style(category),
        has_children=True,
        get_children=grouping.category_producer(backend, Symbol.from_reference(caller), category),
        kind="recursive",
        reference=caller,
    )


def call_site_nodes(
    backend: CodeBackend,
    symbol: Symbol,
    caller: Reference,
) -> list[TreeNode]:
    """Leaves for calls made by ``caller`` that target exactly ``symbol``.

    Matching uses the mangled-name hash, so calls to other overloads or
    specializations are dropped.
    """
    calls_category = backend.get_reference_types(caller.id).get(grouping.THIS_CALLS)
    if calls_category is None:
        return []
    calls = backend.get_references(caller.id, calls_category)
    matching = [call for call in calls if call.mangled_name_hash == symbol.mangled_name_hash]
    logger.debug("caller %s: %d of %d calls target %s", caller.id, len(matching), len(calls), symbol.id)
    return [grouping.reference_leaf(call, f"call-{caller.id}-{call.id}") for call in matching]


def build_call_chain(
    backend: CodeBackend,
    symbol: Symbol,
    category: ReferenceCategory,
    caller: Reference,
) -> list[TreeNode]:
    """Return the recursive row followed by matching call-site leaves."""
    nodes = [recursive_caller_node(backend, category, caller)]
    nodes.extend(call_site_nodes(backend, symbol, caller))
    return nodes


def call_chain_producer(
    backend: CodeBackend,
    symbol: Symbol,
    category: ReferenceCategory,
    caller: Reference,
) -> ChildProducer:
    """Bind ``build_call_chain`` to fixed arguments."""
    return lambda: build_call_chain(backend, symbol, category, caller)
