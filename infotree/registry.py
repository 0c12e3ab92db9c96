"""Extension registry through which hosts discover info-tree providers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .tree_model import InfoTree
from .tree_model.types import Focus, TreeNode

if TYPE_CHECKING:
    from .backend.protocol import CodeBackend

TreeProvider = Callable[[Focus], "list[TreeNode]"]
DEFAULT_PROVIDER_NAME = "cpp"


class ExtensionRegistry:
    """Name -> tree-provider table consulted when the user selects a focus."""

    def __init__(self) -> None:
        self._tree_providers: dict[str, TreeProvider] = {}

    def register_tree_provider(
        self,
        render: TreeProvider,
        name: str = DEFAULT_PROVIDER_NAME,
    ) -> ExtensionRegistry:
        """Register ``render`` under ``name``, replacing any earlier provider."""
        self._tree_providers[name] = render
        return self

    def tree_provider(self, name: str = DEFAULT_PROVIDER_NAME) -> TreeProvider:
        """Return the provider registered as ``name``; raises ``KeyError`` if absent."""
        return self._tree_providers[name]

    def provider_names(self) -> tuple[str, ...]:
        return tuple(self._tree_providers)

    def render(self, focus: Focus, name: str = DEFAULT_PROVIDER_NAME) -> list[TreeNode]:
        """Invoke the named provider for ``focus``."""
        return self.tree_provider(name)(focus)


def register_info_tree(
    registry: ExtensionRegistry,
    backend: CodeBackend,
    name: str = DEFAULT_PROVIDER_NAME,
) -> InfoTree:
    """Create an ``InfoTree`` over ``backend`` and register its ``render``."""
    info_tree = InfoTree(backend)
    registry.register_tree_provider(info_tree.render, name=name)
    return info_tree
