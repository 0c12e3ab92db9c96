"""Public package surface for infotree.

Exports ``main`` for programmatic CLI invocation.
The tree model lives in ``infotree.tree_model``; backends in ``infotree.backend``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
