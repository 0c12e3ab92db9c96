"""Typed failures raised while building or expanding info trees.

Backends raise these; tree builders let them propagate unchanged.
Hosts decide how to render an error state.
"""

from __future__ import annotations


class InfoTreeError(Exception):
    """Base class for every info-tree failure."""


class NotFound(InfoTreeError, LookupError):
    """A symbol, file, or category id is unknown to the backend."""


class BackendUnavailable(InfoTreeError):
    """A backend query failed or timed out."""


class MalformedReference(InfoTreeError, ValueError):
    """A returned reference lacks its source range or containing file."""
