"""Backend contract and the JSON snapshot implementation."""

from __future__ import annotations

from .protocol import CodeBackend
from .snapshot import SnapshotBackend, decode_reference

__all__ = ["CodeBackend", "SnapshotBackend", "decode_reference"]
