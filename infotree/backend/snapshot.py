"""JSON snapshot backend.

Serves the backend query contract from a dumped index so trees can be built
without a live code-intelligence service. Every query decodes the stored JSON
again, so callers always see current snapshot state.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..errors import BackendUnavailable, InfoTreeError, MalformedReference, NotFound
from ..tree_model.types import FileHandle, Reference, SourceRange, Symbol

logger = logging.getLogger(__name__)


def _key(value: object) -> str:
    """Normalize ids: JSON object keys are strings, payload ids may be ints."""
    return str(value)


def _as_int(value: object, what: str, error: type[InfoTreeError] = MalformedReference) -> int:
    """Convert a stored integer field, raising ``error`` for null, bool, or non-numeric values."""
    if isinstance(value, bool):
        raise error(f"{what} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise error(f"{what} must be an integer, got {value!r}") from exc


def decode_reference(raw: object) -> Reference:
    """Decode one reference payload.

    Raises ``MalformedReference`` when the payload is not an object, or its
    ``range`` / ``range.file`` is missing. Missing positions default to ``0``.
    """
    if not isinstance(raw, dict):
        raise MalformedReference(f"reference payload must be an object, got {type(raw).__name__}")
    if "id" not in raw:
        raise MalformedReference("reference payload has no id")
    reference_id = _key(raw["id"])

    raw_range = raw.get("range")
    if not isinstance(raw_range, dict):
        raise MalformedReference(f"reference {reference_id!r} has no range")
    file_id = raw_range.get("file")
    if file_id is None or file_id == "":
        raise MalformedReference(f"reference {reference_id!r} has no file")
    startpos = raw_range.get("startpos")
    if not isinstance(startpos, dict):
        startpos = {}

    tags = raw.get("tags") or []
    if not isinstance(tags, (list, tuple)):
        raise MalformedReference(f"reference {reference_id!r} has non-list tags")

    return Reference(
        id=reference_id,
        range=SourceRange(
            file=_key(file_id),
            line=_as_int(startpos.get("line", 0), f"line of reference {reference_id!r}"),
            column=_as_int(startpos.get("column", 0), f"column of reference {reference_id!r}"),
        ),
        display_value=str(raw.get("display_value", "")),
        tags=frozenset(str(tag) for tag in tags),
        mangled_name_hash=_as_int(raw.get("mangled_name_hash", 0), f"mangled name hash of reference {reference_id!r}"),
    )


class SnapshotBackend:
    """In-memory backend over a decoded snapshot document."""

    def __init__(self, data: dict[str, object]) -> None:
        if not isinstance(data, dict):
            raise BackendUnavailable("snapshot must decode to a JSON object")
        self._data = data

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> SnapshotBackend:
        return cls(data)

    @classmethod
    def from_path(cls, path: Path) -> SnapshotBackend:
        """Load a snapshot file, raising ``BackendUnavailable`` on I/O or JSON errors."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise BackendUnavailable(f"cannot load snapshot {path}: {exc}") from exc
        logger.debug("loaded snapshot %s", path)
        return cls(data)

    def _section(self, name: str) -> dict[str, object]:
        section = self._data.get(name, {})
        return section if isinstance(section, dict) else {}

    def _symbol_record(self, symbol_id: str) -> dict[str, object]:
        record = self._section("symbols").get(_key(symbol_id))
        if not isinstance(record, dict):
            raise NotFound(f"unknown symbol id: {symbol_id}")
        return record

    def _file_record(self, file_id: str) -> dict[str, object]:
        record = self._section("files").get(_key(file_id))
        if not isinstance(record, dict):
            raise NotFound(f"unknown file id: {file_id}")
        return record

    @staticmethod
    def _categories(record: object) -> dict[str, int]:
        if not isinstance(record, dict):
            return {}
        return {
            str(name): _as_int(category_id, f"id of category {name!r}")
            for name, category_id in record.items()
        }

    @staticmethod
    def _references(
        by_category: object,
        known: dict[str, int],
        owner: str,
        category_id: int,
    ) -> list[Reference]:
        """Decode stored references; a known category without entries is empty."""
        if _as_int(category_id, "category id", NotFound) not in known.values():
            raise NotFound(f"unknown category id {category_id} for {owner}")
        if not isinstance(by_category, dict):
            by_category = {}
        raw_list = by_category.get(_key(category_id), [])
        if not isinstance(raw_list, list):
            raise MalformedReference(f"references of category {category_id} for {owner} are not a list")
        return [decode_reference(raw) for raw in raw_list]

    def get_symbol(self, symbol_id: str) -> Symbol:
        """Resolve a symbol id into a focus ``Symbol``."""
        record = self._symbol_record(symbol_id)
        if "range" in record:
            reference = decode_reference({"id": symbol_id, **record})
            return Symbol.from_reference(reference)
        tags = record.get("tags") or []
        if not isinstance(tags, (list, tuple)):
            raise MalformedReference(f"symbol {symbol_id!r} has non-list tags")
        return Symbol(
            id=_key(symbol_id),
            display_value=str(record.get("display_value", "")),
            tags=frozenset(str(tag) for tag in tags),
            mangled_name_hash=_as_int(record.get("mangled_name_hash", 0), f"mangled name hash of symbol {symbol_id!r}"),
        )

    def get_file(self, file_id: str) -> FileHandle:
        """Resolve a file id into a focus ``FileHandle``."""
        return self.get_file_info(file_id)

    def get_properties(self, symbol_id: str) -> dict[str, str]:
        properties = self._symbol_record(symbol_id).get("properties", {})
        if not isinstance(properties, dict):
            return {}
        return {str(name): str(value) for name, value in properties.items()}

    def get_reference_types(self, symbol_id: str) -> dict[str, int]:
        return self._categories(self._symbol_record(symbol_id).get("reference_types"))

    def get_references(self, symbol_id: str, category_id: int) -> list[Reference]:
        record = self._symbol_record(symbol_id)
        known = self._categories(record.get("reference_types"))
        return self._references(record.get("references"), known, f"symbol {symbol_id}", category_id)

    def get_file_reference_types(self, file_id: str) -> dict[str, int]:
        self._file_record(file_id)
        return self._categories(self._section("file_reference_types").get(_key(file_id)))

    def get_file_references(self, file_id: str, category_id: int) -> list[Reference]:
        known = self.get_file_reference_types(file_id)
        by_category = self._section("file_references").get(_key(file_id))
        return self._references(by_category, known, f"file {file_id}", category_id)

    def get_file_info(self, file_id: str) -> FileHandle:
        record = self._file_record(file_id)
        path = str(record.get("path", ""))
        name = str(record.get("name") or Path(path).name or file_id)
        return FileHandle(id=_key(file_id), name=name, path=path)
