"""Generic JSON-document store for one entity type.

Each document is a JSON object mapping string IDs to record objects.
Records are converted by an explicit ``RecordCodec`` per type, so the
store itself knows nothing about products, customers or receipts.

Failures never escape: a document that cannot be read or parsed loads
as an empty mapping (the file is left alone until the next save), and
a failed write is logged and reported but does not interrupt the
caller.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Generic, TypeVar

from pos.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorReporter = Callable[[str], None]

# What a codec may raise on a malformed record
_RECORD_ERRORS = (
    DomainException,
    LookupError,
    AttributeError,
    TypeError,
    ValueError,
    ArithmeticError,
)


class StoreError(Exception):
    """Base class for persistence failures."""


class StoreParseError(StoreError):
    """The document exists but is not a valid mapping of records."""


class StoreIOError(StoreError):
    """The document could not be read or written."""


class RecordCodec(ABC, Generic[T]):
    """Converts one record type to and from its JSON representation."""

    @abstractmethod
    def to_raw(self, record: T) -> dict[str, Any]:
        """Serialise *record* (without its ID)."""

    @abstractmethod
    def from_raw(self, record_id: str, raw: dict[str, Any]) -> T:
        """Rebuild a record from its JSON object and ID."""


class JsonStore(Generic[T]):

    def __init__(
        self,
        file_path: Path,
        codec: RecordCodec[T],
        on_error: ErrorReporter | None = None,
    ) -> None:
        self._file_path = file_path
        self._codec = codec
        self._on_error = on_error

    # --- Public API -----------------------------------------------------------

    def load(self) -> dict[str, T]:
        """Return the stored mapping, or an empty one if unavailable."""
        if not self._file_path.exists():
            return {}
        try:
            return self._decode(self._read())
        except StoreError as exc:
            self._report(f"Error loading {self._file_path.name}: {exc}")
            return {}

    def save(self, records: Mapping[str, T]) -> bool:
        """Overwrite the document with *records*; return False on failure."""
        raw = {record_id: self._codec.to_raw(r) for record_id, r in records.items()}
        try:
            self._write(json.dumps(raw, indent=2) + "\n")
        except StoreIOError as exc:
            self._report(f"Error saving {self._file_path.name}: {exc}")
            return False
        return True

    # --- Serialization helpers ------------------------------------------------

    def _decode(self, text: str) -> dict[str, T]:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreParseError(f"invalid JSON ({exc})") from exc
        if not isinstance(raw, dict):
            raise StoreParseError(
                f"expected a JSON object, got {type(raw).__name__}"
            )

        records: dict[str, T] = {}
        for record_id, item in raw.items():
            if not isinstance(item, dict):
                raise StoreParseError(f"record '{record_id}' is not an object")
            try:
                records[record_id] = self._codec.from_raw(record_id, item)
            except _RECORD_ERRORS as exc:
                raise StoreParseError(f"record '{record_id}' is invalid ({exc})") from exc
        return records

    # --- File helpers ---------------------------------------------------------

    def _read(self) -> str:
        try:
            return self._file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreIOError(str(exc)) from exc

    def _write(self, text: str) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StoreIOError(str(exc)) from exc

    def _report(self, message: str) -> None:
        logger.warning(message, extra={"extra": {"path": str(self._file_path)}})
        if self._on_error is not None:
            self._on_error(message)
