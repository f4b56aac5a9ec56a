"""JSON-backed content store.

Persists all ContentRecords in a single JSON file.  Reads go through
``find_by_id``, which never returns soft-deleted records; a store file
that exists but cannot be read raises ``ContentStoreError``.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, ValidationError

from provisioner.content.models import ContentRecord, ContentType
from provisioner.errors import ContentStoreError

logger = logging.getLogger(__name__)

STORE_FILENAME = ".provisioner-content-store.json"

# Alias to avoid shadowing by ContentStore.list method
_list = list


class ContentLookup(Protocol):
    """Lookup-by-id capability the resolver depends on."""

    def find_by_id(self, content_id: str) -> ContentRecord | None: ...


class _StoreData(BaseModel):
    """Internal wrapper for JSON serialization."""

    records: list[ContentRecord] = Field(default_factory=list)


class ContentStore:
    """JSON-backed store for content records.

    The file is read on first access and saved after every mutation.
    """

    def __init__(self, directory: Path) -> None:
        self._path = Path(directory) / STORE_FILENAME
        self._data: _StoreData | None = None

    @property
    def path(self) -> Path:
        return self._path

    # ── Private helpers ──────────────────────────────────────────

    def _load(self) -> _StoreData:
        if self._data is not None:
            return self._data
        if not self._path.exists():
            self._data = _StoreData()
            return self._data
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            self._data = _StoreData.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            logger.error("Unreadable content store at %s: %s", self._path, exc)
            raise ContentStoreError(f"Cannot read content store {self._path}: {exc}") from exc
        return self._data

    def _save(self) -> None:
        data = self._load()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(data.model_dump_json(indent=2), encoding="utf-8")

    def _find(self, content_id: str) -> ContentRecord | None:
        for record in self._load().records:
            if record.id == content_id:
                return record
        return None

    # ── Write operations ─────────────────────────────────────────

    def upsert(self, record: ContentRecord) -> None:
        """Insert or replace a content record by id."""
        data = self._load()
        data.records = [r for r in data.records if r.id != record.id]
        data.records.append(record)
        self._save()

    def soft_delete(self, content_id: str) -> None:
        """Mark a record as deleted without removing it from the file.

        Raises KeyError if the id does not exist.
        """
        record = self._find(content_id)
        if record is None:
            raise KeyError(content_id)
        if record.deleted_at is None:
            record.deleted_at = datetime.now(tz=UTC)
            self._save()

    # ── Read operations ──────────────────────────────────────────

    def find_by_id(self, content_id: str) -> ContentRecord | None:
        """Return the live record with this id, or None."""
        record = self._find(content_id)
        if record is None or record.is_deleted:
            return None
        return record

    def list(
        self,
        content_type: ContentType | str | None = None,
        include_deleted: bool = False,
    ) -> _list[ContentRecord]:
        """Return records, optionally filtered by type."""
        results = self._load().records
        if not include_deleted:
            results = [r for r in results if not r.is_deleted]
        if content_type is not None:
            results = [r for r in results if r.type == content_type]
        return _list(results)

    def exists(self, content_id: str) -> bool:
        """Check whether a live record with this id exists."""
        return self.find_by_id(content_id) is not None
