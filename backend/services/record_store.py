"""Generic record store used by every service.

Records are plain dicts keyed by ``id``. The store owns persistence only;
business rules live in the services that call it.
"""

import copy
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from services.errors import RecordNotFound, StoreError

logger = logging.getLogger(__name__)

TABLES: tuple[str, ...] = (
    "skills",
    "jobs",
    "graduate_profiles",
    "certifications",
    "internships",
    "quiz_questions",
    "quiz_results",
    "mentor_feedback",
    "users",
)

# Tables a seed catalog may populate
SEED_TABLES: tuple[str, ...] = (
    "skills",
    "jobs",
    "certifications",
    "internships",
    "quiz_questions",
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class RecordStore(ABC):
    """Read/write interface over named tables.

    Subclasses must implement:
        - read(table, filter, limit): matching records in insertion order
        - get(table, id): one record or None
        - insert(table, record): new record with generated id
        - upsert(table, record, conflict_key): insert or fully overwrite
        - delete(table, id): remove a record, RecordNotFound if absent
    """

    @abstractmethod
    def read(
        self,
        table: str,
        filter: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[dict]:
        """Return records whose fields equal every value in ``filter``."""

    @abstractmethod
    def get(self, table: str, id: str) -> dict | None:
        """Return the record with ``id`` or None."""

    @abstractmethod
    def insert(self, table: str, record: dict) -> dict:
        """Insert a new record and return the stored copy."""

    @abstractmethod
    def upsert(self, table: str, record: dict, conflict_key: str = "id") -> dict:
        """Insert, or replace the record sharing ``conflict_key``. No merge."""

    @abstractmethod
    def delete(self, table: str, id: str) -> None:
        """Delete a record by id."""

    def read_one(self, table: str, filter: dict[str, Any]) -> dict | None:
        rows = self.read(table, filter, limit=1)
        return rows[0] if rows else None


class InMemoryRecordStore(RecordStore):
    """Process-local store. Writes are serialized by a single lock."""

    def __init__(self) -> None:
        self._tables: dict[str, dict[str, dict]] = {name: {} for name in TABLES}
        self._lock = threading.Lock()

    def _table(self, table: str) -> dict[str, dict]:
        try:
            return self._tables[table]
        except KeyError:
            raise StoreError(f"Unknown table: {table}") from None

    def read(self, table, filter=None, limit=None):
        rows = self._table(table)
        with self._lock:
            out = [
                copy.deepcopy(r)
                for r in rows.values()
                if not filter or all(r.get(k) == v for k, v in filter.items())
            ]
        if limit is not None:
            out = out[:limit]
        return out

    def get(self, table, id):
        rows = self._table(table)
        with self._lock:
            record = rows.get(id)
            return copy.deepcopy(record) if record is not None else None

    def insert(self, table, record):
        rows = self._table(table)
        stored = copy.deepcopy(record)
        stored.setdefault("id", str(uuid.uuid4()))
        stored.setdefault("created_at", _now())
        with self._lock:
            if stored["id"] in rows:
                raise StoreError(f"Duplicate id in {table}: {stored['id']}")
            rows[stored["id"]] = stored
        return copy.deepcopy(stored)

    def upsert(self, table, record, conflict_key="id"):
        rows = self._table(table)
        if conflict_key not in record:
            raise StoreError(f"Upsert into {table} is missing conflict key '{conflict_key}'")
        key = record[conflict_key]
        stored = copy.deepcopy(record)
        with self._lock:
            existing = next(
                (r for r in rows.values() if r.get(conflict_key) == key), None
            )
            if existing is not None:
                stored["id"] = existing["id"]
                stored["created_at"] = existing.get("created_at", _now())
            else:
                stored.setdefault("id", str(uuid.uuid4()))
                stored.setdefault("created_at", _now())
            stored["updated_at"] = _now()
            rows[stored["id"]] = stored
        return copy.deepcopy(stored)

    def delete(self, table, id):
        rows = self._table(table)
        with self._lock:
            if id not in rows:
                raise RecordNotFound(f"No record {id} in {table}")
            del rows[id]


def load_seed(store: RecordStore, path: str | Path) -> dict[str, int]:
    """Insert catalog records from a YAML file keyed by table name."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise StoreError(f"Could not load seed file {path}: {e}") from e

    counts: dict[str, int] = {}
    for table, records in data.items():
        if table not in SEED_TABLES:
            logger.warning("Ignoring unknown seed table: %s", table)
            continue
        for record in records or []:
            store.insert(table, record)
        counts[table] = len(records or [])

    logger.info("Seeded store from %s: %s", path, counts)
    return counts
