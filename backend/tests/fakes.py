"""In-memory stand-ins for the storage layer used by service unit tests."""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from focusflow.db import models
from focusflow.errors import NotFoundError
from focusflow.repositories.record_repository import touch_time


class FakeRecordRepository:
    """
    Dict-backed RecordRepository.

    Records are SimpleNamespace objects so services can read attributes the
    same way they read ORM rows. ``db`` arguments are accepted and ignored.
    """

    def __init__(self, defaults: dict | None = None, label: str = "Record") -> None:
        self.rows: dict[int, SimpleNamespace] = {}
        self.defaults = defaults or {}
        self.label = label
        self._next_id = 1
        self.calls: list[tuple[str, Any]] = []

    def _matches(self, row, filters: dict) -> bool:
        return all(getattr(row, k) == v for k, v in filters.items())

    def insert(self, db, **fields):
        now = models.utcnow()
        row = SimpleNamespace(id=self._next_id, created_at=now, updated_at=now, **{**self.defaults, **fields})
        self.rows[row.id] = row
        self._next_id += 1
        self.calls.append(("insert", fields))
        return row

    def find(self, db, order_by=(), **filters):
        out = [r for r in self.rows.values() if self._matches(r, filters)]
        for key in reversed(order_by):
            name = key.lstrip("-")
            out.sort(key=lambda r: getattr(r, name), reverse=key.startswith("-"))
        return out

    def find_one(self, db, **filters):
        found = self.find(db, order_by=("id",), **filters)
        return found[0] if found else None

    def update(self, db, record_id, owner_user_id, **fields):
        row = self.rows.get(record_id)
        if row is None or row.user_id != owner_user_id:
            raise NotFoundError.for_entity("RECORD_NOT_FOUND", self.label)
        for k, v in fields.items():
            setattr(row, k, v)
        row.updated_at = touch_time(row.updated_at)
        self.calls.append(("update", fields))
        return row

    def delete(self, db, record_id, owner_user_id):
        row = self.rows.get(record_id)
        if row is None or row.user_id != owner_user_id:
            return False
        del self.rows[record_id]
        return True

    def max_of(self, db, field, **filters):
        values = [getattr(r, field) for r in self.rows.values() if self._matches(r, filters)]
        return max(values) if values else None
