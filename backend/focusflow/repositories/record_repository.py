from __future__ import annotations
import logging
from datetime import timedelta
from typing import Protocol, Any, List, Optional, Sequence
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import models
from ..errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class RecordRepository(Protocol):
    """Keyed, owner-scoped storage for one entity table."""

    def insert(self, db: Session, **fields: Any) -> Any: ...

    def find(self, db: Session, order_by: Sequence[str] = (), **filters: Any) -> List[Any]: ...

    def find_one(self, db: Session, **filters: Any) -> Optional[Any]: ...

    def update(self, db: Session, record_id: Any, owner_user_id: str, **fields: Any) -> Any: ...

    def delete(self, db: Session, record_id: Any, owner_user_id: str) -> bool: ...

    def max_of(self, db: Session, field: str, **filters: Any) -> Optional[Any]: ...


def touch_time(previous):
    """Timestamp for a mutation, strictly after ``previous`` when given."""
    now = models.utcnow()
    if previous is not None:
        previous = previous.replace(tzinfo=None)
        if now <= previous:
            now = previous + timedelta(microseconds=1)
    return now


class SqlAlchemyRecordRepository:
    """SQLAlchemy-backed implementation.

    ``order_by`` takes column names; a leading ``-`` sorts descending.
    """

    def __init__(self, model, code_prefix: str, entity_label: str | None = None):
        self.model = model
        self.not_found_code = f"{code_prefix}_NOT_FOUND"
        self.conflict_code = f"{code_prefix}_CONFLICT"
        self.entity_label = entity_label or model.__name__

    def _query(self, db: Session, filters: dict):
        q = db.query(self.model)
        for name, value in filters.items():
            q = q.filter(getattr(self.model, name) == value)
        return q

    def _owned(self, db: Session, record_id: Any, owner_user_id: str):
        return self._query(db, {"id": record_id, "user_id": owner_user_id})

    def insert(self, db: Session, **fields: Any):
        record = self.model(**fields)
        db.add(record)
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning("%s insert rejected by unique constraint: %s", self.entity_label, exc.orig)
            raise ConflictError(self.conflict_code, f"{self.entity_label} already exists")
        db.refresh(record)
        return record

    def find(self, db: Session, order_by: Sequence[str] = (), **filters: Any) -> List[Any]:
        q = self._query(db, filters)
        for key in order_by:
            if key.startswith("-"):
                q = q.order_by(getattr(self.model, key[1:]).desc())
            else:
                q = q.order_by(getattr(self.model, key).asc())
        return q.all()

    def find_one(self, db: Session, **filters: Any):
        return self._query(db, filters).order_by(self.model.id.asc()).first()

    def update(self, db: Session, record_id: Any, owner_user_id: str, **fields: Any):
        record = self._owned(db, record_id, owner_user_id).first()
        if record is None:
            raise NotFoundError.for_entity(self.not_found_code, self.entity_label)
        for name, value in fields.items():
            setattr(record, name, value)
        record.updated_at = touch_time(record.updated_at)
        db.commit()
        db.refresh(record)
        return record

    def delete(self, db: Session, record_id: Any, owner_user_id: str) -> bool:
        removed = self._owned(db, record_id, owner_user_id).delete(synchronize_session=False)
        db.commit()
        return removed > 0

    def max_of(self, db: Session, field: str, **filters: Any):
        q = db.query(func.max(getattr(self.model, field)))
        for name, value in filters.items():
            q = q.filter(getattr(self.model, name) == value)
        return q.scalar()
