from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
from sqlalchemy.orm import Session

from ..db import models
from ..domain.enums import InboxTag
from ..repositories.record_repository import RecordRepository, SqlAlchemyRecordRepository


@dataclass
class FocusTasks:
    work: List[models.InboxItem] = field(default_factory=list)
    side_hustle: List[models.InboxItem] = field(default_factory=list)
    personal: List[models.InboxItem] = field(default_factory=list)


_BUCKETS = {
    InboxTag.WORK.value: "work",
    InboxTag.SIDE_HUSTLE.value: "side_hustle",
    InboxTag.PERSONAL.value: "personal",
}


class FocusService:
    """Today's dashboard: unprocessed inbox items for Work, Side Hustle and Personal."""

    def __init__(self, repo: RecordRepository | None = None):
        self.repo = repo or SqlAlchemyRecordRepository(models.InboxItem, "INBOX_ITEM", "Inbox item")

    def today(self, db: Session, user_id: str) -> FocusTasks:
        result = FocusTasks()
        pending = self.repo.find(db, order_by=("-created_at", "-id"), user_id=user_id, is_processed=False)
        for item in pending:
            bucket = _BUCKETS.get(item.tag)
            if bucket:
                getattr(result, bucket).append(item)
        return result
