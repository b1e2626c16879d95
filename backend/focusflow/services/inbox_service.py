import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..db import models
from ..domain.enums import InboxTag
from ..repositories.record_repository import RecordRepository, SqlAlchemyRecordRepository
from .validation import enum_value, require_text

logger = logging.getLogger(__name__)

NEWEST_FIRST = ("-created_at", "-id")


class InboxService:
    def __init__(self, repo: RecordRepository | None = None):
        self.repo = repo or SqlAlchemyRecordRepository(models.InboxItem, "INBOX_ITEM", "Inbox item")

    def create_item(self, db: Session, user_id: str, content: str, tag) -> models.InboxItem:
        require_text(content, "INBOX_CONTENT_REQUIRED", "content")
        item = self.repo.insert(
            db,
            user_id=user_id,
            content=content,
            tag=enum_value(InboxTag, tag, "INBOX_INVALID_TAG"),
            is_processed=False,
        )
        logger.info("inbox item %s captured for %s", item.id, user_id)
        return item

    def list_items(self, db: Session, user_id: str, processed_only: Optional[bool] = None) -> List[models.InboxItem]:
        filters = {"user_id": user_id}
        if processed_only is not None:
            filters["is_processed"] = processed_only
        return self.repo.find(db, order_by=NEWEST_FIRST, **filters)

    def update_item(self, db: Session, item_id: int, user_id: str, **changes) -> models.InboxItem:
        """Apply only the supplied fields (``content``, ``tag``, ``is_processed``)."""
        if "content" in changes:
            require_text(changes["content"], "INBOX_CONTENT_REQUIRED", "content")
        if "tag" in changes:
            changes["tag"] = enum_value(InboxTag, changes["tag"], "INBOX_INVALID_TAG")
        item = self.repo.update(db, item_id, user_id, **changes)
        logger.info("inbox item %s updated (%s)", item_id, ", ".join(sorted(changes)) or "touch")
        return item

    def delete_item(self, db: Session, item_id: int, user_id: str) -> bool:
        removed = self.repo.delete(db, item_id, user_id)
        logger.info("inbox item %s delete by %s: removed=%s", item_id, user_id, removed)
        return removed
