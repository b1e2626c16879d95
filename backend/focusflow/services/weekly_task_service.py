import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..db import models
from ..domain.enums import WeeklyColumn
from ..errors import ValidationAppError
from ..repositories.record_repository import RecordRepository, SqlAlchemyRecordRepository
from .position_allocator import Partition, PositionAllocator
from .validation import enum_value, iso_date, monday, require_text

logger = logging.getLogger(__name__)


def _position(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationAppError("WEEKLY_TASK_INVALID_POSITION", "position must be a non-negative integer")
    return value


class WeeklyTaskService:
    """Weekly board cards.

    Moving a card (new column, week or position) is a plain update; the
    partitions it leaves or joins are not renumbered.
    """

    def __init__(self, repo: RecordRepository | None = None, allocator: PositionAllocator | None = None):
        self.repo = repo or SqlAlchemyRecordRepository(models.WeeklyTask, "WEEKLY_TASK", "Weekly task")
        self.allocator = allocator or PositionAllocator(self.repo)

    def create_task(self, db: Session, user_id: str, title: str, column, week_start_date: str,
                    position: Optional[int] = None) -> models.WeeklyTask:
        require_text(title, "WEEKLY_TASK_TITLE_REQUIRED", "title")
        partition = Partition(
            user_id=user_id,
            column=enum_value(WeeklyColumn, column, "WEEKLY_TASK_INVALID_COLUMN"),
            week_start_date=monday(week_start_date, "WEEKLY_TASK_INVALID_WEEK"),
        )
        if position is not None:
            _position(position)
        task = self.repo.insert(
            db,
            title=title,
            position=self.allocator.assign(db, partition, position),
            **partition._asdict(),
        )
        logger.info("weekly task %s created in %s/%s at %s", task.id, task.column, task.week_start_date, task.position)
        return task

    def list_week(self, db: Session, user_id: str, week_start_date: str) -> List[models.WeeklyTask]:
        iso_date(week_start_date, "WEEKLY_TASK_INVALID_WEEK")
        return self.repo.find(db, order_by=("position", "id"), user_id=user_id, week_start_date=week_start_date)

    def update_task(self, db: Session, task_id: int, user_id: str, **changes) -> models.WeeklyTask:
        """Apply the supplied ``title``, ``column``, ``position`` and/or ``week_start_date``."""
        if "title" in changes:
            require_text(changes["title"], "WEEKLY_TASK_TITLE_REQUIRED", "title")
        if "column" in changes:
            changes["column"] = enum_value(WeeklyColumn, changes["column"], "WEEKLY_TASK_INVALID_COLUMN")
        if "position" in changes:
            _position(changes["position"])
        if "week_start_date" in changes:
            monday(changes["week_start_date"], "WEEKLY_TASK_INVALID_WEEK")
        task = self.repo.update(db, task_id, user_id, **changes)
        logger.info("weekly task %s updated (%s)", task_id, ", ".join(sorted(changes)) or "touch")
        return task

    def delete_task(self, db: Session, task_id: int, user_id: str) -> bool:
        removed = self.repo.delete(db, task_id, user_id)
        logger.info("weekly task %s delete by %s: removed=%s", task_id, user_id, removed)
        return removed
