import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..db import models
from ..domain.enums import AutomationStatus
from ..repositories.record_repository import RecordRepository, SqlAlchemyRecordRepository
from .validation import enum_value, require_text

logger = logging.getLogger(__name__)


class AutomationService:
    def __init__(self, repo: RecordRepository | None = None):
        self.repo = repo or SqlAlchemyRecordRepository(models.AutomationTask, "AUTOMATION_TASK", "Automation task")

    def create_task(self, db: Session, user_id: str, task_name: str, workflow_notes: Optional[str] = None,
                    status=None) -> models.AutomationTask:
        require_text(task_name, "AUTOMATION_TASK_NAME_REQUIRED", "task_name")
        task = self.repo.insert(
            db,
            user_id=user_id,
            task_name=task_name,
            workflow_notes=workflow_notes,
            status=enum_value(AutomationStatus, status or AutomationStatus.TO_AUTOMATE, "AUTOMATION_INVALID_STATUS"),
        )
        logger.info("automation task %s created for %s (%s)", task.id, user_id, task.status)
        return task

    def list_tasks(self, db: Session, user_id: str, status=None) -> List[models.AutomationTask]:
        filters = {"user_id": user_id}
        if status is not None:
            filters["status"] = enum_value(AutomationStatus, status, "AUTOMATION_INVALID_STATUS")
        return self.repo.find(db, order_by=("-created_at", "-id"), **filters)

    def update_task(self, db: Session, task_id: int, user_id: str, **changes) -> models.AutomationTask:
        if "task_name" in changes:
            require_text(changes["task_name"], "AUTOMATION_TASK_NAME_REQUIRED", "task_name")
        if "status" in changes:
            changes["status"] = enum_value(AutomationStatus, changes["status"], "AUTOMATION_INVALID_STATUS")
        task = self.repo.update(db, task_id, user_id, **changes)
        logger.info("automation task %s updated (%s)", task_id, ", ".join(sorted(changes)) or "touch")
        return task

    def delete_task(self, db: Session, task_id: int, user_id: str) -> bool:
        removed = self.repo.delete(db, task_id, user_id)
        logger.info("automation task %s delete by %s: removed=%s", task_id, user_id, removed)
        return removed
