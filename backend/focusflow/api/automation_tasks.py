from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from ..db.session import get_db
from ..domain.enums import AutomationStatus
from ..services.automation_service import AutomationService
from .auth import get_current_user_id
from .payload import RecordRef, SuccessOut, set_fields

router = APIRouter(prefix="/rpc", tags=["automation"])


class AutomationTaskCreate(BaseModel):
    task_name: str = Field(..., min_length=1)
    workflow_notes: Optional[str] = None
    status: Optional[AutomationStatus] = None

class AutomationTaskUpdate(RecordRef):
    task_name: Optional[str] = Field(None, min_length=1)
    workflow_notes: Optional[str] = None
    status: Optional[AutomationStatus] = None

class AutomationTaskOut(BaseModel):
    id: int
    user_id: str
    task_name: str
    workflow_notes: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


@router.post("/createAutomationTask", response_model=AutomationTaskOut)
def create_automation_task(body: AutomationTaskCreate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    task = AutomationService().create_task(
        db, user_id=user_id, task_name=body.task_name, workflow_notes=body.workflow_notes, status=body.status
    )
    return AutomationTaskOut.model_validate(task)

@router.get("/getAutomationTasks", response_model=List[AutomationTaskOut])
def get_automation_tasks(
    status: Optional[AutomationStatus] = Query(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    tasks = AutomationService().list_tasks(db, user_id, status)
    return [AutomationTaskOut.model_validate(t) for t in tasks]

@router.post("/updateAutomationTask", response_model=AutomationTaskOut)
def update_automation_task(body: AutomationTaskUpdate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    changes = set_fields(body, nullable=("workflow_notes",))
    task = AutomationService().update_task(db, body.id, user_id, **changes)
    return AutomationTaskOut.model_validate(task)

@router.post("/deleteAutomationTask", response_model=SuccessOut)
def delete_automation_task(body: RecordRef, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return SuccessOut(success=AutomationService().delete_task(db, body.id, user_id))
