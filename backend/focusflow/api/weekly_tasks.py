from datetime import date, datetime
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional
from sqlalchemy.orm import Session
from ..db.session import get_db
from ..domain.enums import WeeklyColumn
from ..services.weekly_task_service import WeeklyTaskService
from .auth import get_current_user_id
from .payload import DATE_PATTERN, RecordRef, SuccessOut, set_fields

router = APIRouter(prefix="/rpc", tags=["weekly-tasks"])


def _must_be_monday(value: Optional[str]) -> Optional[str]:
    if value is not None and date.fromisoformat(value).weekday() != 0:
        raise ValueError("week_start_date must be a Monday")
    return value


class WeeklyTaskCreate(BaseModel):
    title: str = Field(..., min_length=1)
    column: WeeklyColumn
    week_start_date: str = Field(..., pattern=DATE_PATTERN)
    position: Optional[int] = Field(None, ge=0)

    @field_validator("week_start_date")
    @classmethod
    def week_starts_on_monday(cls, value):
        return _must_be_monday(value)

class WeeklyTaskUpdate(RecordRef):
    title: Optional[str] = Field(None, min_length=1)
    column: Optional[WeeklyColumn] = None
    position: Optional[int] = Field(None, ge=0)
    week_start_date: Optional[str] = Field(None, pattern=DATE_PATTERN)

    @field_validator("week_start_date")
    @classmethod
    def week_starts_on_monday(cls, value):
        return _must_be_monday(value)

class WeeklyTaskOut(BaseModel):
    id: int
    user_id: str
    title: str
    column: str
    position: int
    week_start_date: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


@router.post("/createWeeklyTask", response_model=WeeklyTaskOut)
def create_weekly_task(body: WeeklyTaskCreate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    task = WeeklyTaskService().create_task(
        db,
        user_id=user_id,
        title=body.title,
        column=body.column,
        week_start_date=body.week_start_date,
        position=body.position,
    )
    return WeeklyTaskOut.model_validate(task)

@router.get("/getWeeklyTasks", response_model=List[WeeklyTaskOut])
def get_weekly_tasks(
    week_start_date: str = Query(..., pattern=DATE_PATTERN),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    tasks = WeeklyTaskService().list_week(db, user_id, week_start_date)
    return [WeeklyTaskOut.model_validate(t) for t in tasks]

@router.post("/updateWeeklyTask", response_model=WeeklyTaskOut)
def update_weekly_task(body: WeeklyTaskUpdate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    task = WeeklyTaskService().update_task(db, body.id, user_id, **set_fields(body))
    return WeeklyTaskOut.model_validate(task)

@router.post("/deleteWeeklyTask", response_model=SuccessOut)
def delete_weekly_task(body: RecordRef, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return SuccessOut(success=WeeklyTaskService().delete_task(db, body.id, user_id))
