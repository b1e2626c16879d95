from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from sqlalchemy.orm import Session
from ..db.session import get_db
from ..services.focus_service import FocusService
from .auth import get_current_user_id
from .inbox import InboxItemOut

router = APIRouter(prefix="/rpc", tags=["dashboard"])


class FocusTasksOut(BaseModel):
    work: List[InboxItemOut]
    side_hustle: List[InboxItemOut] = Field(..., alias="sideHustle")
    personal: List[InboxItemOut]

    model_config = ConfigDict(populate_by_name=True)


@router.get("/getTodayFocusTasks", response_model=FocusTasksOut, response_model_by_alias=True)
def get_today_focus_tasks(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    focus = FocusService().today(db, user_id)
    return FocusTasksOut(
        work=[InboxItemOut.model_validate(i) for i in focus.work],
        side_hustle=[InboxItemOut.model_validate(i) for i in focus.side_hustle],
        personal=[InboxItemOut.model_validate(i) for i in focus.personal],
    )
