from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from ..db.session import get_db
from ..domain.enums import InboxTag
from ..services.inbox_service import InboxService
from .auth import get_current_user_id
from .payload import RecordRef, SuccessOut, set_fields

router = APIRouter(prefix="/rpc", tags=["inbox"])


class InboxItemCreate(BaseModel):
    content: str = Field(..., min_length=1)
    tag: InboxTag

class InboxItemUpdate(RecordRef):
    content: Optional[str] = Field(None, min_length=1)
    tag: Optional[InboxTag] = None
    is_processed: Optional[bool] = None

class InboxItemOut(BaseModel):
    id: int
    user_id: str
    content: str
    tag: str
    is_processed: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


@router.post("/createInboxItem", response_model=InboxItemOut)
def create_inbox_item(body: InboxItemCreate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    item = InboxService().create_item(db, user_id=user_id, content=body.content, tag=body.tag)
    return InboxItemOut.model_validate(item)

@router.get("/getInboxItems", response_model=List[InboxItemOut])
def get_inbox_items(
    processed_only: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    items = InboxService().list_items(db, user_id=user_id, processed_only=processed_only)
    return [InboxItemOut.model_validate(i) for i in items]

@router.post("/updateInboxItem", response_model=InboxItemOut)
def update_inbox_item(body: InboxItemUpdate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    item = InboxService().update_item(db, body.id, user_id, **set_fields(body))
    return InboxItemOut.model_validate(item)

@router.post("/deleteInboxItem", response_model=SuccessOut)
def delete_inbox_item(body: RecordRef, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return SuccessOut(success=InboxService().delete_item(db, body.id, user_id))
