from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from ..db.session import get_db
from ..domain.enums import DailyReviewType, REVIEW_TEXT_FIELDS
from ..services.daily_review_service import DailyReviewService
from .auth import get_current_user_id
from .payload import DATE_PATTERN, RecordRef, set_fields

router = APIRouter(prefix="/rpc", tags=["daily-reviews"])


class ReviewText(BaseModel):
    # AM
    todays_one_thing: Optional[str] = None
    top_three_tasks: Optional[str] = None
    gratitude: Optional[str] = None
    # PM
    accomplished: Optional[str] = None
    distractions: Optional[str] = None
    tomorrows_shift: Optional[str] = None

class DailyReviewCreate(ReviewText):
    review_date: str = Field(..., pattern=DATE_PATTERN)
    type: DailyReviewType

class DailyReviewUpdate(RecordRef, ReviewText):
    pass

class DailyReviewOut(ReviewText):
    id: int
    user_id: str
    review_date: str
    type: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


@router.post("/createDailyReview", response_model=DailyReviewOut)
def create_daily_review(body: DailyReviewCreate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    text = body.model_dump(include=set(REVIEW_TEXT_FIELDS))
    review = DailyReviewService().create_review(db, user_id, body.review_date, body.type, **text)
    return DailyReviewOut.model_validate(review)

@router.get("/getDailyReview", response_model=Optional[DailyReviewOut])
def get_daily_review(
    review_date: str = Query(..., pattern=DATE_PATTERN),
    type: Optional[DailyReviewType] = Query(None),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    review = DailyReviewService().get_review(db, user_id, review_date, type)
    return DailyReviewOut.model_validate(review) if review else None

@router.post("/updateDailyReview", response_model=DailyReviewOut)
def update_daily_review(body: DailyReviewUpdate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    changes = set_fields(body, nullable=REVIEW_TEXT_FIELDS)
    review = DailyReviewService().update_review(db, body.id, user_id, **changes)
    return DailyReviewOut.model_validate(review)
