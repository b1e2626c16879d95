"""AM/PM daily reviews.

Creating a review never upserts: two creates for the same
``(user_id, review_date, type)`` store two rows, and ``get_review`` returns
the earliest of them.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session

from ..db import models
from ..domain.enums import DailyReviewType, REVIEW_TEXT_FIELDS
from ..errors import ValidationAppError
from ..repositories.record_repository import RecordRepository, SqlAlchemyRecordRepository
from .validation import enum_value, iso_date

logger = logging.getLogger(__name__)


def _text_fields(fields: dict) -> dict:
    unknown = set(fields) - set(REVIEW_TEXT_FIELDS)
    if unknown:
        raise ValidationAppError("REVIEW_UNKNOWN_FIELD", f"unknown review fields: {', '.join(sorted(unknown))}")
    return fields


class DailyReviewService:
    def __init__(self, repo: RecordRepository | None = None):
        self.repo = repo or SqlAlchemyRecordRepository(models.DailyReview, "DAILY_REVIEW", "Daily review")

    def create_review(self, db: Session, user_id: str, review_date: str, type, **text_fields) -> models.DailyReview:
        iso_date(review_date, "REVIEW_INVALID_DATE")
        values = {name: None for name in REVIEW_TEXT_FIELDS}
        values.update(_text_fields(text_fields))
        review = self.repo.insert(
            db,
            user_id=user_id,
            review_date=review_date,
            type=enum_value(DailyReviewType, type, "REVIEW_INVALID_TYPE"),
            **values,
        )
        logger.info("%s review %s for %s created by %s", review.type, review.id, review_date, user_id)
        return review

    def get_review(self, db: Session, user_id: str, review_date: str, type=None) -> Optional[models.DailyReview]:
        filters = {"user_id": user_id, "review_date": review_date}
        if type is not None:
            filters["type"] = enum_value(DailyReviewType, type, "REVIEW_INVALID_TYPE")
        return self.repo.find_one(db, **filters)

    def update_review(self, db: Session, review_id: int, user_id: str, **text_fields) -> models.DailyReview:
        review = self.repo.update(db, review_id, user_id, **_text_fields(text_fields))
        logger.info("review %s updated (%s)", review_id, ", ".join(sorted(text_fields)) or "touch")
        return review
