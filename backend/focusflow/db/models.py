from sqlalchemy import Column, String, DateTime, Integer, Boolean, Text, Index
from datetime import datetime, timezone
from .session import Base
from ..domain.enums import AutomationStatus


def utcnow() -> datetime:
    # naive UTC: SQLite drops tzinfo on the way back, keep both sides comparable
    return datetime.now(timezone.utc).replace(tzinfo=None)

class User(Base):
    __tablename__ = "users"
    id = Column(String(255), primary_key=True)
    email = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

class InboxItem(Base):
    __tablename__ = "inbox_items"
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    content = Column(Text, nullable=False)
    tag = Column(String(32), nullable=False, index=True)
    is_processed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

class DailyReview(Base):
    __tablename__ = "daily_reviews"
    __table_args__ = (Index("ix_daily_reviews_user_date", "user_id", "review_date"),)
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    review_date = Column(String(10), nullable=False)  # YYYY-MM-DD
    type = Column(String(2), nullable=False)
    # AM
    todays_one_thing = Column(Text, nullable=True)
    top_three_tasks = Column(Text, nullable=True)
    gratitude = Column(Text, nullable=True)
    # PM
    accomplished = Column(Text, nullable=True)
    distractions = Column(Text, nullable=True)
    tomorrows_shift = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

class WeeklyTask(Base):
    __tablename__ = "weekly_tasks"
    __table_args__ = (Index("ix_weekly_tasks_partition", "user_id", "column", "week_start_date"),)
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    title = Column(Text, nullable=False)
    column = Column(String(32), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    week_start_date = Column(String(10), nullable=False)  # Monday, YYYY-MM-DD
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

class AutomationTask(Base):
    __tablename__ = "automation_tasks"
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    task_name = Column(Text, nullable=False)
    workflow_notes = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default=AutomationStatus.TO_AUTOMATE.value, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
