"""Ordinal positions for weekly board cards.

A partition is ``(user_id, column, week_start_date)``. Auto-assigned
positions continue after the current maximum of the partition; explicit
positions are stored verbatim. Nothing is ever renumbered, so gaps and
duplicates can accumulate when cards move or callers pick positions
themselves. Readers must only rely on ascending order.

``next_position`` is a plain read followed by the caller's insert; two
concurrent creates in one partition can receive the same value.
"""
from __future__ import annotations
import logging
from typing import NamedTuple, Optional
from prometheus_client import Counter
from sqlalchemy.orm import Session

from ..repositories.record_repository import RecordRepository

logger = logging.getLogger(__name__)

POSITIONS_ASSIGNED = Counter(
    "focusflow_weekly_positions_assigned_total",
    "Weekly task positions assigned on create",
    ["mode"],
)


class Partition(NamedTuple):
    user_id: str
    column: str
    week_start_date: str


class PositionAllocator:
    def __init__(self, repo: RecordRepository):
        self.repo = repo

    def next_position(self, db: Session, partition: Partition) -> int:
        current = self.repo.max_of(db, "position", **partition._asdict())
        # an empty partition and one holding only position 0 both start at 1
        return (current or 0) + 1

    def assign(self, db: Session, partition: Partition, explicit: Optional[int] = None) -> int:
        if explicit is not None:
            POSITIONS_ASSIGNED.labels(mode="explicit").inc()
            logger.debug("explicit position %s in %s", explicit, partition)
            return explicit
        position = self.next_position(db, partition)
        POSITIONS_ASSIGNED.labels(mode="auto").inc()
        logger.debug("auto position %s in %s", position, partition)
        return position
