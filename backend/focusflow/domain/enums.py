"""Domain enumerations for strong typing & validation.

Values are stored verbatim in string columns; they are case- and
space-sensitive ("Side Hustle" keeps its space).
"""
from enum import Enum

class InboxTag(str, Enum):
    WORK = "Work"
    PERSONAL = "Personal"
    SIDE_HUSTLE = "Side Hustle"
    IDEA = "Idea"
    GRATITUDE = "Gratitude"
    FAMILY = "Family"
    SELF = "Self"

class DailyReviewType(str, Enum):
    AM = "AM"
    PM = "PM"

class WeeklyColumn(str, Enum):
    WORK = "Work"
    SIDE_HUSTLE = "Side Hustle"
    FAMILY = "Family"
    SELF = "Self"

class AutomationStatus(str, Enum):
    TO_AUTOMATE = "To Automate"
    IN_PROGRESS = "In Progress"
    AUTOMATED = "Automated"
    NEEDS_REVIEW = "Needs Review"


# Dashboard buckets, in display order
FOCUS_TAGS = (InboxTag.WORK, InboxTag.SIDE_HUSTLE, InboxTag.PERSONAL)

AM_REVIEW_FIELDS = ("todays_one_thing", "top_three_tasks", "gratitude")
PM_REVIEW_FIELDS = ("accomplished", "distractions", "tomorrows_shift")
REVIEW_TEXT_FIELDS = AM_REVIEW_FIELDS + PM_REVIEW_FIELDS
