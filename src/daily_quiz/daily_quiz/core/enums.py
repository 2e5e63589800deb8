from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role, derived from the email domain at sign-up."""

    STUDENT = "student"
    FACULTY = "faculty"


class EligibilityStatus(str, Enum):
    """Outcome of a student's request to view results for a day."""

    AVAILABLE = "AVAILABLE"
    NO_QUESTION = "NO_QUESTION"
    NOT_ATTEMPTED = "NOT_ATTEMPTED"
    OUT_OF_RANGE = "OUT_OF_RANGE"


class DashboardAlert(str, Enum):
    """Values of the ``alert`` query parameter understood by the dashboard."""

    NO_QUESTION = "noQuestion"
    NOT_DONE = "notDone"
    WRONG_DATE = "wrongDate"
    ALREADY_ANSWERED = "alreadyAnswered"
