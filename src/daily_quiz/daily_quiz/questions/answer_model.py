from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AnswerRecord:
    """One student's answer to one day's question.

    ``name`` is a display copy; ``account_id`` identifies the student.
    """

    answer_id: int
    account_id: int
    name: str
    chosen_option: str
    answered_on: datetime
