from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Question:
    """Domain entity: the multiple-choice question active on one calendar day."""

    question_id: int
    text: str
    option1: str
    option2: str
    option3: str
    option4: str
    correct_option: str
    active_on: datetime

    @property
    def options(self) -> dict[str, str]:
        return {
            "option1": self.option1,
            "option2": self.option2,
            "option3": self.option3,
            "option4": self.option4,
        }
