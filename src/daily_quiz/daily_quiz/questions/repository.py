from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from ..common.datetime_utils import DayWindow
from .model import Question


class QuestionRepository(Protocol):
    def get_in_window(self, window: DayWindow) -> Optional[Question]:
        """First question whose ``active_on`` falls in the window."""

        raise NotImplementedError

    def create_question(
        self,
        *,
        text: str,
        option1: str,
        option2: str,
        option3: str,
        option4: str,
        correct_option: str,
        active_on: datetime,
    ) -> int:
        raise NotImplementedError
