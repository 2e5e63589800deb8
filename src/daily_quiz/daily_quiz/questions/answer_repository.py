from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..common.datetime_utils import DayWindow
from .answer_model import AnswerRecord


class AnswerRepository(Protocol):
    def get_for_account_in_window(self, account_id: int, window: DayWindow) -> Optional[AnswerRecord]:
        raise NotImplementedError

    def list_in_window(self, window: DayWindow) -> Sequence[AnswerRecord]:
        raise NotImplementedError

    def answered_range_for_account(self, account_id: int) -> Optional[tuple[datetime, datetime]]:
        """(earliest, latest) ``answered_on`` for the account, or None if it never answered."""

        raise NotImplementedError

    def create_answer(self, *, account_id: int, name: str, chosen_option: str, answered_on: datetime) -> int:
        raise NotImplementedError
