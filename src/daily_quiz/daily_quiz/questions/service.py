from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import DateLike, day_window, now_local
from ..common.validators import require_non_empty, require_option
from ..core.constants import OPTION_FIELDS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, DuplicateAnswerError, NoQuestionError
from ..users.service import SessionAccount
from .answer_repository import AnswerRepository
from .model import Question
from .repository import QuestionRepository

logger = logging.getLogger(__name__)


class QuestionService:
    """Use cases: publish the daily question and record students' answers."""

    def __init__(self, questions: QuestionRepository, answers: AnswerRepository, *, tz):
        self._questions = questions
        self._answers = answers
        self._tz = tz

    def question_for(self, day: Optional[DateLike] = None) -> Optional[Question]:
        return self._questions.get_in_window(day_window(day, tz=self._tz))

    def todays_question(self, *, now: Optional[datetime] = None) -> Optional[Question]:
        return self.question_for(now or now_local(self._tz))

    def create_question(
        self,
        *,
        current_role: Role,
        text: str,
        options: dict[str, str],
        correct_option: str,
        active_on: Optional[DateLike] = None,
    ) -> int:
        if current_role != Role.FACULTY:
            raise AuthorizationError("Only faculty can create questions")

        text = require_non_empty(text, "Question")
        cleaned = {key: require_non_empty(options.get(key, ""), f"Option {key[-1]}") for key in OPTION_FIELDS}
        correct_option = require_option(correct_option, "Correct option")

        if active_on is None:
            active_on = now_local(self._tz)
        elif not isinstance(active_on, datetime):
            active_on = day_window(active_on, tz=self._tz).start

        question_id = self._questions.create_question(
            text=text,
            option1=cleaned["option1"],
            option2=cleaned["option2"],
            option3=cleaned["option3"],
            option4=cleaned["option4"],
            correct_option=correct_option,
            active_on=active_on,
        )
        logger.info("Created question %s active on %s", question_id, active_on.date().isoformat())
        return question_id

    def submit_answer(self, account: SessionAccount, chosen_option: str, *, now: Optional[datetime] = None) -> int:
        """Record today's answer; one answer per student per day."""

        if account.role != Role.STUDENT:
            raise AuthorizationError("Only students can answer questions")

        chosen_option = require_option(chosen_option, "Answer")
        window = day_window(now or now_local(self._tz), tz=self._tz)

        if not self._questions.get_in_window(window):
            raise NoQuestionError("No question is available for today")

        if self._answers.get_for_account_in_window(account.account_id, window):
            raise DuplicateAnswerError("You have already answered today's question")

        answer_id = self._answers.create_answer(
            account_id=account.account_id,
            name=account.name,
            chosen_option=chosen_option,
            answered_on=window.start,
        )
        logger.info("Account %s answered %s for %s", account.account_id, chosen_option, window.day.isoformat())
        return answer_id
