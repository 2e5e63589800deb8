from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import day_window, now_local
from ..core.enums import Role
from ..core.exceptions import NoQuestionError
from ..questions.answer_repository import AnswerRepository
from ..questions.model import Question
from ..questions.repository import QuestionRepository
from ..students.repository import StudentProfileRepository
from ..users.repository import AccountRepository
from ..users.service import SessionAccount
from .aggregation import AttendancePartition, partition_attendance
from .eligibility import EligibilityVerdict, evaluate_eligibility

CSV_FIELDS = ["status", "reg_no", "name", "class", "department", "chosen_option", "is_correct"]


@dataclass(frozen=True)
class FacultyResults:
    day: date
    question: Question
    partition: AttendancePartition
    class_filter: str = ""
    department_filter: str = ""

    def csv_rows(self) -> list[dict]:
        rows: list[dict] = []
        for status, entries in (("attempted", self.partition.attempted), ("unattempted", self.partition.unattempted)):
            for e in entries:
                rows.append(
                    {
                        "status": status,
                        "reg_no": e.reg_no or "",
                        "name": e.name or "",
                        "class": e.class_name or "",
                        "department": e.department or "",
                        "chosen_option": e.chosen_option or "",
                        "is_correct": "" if e.is_correct is None else ("yes" if e.is_correct else "no"),
                    }
                )
        return rows


class ResultsService:
    """Read-only use cases behind the student and faculty results pages."""

    def __init__(
        self,
        questions: QuestionRepository,
        answers: AnswerRepository,
        accounts: AccountRepository,
        profiles: StudentProfileRepository,
        *,
        tz,
    ):
        self._questions = questions
        self._answers = answers
        self._accounts = accounts
        self._profiles = profiles
        self._tz = tz

    def student_results(self, account: SessionAccount, requested: Optional[date] = None) -> EligibilityVerdict:
        explicit = requested is not None
        window = day_window(requested if explicit else now_local(self._tz), tz=self._tz)

        question = self._questions.get_in_window(window)
        record = self._answers.get_for_account_in_window(account.account_id, window) if question else None
        answered = self._answers.answered_range_for_account(account.account_id) if question and explicit else None

        return evaluate_eligibility(
            requested_day=window.day,
            question=question,
            record=record,
            answered_days=answered or (),
            explicit=explicit,
            tz=self._tz,
        )

    def faculty_results(
        self,
        day: Optional[date] = None,
        *,
        class_filter: Optional[str] = None,
        department_filter: Optional[str] = None,
    ) -> FacultyResults:
        window = day_window(day, tz=self._tz)

        question = self._questions.get_in_window(window)
        if not question:
            raise NoQuestionError(f"No question for {window.day.isoformat()}")

        partition = partition_attendance(
            students=self._accounts.list_by_role(Role.STUDENT),
            answers=self._answers.list_in_window(window),
            profiles=self._profiles.list_all(),
            class_filter=class_filter,
            department_filter=department_filter,
            correct_option=question.correct_option,
        )
        return FacultyResults(
            day=window.day,
            question=question,
            partition=partition,
            class_filter=class_filter or "",
            department_filter=department_filter or "",
        )
