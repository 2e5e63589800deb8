"""Decide what a student may see on the results page for a given day."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.datetime_utils import DateLike, to_local_date
from ..core.enums import EligibilityStatus
from ..questions.answer_model import AnswerRecord
from ..questions.model import Question


@dataclass(frozen=True)
class EligibilityVerdict:
    status: EligibilityStatus
    question: Optional[Question] = None
    user_answer: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.status == EligibilityStatus.AVAILABLE


def evaluate_eligibility(
    *,
    requested_day: DateLike,
    question: Optional[Question],
    record: Optional[AnswerRecord],
    answered_days: Sequence[DateLike],
    explicit: bool,
    tz,
) -> EligibilityVerdict:
    """Return the verdict for ``requested_day``.

    ``question`` and ``record`` are the day's question and the student's answer
    for that day (already resolved through the day window). ``answered_days``
    holds the days the student has answered on; only its bounds matter. The
    range check applies only when the day was explicitly requested, and only
    when the student has answered at least once.
    """

    if question is None:
        return EligibilityVerdict(EligibilityStatus.NO_QUESTION)

    if explicit and answered_days:
        day = to_local_date(requested_day, tz)
        local_days = [to_local_date(d, tz) for d in answered_days]
        if day < min(local_days) or day > max(local_days):
            return EligibilityVerdict(EligibilityStatus.OUT_OF_RANGE, question=question)

    if record is None:
        return EligibilityVerdict(EligibilityStatus.NOT_ATTEMPTED, question=question)

    return EligibilityVerdict(
        EligibilityStatus.AVAILABLE,
        question=question,
        user_answer=record.chosen_option,
    )
