from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from ..questions.answer_model import AnswerRecord
from ..students.model import StudentProfile
from ..users.model import Account


@dataclass(frozen=True)
class RosterEntry:
    """Read-model row for the faculty attendance table."""

    account_id: int
    reg_no: Optional[str]
    name: Optional[str]
    class_name: Optional[str] = None
    department: Optional[str] = None
    chosen_option: Optional[str] = None
    is_correct: Optional[bool] = None


@dataclass(frozen=True)
class AttendancePartition:
    attempted: list[RosterEntry]
    unattempted: list[RosterEntry]
    classes: list[str] = field(default_factory=list)
    departments: list[str] = field(default_factory=list)


def _distinct(values: Iterable[Optional[str]]) -> list[str]:
    seen: dict[str, None] = {}
    for v in values:
        if v and v not in seen:
            seen[v] = None
    return list(seen)


def _matches(value: Optional[str], wanted: Optional[str]) -> bool:
    return not wanted or value == wanted


def partition_attendance(
    *,
    students: Sequence[Account],
    answers: Sequence[AnswerRecord],
    profiles: Sequence[StudentProfile],
    class_filter: Optional[str] = None,
    department_filter: Optional[str] = None,
    correct_option: Optional[str] = None,
) -> AttendancePartition:
    """Split the student roster into attempted / unattempted for one day.

    ``answers`` must already be restricted to the day window. A student has
    attempted the day iff an answer carries their account id. Filters use
    exact equality; empty means no restriction. Roster order is kept.
    Profiles are joined on email ignoring case.
    """

    profile_by_email = {p.official_email.lower(): p for p in profiles}
    answer_by_account: dict[int, AnswerRecord] = {}
    for a in answers:
        answer_by_account.setdefault(a.account_id, a)

    attempted: list[RosterEntry] = []
    unattempted: list[RosterEntry] = []

    for account in students:
        profile = profile_by_email.get(account.email.lower())
        class_name = profile.class_name if profile else None
        department = profile.department if profile else None

        if not (_matches(class_name, class_filter) and _matches(department, department_filter)):
            continue

        answer = answer_by_account.get(account.account_id)
        if answer is None:
            unattempted.append(
                RosterEntry(
                    account_id=account.account_id,
                    reg_no=account.reg_no,
                    name=account.name,
                    class_name=class_name,
                    department=department,
                )
            )
            continue

        attempted.append(
            RosterEntry(
                account_id=account.account_id,
                reg_no=account.reg_no,
                name=account.name,
                class_name=class_name,
                department=department,
                chosen_option=answer.chosen_option,
                is_correct=(answer.chosen_option == correct_option) if correct_option else None,
            )
        )

    return AttendancePartition(
        attempted=attempted,
        unattempted=unattempted,
        classes=_distinct(p.class_name for p in profiles),
        departments=_distinct(p.department for p in profiles),
    )
