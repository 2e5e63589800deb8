from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

import pytest
from werkzeug.security import generate_password_hash

from daily_quiz.common.datetime_utils import DayWindow, day_window, to_local_date
from daily_quiz.container import wire_services
from daily_quiz.core.enums import Role
from daily_quiz.core.exceptions import DuplicateAnswerError
from daily_quiz.questions.answer_model import AnswerRecord
from daily_quiz.questions.model import Question
from daily_quiz.students.model import StudentProfile
from daily_quiz.users.model import Account

TZ = ZoneInfo("Asia/Kolkata")


class InMemoryAccounts:
    def __init__(self):
        self._by_id: dict[int, Account] = {}

    def get_by_id(self, account_id: int) -> Optional[Account]:
        return self._by_id.get(int(account_id))

    def get_by_email(self, email: str) -> Optional[Account]:
        return next((a for a in self._by_id.values() if a.email == email), None)

    def list_by_role(self, role: Role):
        return [a for a in self._by_id.values() if a.role == role]

    def create_account(self, *, email, password_hash, role, name=None, reg_no=None) -> int:
        account_id = len(self._by_id) + 1
        self._by_id[account_id] = Account(
            account_id=account_id,
            email=email,
            password_hash=password_hash,
            role=role,
            name=name,
            reg_no=reg_no,
        )
        return account_id

    def add(self, email: str, *, name: str, role: Role = Role.STUDENT, reg_no=None, password: str = "secret1") -> Account:
        account_id = self.create_account(
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
            name=name,
            reg_no=reg_no,
        )
        return self._by_id[account_id]


@dataclass
class InMemoryProfiles:
    profiles: list[StudentProfile] = field(default_factory=list)

    def get_by_email(self, official_email: str) -> Optional[StudentProfile]:
        return next((p for p in self.profiles if p.official_email == official_email), None)

    def list_all(self):
        return list(self.profiles)

    def add(self, name: str, email: str, *, class_name: str, department: str, reg_no=None) -> StudentProfile:
        profile = StudentProfile(
            profile_id=len(self.profiles) + 1,
            name=name,
            official_email=email,
            class_name=class_name,
            department=department,
            reg_no=reg_no,
        )
        self.profiles.append(profile)
        return profile


@dataclass
class InMemoryQuestions:
    questions: list[Question] = field(default_factory=list)

    def get_in_window(self, window: DayWindow) -> Optional[Question]:
        matching = sorted((q for q in self.questions if window.contains(q.active_on)), key=lambda q: q.active_on)
        return matching[0] if matching else None

    def create_question(self, *, text, option1, option2, option3, option4, correct_option, active_on) -> int:
        question_id = len(self.questions) + 1
        self.questions.append(
            Question(
                question_id=question_id,
                text=text,
                option1=option1,
                option2=option2,
                option3=option3,
                option4=option4,
                correct_option=correct_option,
                active_on=active_on,
            )
        )
        return question_id

    def add(self, active_on: datetime, *, correct_option: str = "option2", text: str = "Which keyword sorts rows?") -> Question:
        question_id = self.create_question(
            text=text,
            option1="SORT BY",
            option2="ORDER BY",
            option3="GROUP BY",
            option4="ARRANGE BY",
            correct_option=correct_option,
            active_on=active_on,
        )
        return self.questions[question_id - 1]


@dataclass
class InMemoryAnswers:
    tz: object = TZ
    records: list[AnswerRecord] = field(default_factory=list)

    def get_for_account_in_window(self, account_id: int, window: DayWindow) -> Optional[AnswerRecord]:
        return next((r for r in self.records if r.account_id == account_id and window.contains(r.answered_on)), None)

    def list_in_window(self, window: DayWindow):
        return [r for r in self.records if window.contains(r.answered_on)]

    def answered_range_for_account(self, account_id: int):
        days = [r.answered_on for r in self.records if r.account_id == account_id]
        if not days:
            return None
        return min(days), max(days)

    def create_answer(self, *, account_id, name, chosen_option, answered_on) -> int:
        day = to_local_date(answered_on, self.tz)
        if any(r.account_id == account_id and to_local_date(r.answered_on, self.tz) == day for r in self.records):
            raise DuplicateAnswerError("You have already answered today's question")
        answer_id = len(self.records) + 1
        self.records.append(
            AnswerRecord(
                answer_id=answer_id,
                account_id=account_id,
                name=name,
                chosen_option=chosen_option,
                answered_on=answered_on,
            )
        )
        return answer_id

    def add(self, account: Account, day, chosen_option: str = "option2") -> AnswerRecord:
        self.create_answer(
            account_id=account.account_id,
            name=account.name,
            chosen_option=chosen_option,
            answered_on=day_window(day, tz=self.tz).start,
        )
        return self.records[-1]


@pytest.fixture
def tz():
    return TZ


@pytest.fixture
def fixed_now(tz):
    return datetime(2024, 3, 1, 10, 30, tzinfo=tz)


@pytest.fixture
def accounts():
    return InMemoryAccounts()


@pytest.fixture
def profiles():
    return InMemoryProfiles()


@pytest.fixture
def questions():
    return InMemoryQuestions()


@pytest.fixture
def answers(tz):
    return InMemoryAnswers(tz=tz)


@pytest.fixture
def container(tz, accounts, profiles, questions, answers):
    return wire_services(
        tz=tz,
        accounts_repo=accounts,
        profiles_repo=profiles,
        questions_repo=questions,
        answers_repo=answers,
    )


@pytest.fixture
def frozen_clock(monkeypatch, fixed_now):
    """Pin ``now_local`` in every module that reads the clock."""

    def _now(tz):
        return fixed_now.astimezone(tz)

    for target in (
        "daily_quiz.common.datetime_utils.now_local",
        "daily_quiz.questions.service.now_local",
        "daily_quiz.results.service.now_local",
    ):
        monkeypatch.setattr(target, _now)
    return fixed_now
