from __future__ import annotations

from dataclasses import dataclass

from .common.datetime_utils import load_timezone
from .core.constants import DEFAULT_TIMEZONE, FACULTY_EMAIL_DOMAIN, STUDENT_EMAIL_DOMAIN
from .database.connection import DBConfig, DatabaseConnection
from .questions.answer_repository import AnswerRepository
from .questions.mysql_answer_repository import MySQLAnswerRepository
from .questions.mysql_question_repository import MySQLQuestionRepository
from .questions.repository import QuestionRepository
from .questions.service import QuestionService
from .results.service import ResultsService
from .students.mysql_student_repository import MySQLStudentProfileRepository
from .students.repository import StudentProfileRepository
from .users.mysql_account_repository import MySQLAccountRepository
from .users.repository import AccountRepository
from .users.service import AuthService, SignupService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None
    tz: object

    accounts_repo: AccountRepository
    profiles_repo: StudentProfileRepository
    questions_repo: QuestionRepository
    answers_repo: AnswerRepository

    auth_service: AuthService
    signup_service: SignupService
    question_service: QuestionService
    results_service: ResultsService

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def wire_services(
    *,
    tz,
    accounts_repo: AccountRepository,
    profiles_repo: StudentProfileRepository,
    questions_repo: QuestionRepository,
    answers_repo: AnswerRepository,
    conn: DatabaseConnection | None = None,
    student_domain: str = STUDENT_EMAIL_DOMAIN,
    faculty_domain: str = FACULTY_EMAIL_DOMAIN,
) -> Container:
    """Build the services over any repository implementations."""

    return Container(
        conn=conn,
        tz=tz,
        accounts_repo=accounts_repo,
        profiles_repo=profiles_repo,
        questions_repo=questions_repo,
        answers_repo=answers_repo,
        auth_service=AuthService(accounts_repo),
        signup_service=SignupService(
            accounts_repo,
            profiles_repo,
            student_domain=student_domain,
            faculty_domain=faculty_domain,
        ),
        question_service=QuestionService(questions_repo, answers_repo, tz=tz),
        results_service=ResultsService(questions_repo, answers_repo, accounts_repo, profiles_repo, tz=tz),
    )


def build_container(
    *,
    db_config: dict,
    timezone: str = DEFAULT_TIMEZONE,
    student_domain: str = STUDENT_EMAIL_DOMAIN,
    faculty_domain: str = FACULTY_EMAIL_DOMAIN,
) -> Container:
    tz = load_timezone(timezone)
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_services(
        tz=tz,
        conn=conn,
        accounts_repo=MySQLAccountRepository(conn),
        profiles_repo=MySQLStudentProfileRepository(conn),
        questions_repo=MySQLQuestionRepository(conn, tz=tz),
        answers_repo=MySQLAnswerRepository(conn, tz=tz),
        student_domain=student_domain,
        faculty_domain=faculty_domain,
    )
