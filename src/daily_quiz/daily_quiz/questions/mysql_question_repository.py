from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import DayWindow
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, from_db_datetime, to_db_datetime
from .model import Question
from .repository import QuestionRepository


class MySQLQuestionRepository(QuestionRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tz):
        self._conn_factory = conn_factory
        self._tz = tz

    def get_in_window(self, window: DayWindow) -> Optional[Question]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT question_id, question_text, option1, option2, option3, option4, correct_option, active_on
                FROM questions
                WHERE active_on >= %s AND active_on < %s
                ORDER BY active_on ASC, question_id ASC
                LIMIT 1
                """,
                (to_db_datetime(window.start, self._tz), to_db_datetime(window.end, self._tz)),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Question(
                question_id=int(r["question_id"]),
                text=r["question_text"],
                option1=r["option1"],
                option2=r["option2"],
                option3=r["option3"],
                option4=r["option4"],
                correct_option=r["correct_option"],
                active_on=from_db_datetime(r["active_on"], self._tz),
            )

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO questions(question_text, option1, option2, option3, option4, correct_option, active_on)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (text, option1, option2, option3, option4, correct_option, to_db_datetime(active_on, self._tz)),
            )
            return int(cur.lastrowid)
