from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

import mysql.connector

from ..common.datetime_utils import DayWindow, to_local_date
from ..core.exceptions import DuplicateAnswerError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .answer_model import AnswerRecord
from .answer_repository import AnswerRepository

_COLUMNS = "answer_id, account_id, name, chosen_option, answered_on"

# MySQL ER_DUP_ENTRY
_DUPLICATE_KEY = 1062


class MySQLAnswerRepository(AnswerRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tz):
        self._conn_factory = conn_factory
        self._tz = tz

    def _to_record(self, r: dict) -> AnswerRecord:
        return AnswerRecord(
            answer_id=int(r["answer_id"]),
            account_id=int(r["account_id"]),
            name=r["name"],
            chosen_option=r["chosen_option"],
            answered_on=from_db_datetime(r["answered_on"], self._tz),
        )

    def _bounds(self, window: DayWindow) -> tuple[datetime, datetime]:
        return to_db_datetime(window.start, self._tz), to_db_datetime(window.end, self._tz)

    def get_for_account_in_window(self, account_id: int, window: DayWindow) -> Optional[AnswerRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM answers
                WHERE account_id=%s AND answered_on >= %s AND answered_on < %s
                ORDER BY answered_on ASC
                LIMIT 1
                """,
                (int(account_id), *self._bounds(window)),
            )
            r = fetchone(cur)
            return self._to_record(r) if r else None

    def list_in_window(self, window: DayWindow) -> Sequence[AnswerRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM answers
                WHERE answered_on >= %s AND answered_on < %s
                ORDER BY answer_id ASC
                """,
                self._bounds(window),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    def answered_range_for_account(self, account_id: int) -> Optional[tuple[datetime, datetime]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT MIN(answered_on) AS earliest, MAX(answered_on) AS latest
                FROM answers
                WHERE account_id=%s
                """,
                (int(account_id),),
            )
            r = fetchone(cur)
            if not r or r.get("earliest") is None:
                return None
            return from_db_datetime(r["earliest"], self._tz), from_db_datetime(r["latest"], self._tz)

    def create_answer(self, *, account_id: int, name: str, chosen_option: str, answered_on: datetime) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO answers(account_id, name, chosen_option, answered_on, answered_day)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (
                        int(account_id),
                        name,
                        chosen_option,
                        to_db_datetime(answered_on, self._tz),
                        to_local_date(answered_on, self._tz),
                    ),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if e.errno == _DUPLICATE_KEY:
                raise DuplicateAnswerError("You have already answered today's question") from e
            raise
