from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import StudentProfile
from .repository import StudentProfileRepository

_COLUMNS = "profile_id, name, official_email, reg_no, class_name, department"


def _to_profile(row: dict) -> StudentProfile:
    return StudentProfile(
        profile_id=int(row["profile_id"]),
        name=row["name"],
        official_email=row["official_email"],
        class_name=row["class_name"],
        department=row["department"],
        reg_no=row.get("reg_no"),
    )


class MySQLStudentProfileRepository(StudentProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, official_email: str) -> Optional[StudentProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM student_profiles WHERE official_email=%s", (official_email,))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def list_all(self) -> Sequence[StudentProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM student_profiles ORDER BY profile_id")
            return [_to_profile(r) for r in fetchall(cur)]
