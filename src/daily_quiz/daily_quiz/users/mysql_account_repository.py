from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Account
from .repository import AccountRepository

_COLUMNS = "account_id, email, password_hash, name, role, reg_no"


def _to_account(row: dict) -> Account:
    return Account(
        account_id=int(row["account_id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        name=row.get("name"),
        reg_no=row.get("reg_no"),
    )


class MySQLAccountRepository(AccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, account_id: int) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM accounts WHERE account_id=%s", (int(account_id),))
            row = fetchone(cur)
            return _to_account(row) if row else None

    def get_by_email(self, email: str) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM accounts WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_account(row) if row else None

    def list_by_role(self, role: Role) -> Sequence[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM accounts WHERE role=%s ORDER BY account_id",
                (role.value,),
            )
            return [_to_account(r) for r in fetchall(cur)]

    def create_account(
        self,
        *,
        email: str,
        password_hash: str,
        role: Role,
        name: Optional[str] = None,
        reg_no: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO accounts(email, password_hash, name, role, reg_no)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (email, password_hash, name, role.value, reg_no),
            )
            return int(cur.lastrowid)
