from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DBConfig

logger = logging.getLogger(__name__)

DEMO_FACULTY = ("Demo Faculty", "faculty.demo@christuniversity.in", "faculty123")
DEMO_STUDENT_PASSWORD = "student123"
# (email, chosen option) for the seeded answers; None picks the correct option.
DEMO_ANSWERS = (
    ("ana.li@btech.christuniversity.in", None),
    ("ravi.menon@btech.christuniversity.in", "option4"),
)

TABLES_IN_DELETE_ORDER = ("answers", "questions", "accounts", "student_profiles")


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _exec_script(db_config: dict, path: str | Path) -> None:
    target = DBConfig.from_dict(db_config)
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _exec_script(db_config, schema_path)
    logger.info("Applied schema %s", Path(schema_path).name)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _exec_script(db_config, seed_path)
    logger.info("Applied seed %s", Path(seed_path).name)


def ensure_demo_accounts(db_config: dict) -> None:
    """Create a faculty login and one student login per seeded profile."""

    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)

        def upsert_account(*, name: str, email: str, password: str, role: Role, reg_no=None) -> None:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT account_id FROM accounts WHERE email=%s", (email,))
            if cur.fetchone():
                cur.execute(
                    "UPDATE accounts SET name=%s, password_hash=%s, role=%s, reg_no=%s WHERE email=%s",
                    (name, password_hash, role.value, reg_no, email),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO accounts (email, password_hash, name, role, reg_no)
                    VALUES (%s, %s, %s, %s, %s)
                    """,
                    (email, password_hash, name, role.value, reg_no),
                )

        name, email, password = DEMO_FACULTY
        upsert_account(name=name, email=email, password=password, role=Role.FACULTY)

        cur.execute("SELECT name, official_email, reg_no FROM student_profiles ORDER BY profile_id")
        for profile in cur.fetchall():
            upsert_account(
                name=profile["name"],
                email=profile["official_email"],
                password=DEMO_STUDENT_PASSWORD,
                role=Role.STUDENT,
                reg_no=profile.get("reg_no"),
            )

        conn.commit()
    finally:
        conn.close()


def ensure_demo_answers(db_config: dict) -> None:
    """Answer every past seeded question for two of the demo students."""

    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        for email, chosen in DEMO_ANSWERS:
            cur.execute(
                """
                INSERT IGNORE INTO answers (account_id, name, chosen_option, answered_on, answered_day)
                SELECT a.account_id, a.name, COALESCE(%s, q.correct_option), DATE(q.active_on), DATE(q.active_on)
                FROM accounts a
                JOIN questions q ON DATE(q.active_on) < CURRENT_DATE
                WHERE a.email = %s
                """,
                (chosen, email),
            )
        conn.commit()
    finally:
        conn.close()
    logger.info("Seeded demo answers for %d students", len(DEMO_ANSWERS))


def clear_all(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        for table in TABLES_IN_DELETE_ORDER:
            cur.execute(f"DELETE FROM {table}")
        conn.commit()
    finally:
        conn.close()
    logger.info("Cleared tables: %s", ", ".join(TABLES_IN_DELETE_ORDER))


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
