import pytest

from daily_quiz.database.connection import DBConfig, DatabaseConnection


def test_closed_handle_refuses_new_connections():
    conn = DatabaseConnection(DBConfig.from_dict({"host": "db", "database": "quiz"}))

    conn.close()
    conn.close()

    assert conn.closed
    with pytest.raises(RuntimeError):
        conn.connect()


def test_config_defaults():
    cfg = DBConfig.from_dict({})

    assert cfg.port == 3306
    assert cfg.describe() == "root@localhost:3306/daily_quiz"
