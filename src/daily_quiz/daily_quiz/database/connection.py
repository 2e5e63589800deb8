from __future__ import annotations

import logging
from dataclasses import dataclass

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "daily_quiz")),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """DB connection handle owned by the application container.

    Built once per app and passed to every repository. Connections are
    short-lived, one per repository operation. After ``close()`` the handle
    refuses to open new connections.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._closed = False

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def connect(self):
        if self._closed:
            raise RuntimeError("Database connection handle is closed")
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            logger.info("Database handle closed (%s)", self._config.describe())
