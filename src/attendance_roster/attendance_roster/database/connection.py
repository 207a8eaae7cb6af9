from __future__ import annotations

import logging
from dataclasses import dataclass

import mysql.connector
from mysql.connector import errors as mysql_errors

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Unreachable host, local socket, bad credentials, unknown database.
_CONNECT_ERRNOS = {2003, 2005, 1045, 1049}


@dataclass
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
            database=str(db_config.get("database", "attendance_roster")),
        )

    def describe(self) -> str:
        """Connection target without the password, safe for logs."""
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """DB connection factory.

    Note: We create short-lived connections per operation; each one is a
    single transaction (autocommit stays off).
    """

    def __init__(self, config: DBConfig):
        self._config = config

    def connect(self):
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql_errors.Error as e:
            expected = isinstance(e, (mysql_errors.InterfaceError, mysql_errors.ProgrammingError))
            if not expected and e.errno not in _CONNECT_ERRNOS:
                raise
            logger.error("database connection failed (%s): %s", self._config.describe(), getattr(e, "errno", None))
            raise ConfigurationError(
                "Database is unreachable or misconfigured",
                hint="Check DATABASE_URL or the DB_HOST/DB_PORT/DB_USER/DB_PASSWORD/DB_NAME settings.",
            ) from e
