from __future__ import annotations

from dataclasses import dataclass
import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    connect_timeout: int = 10
    statement_timeout_ms: int = 5000
    lock_wait_timeout: int = 5

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config["host"]),
            port=int(db_config.get("port", 3306)),
            user=str(db_config["user"]),
            password=str(db_config["password"]),
            database=str(db_config["database"]),
            connect_timeout=int(db_config.get("connect_timeout", 10)),
            statement_timeout_ms=int(db_config.get("statement_timeout_ms", 5000)),
            lock_wait_timeout=int(db_config.get("lock_wait_timeout", 5)),
        )


class DatabaseConnection:
    """DB connection factory, one per configured database.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    Every session is bounded: connect timeout, SELECT execution time and row lock wait.
    """

    def __init__(self, config: DBConfig):
        self._config = config

    def connect(self):
        conn = mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
            connection_timeout=int(self._config.connect_timeout),
            autocommit=False,
        )
        try:
            cur = conn.cursor()
            try:
                cur.execute("SET SESSION max_execution_time=%s", (int(self._config.statement_timeout_ms),))
                cur.execute("SET SESSION innodb_lock_wait_timeout=%s", (int(self._config.lock_wait_timeout),))
            finally:
                cur.close()
        except Exception:
            # nobody else holds the connection yet
            conn.close()
            raise
        return conn
