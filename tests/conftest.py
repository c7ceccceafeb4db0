from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from conexion_db import logger
from conexion_db.config_manager import DbConfig


class FakeDatabaseError(Exception):
    """Stands in for a DB-API driver's Error class."""

    def __init__(self, message: str, pgcode: str | None = None) -> None:
        super().__init__(message)
        self.pgcode = pgcode


class FakeCursor:
    def __init__(self, driver: "TrackingDriver") -> None:
        self.driver = driver
        self.close_count = 0
        self.executed: list[tuple] = []
        self.description = [(name, None, None, None, None, None, None) for name in driver.columns]
        self.rowcount = -1

    def execute(self, query, params=None):
        self.executed.append((query, params))
        self.driver.events.append("execute")
        if self.driver.fail_on == "execute":
            raise FakeDatabaseError("syntax error at or near \"SELEC\"", pgcode="42601")
        self.rowcount = self.driver.rowcount

    def fetchone(self):
        if self.driver.fail_on == "fetch":
            raise FakeDatabaseError("no results to fetch")
        return self.driver.rows[0] if self.driver.rows else None

    def fetchall(self):
        return list(self.driver.rows)

    def close(self):
        self.close_count += 1
        self.driver.events.append("close_cursor")


class FakeConnection:
    def __init__(self, driver: "TrackingDriver") -> None:
        self.driver = driver
        self.close_count = 0
        self.cursors: list[FakeCursor] = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        if self.driver.fail_on == "cursor":
            raise FakeDatabaseError("connection already closed")
        cursor = self.driver.cursor_class(self.driver)
        self.cursors.append(cursor)
        self.driver.events.append("open_cursor")
        return cursor

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1
        if self.driver.rollback_fails:
            raise FakeDatabaseError("server closed the connection unexpectedly")

    def close(self):
        self.close_count += 1
        self.driver.events.append("close_connection")


class TrackingDriver:
    """DB-API driver stub that records every handle it hands out."""

    Error = FakeDatabaseError
    cursor_class = FakeCursor

    def __init__(
        self,
        rows=None,
        columns=("id_producto",),
        fail_on: str | None = None,
        rowcount: int = 1,
        paramstyle: str = "format",
        rollback_fails: bool = False,
    ) -> None:
        self.rows = list(rows or [])
        self.columns = columns
        self.fail_on = fail_on
        self.rowcount = rowcount
        self.paramstyle = paramstyle
        self.rollback_fails = rollback_fails
        self.events: list[str] = []
        self.connect_calls: list[tuple] = []
        self.connections: list[FakeConnection] = []

    def connect(self, dsn, user=None, password=None):
        self.connect_calls.append((dsn, user, password))
        if self.fail_on == "connect":
            raise FakeDatabaseError(
                'connection to server at "localhost", port 5432 failed: Connection refused'
            )
        connection = FakeConnection(self)
        self.connections.append(connection)
        self.events.append("open_connection")
        return connection

    @property
    def cursors(self) -> list[FakeCursor]:
        return [cursor for conn in self.connections for cursor in conn.cursors]

    def all_released_once(self) -> bool:
        return all(conn.close_count == 1 for conn in self.connections) and all(
            cursor.close_count == 1 for cursor in self.cursors
        )

    def resolver(self, driver_name):
        return self


@pytest.fixture
def tracking_driver() -> Callable[..., TrackingDriver]:
    return TrackingDriver


@pytest.fixture
def db_config() -> DbConfig:
    return DbConfig(
        url="jdbc:postgresql://localhost:5432/tienda",
        user="usuario",
        password="secreto123",
        test_query="SELECT id_producto FROM productos LIMIT 1",
        driver_name="psycopg2",
    )


@pytest.fixture
def write_properties(tmp_path: Path) -> Callable[[str], Path]:
    def _write(content: str, name: str = "jdbc.properties") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("DB_CONFIG_FILE", "ENABLE_LOGGING", "LOGS_DIR"):
        monkeypatch.delenv(var, raising=False)
    yield
    logger.close_logging()
    logger.LOG_ENABLED = False
