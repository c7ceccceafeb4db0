"""
Database Service using psycopg2
Runs the single connect / query / read cycle of the connection demo
"""

import importlib
from contextlib import closing
from types import ModuleType
from typing import Callable, Optional, Sequence, Tuple, Type

import psycopg2

from .config_manager import DbConfig
from .exceptions import (
    DatabaseConnectionError,
    DatabaseFailure,
    DriverResolutionError,
    QueryError,
)
from .logger import log_only
from .models.outcome import Outcome

RESULT_COLUMN = "id_producto"

DriverResolver = Callable[[Optional[str]], ModuleType]


def resolve_driver(driver_name: Optional[str]) -> ModuleType:
    """
    Import a DB-API driver module by name.

    Args:
        driver_name: Importable module name (e.g. "psycopg2"), or None for psycopg2

    Returns:
        The driver module

    Raises:
        DriverResolutionError: If the module cannot be imported or has no connect()
    """
    if not driver_name:
        return psycopg2

    try:
        module = importlib.import_module(driver_name.strip())
    except ImportError as e:
        raise DriverResolutionError(driver_name, str(e)) from e

    if not callable(getattr(module, "connect", None)):
        raise DriverResolutionError(driver_name, "el módulo no define connect()")

    log_only(f"Resolved database driver: {driver_name}")
    return module


def database_errors(driver: ModuleType) -> Tuple[Type[BaseException], ...]:
    """Exception classes that signal a database failure for this driver"""
    error_class = getattr(driver, "Error", None)
    if isinstance(error_class, type) and issubclass(error_class, BaseException):
        return (error_class, DatabaseFailure)
    return (Exception,)


def open_connection(driver: ModuleType, config: DbConfig):
    """
    Open a connection with driver.connect(dsn, user=..., password=...).

    Raises:
        DatabaseConnectionError: If the driver does not accept that signature
    """
    try:
        return driver.connect(config.dsn, user=config.user, password=config.password)
    except TypeError as e:
        raise DatabaseConnectionError(
            f"El controlador no admite connect(dsn, user, password): {e}"
        ) from e


def describe_database_error(e: BaseException) -> str:
    """Human readable description of a driver error"""
    message = str(e).strip() or e.__class__.__name__
    pgcode = getattr(e, "pgcode", None)
    if pgcode:
        message += f" (PostgreSQL code: {pgcode})"
    return message


def column_index(description: Optional[Sequence], column: str) -> int:
    """Find a result column by name, ignoring case"""
    for index, column_info in enumerate(description or ()):
        if str(column_info[0]).lower() == column.lower():
            return index
    raise QueryError(f"La columna '{column}' no existe en el resultado de la consulta")


class ConnectionRunner:
    """
    Opens one connection, runs the configured test query and reads one row
    """

    def __init__(
        self, resolver: DriverResolver = resolve_driver, result_column: str = RESULT_COLUMN
    ):
        self.resolver = resolver
        self.result_column = result_column

    def run(self, config: DbConfig) -> Outcome:
        """
        Run the connection demo once.

        Connection and cursor are released on every exit path, cursor first.

        Returns:
            Outcome: CONNECTED_WITH_RESULT, CONNECTED_NO_RESULT,
            CONNECTION_FAILED or DRIVER_NOT_FOUND
        """
        try:
            driver = self.resolver(config.driver_name)
        except DriverResolutionError as e:
            log_only(f"Driver resolution failed: {e}", "ERROR")
            return Outcome.driver_not_found(str(e))

        try:
            log_only(f"Connecting to {config.url} as {config.user}")
            with closing(open_connection(driver, config)) as conn:
                with closing(conn.cursor()) as cursor:
                    log_only(f"Executing test query: {config.test_query}")
                    cursor.execute(config.test_query)
                    row = cursor.fetchone()

                    if row is None:
                        log_only("Test query returned no rows")
                        return Outcome.connected_no_result()

                    value = row[column_index(cursor.description, self.result_column)]
                    value = None if value is None else str(value)
                    log_only(f"Test query returned {self.result_column}={value}")
                    return Outcome.connected_with_result(value)

        except database_errors(driver) as e:
            reason = describe_database_error(e)
            log_only(f"Database error: {reason}", "ERROR")
            return Outcome.connection_failed(reason)


def run_connection_demo(config: DbConfig) -> Outcome:
    """Run the connection demo with the default driver resolver"""
    return ConnectionRunner().run(config)
