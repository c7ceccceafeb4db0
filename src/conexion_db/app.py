"""
Database connection demo

Loads the connection settings from config/jdbc.properties, connects to the
database, runs the test query and prints the result.

Usage:
    python app.py          # Connection demo
    python app_crud.py     # CRUD demo on the productos table
"""

from typing import Callable, Dict

from .config_manager import DbConfig, load_config, load_environment
from .database_service import run_connection_demo
from .exceptions import ConfigError
from .logger import (
    close_logging,
    log_only,
    print_error,
    print_normal,
    print_success,
    setup_logging,
)
from .models.outcome import Outcome, OutcomeKind
from .services.crud_demo import run_crud_demo
from .utils.environment_utils import get_environment_info, get_logs_dir, is_logging_enabled

CONNECTION_SUCCESS = "Conexión exitosa. Resultado de la consulta de prueba: {value}"
CRUD_SUCCESS = "Operaciones CRUD completadas sobre el producto {value}."

MESSAGES: Dict[OutcomeKind, str] = {
    OutcomeKind.CONNECTED_NO_RESULT: (
        "La conexión se realizó, pero la consulta de prueba no devolvió resultados."
    ),
    OutcomeKind.CONNECTION_FAILED: "Error al conectar con la base de datos: {reason}",
    OutcomeKind.DRIVER_NOT_FOUND: (
        "Error: No se encontró la clase del controlador de la base de datos: {reason}"
    ),
    OutcomeKind.CONFIG_IO_ERROR: "Error al leer la configuración: {reason}",
    OutcomeKind.CONFIG_VALIDATION_ERROR: "Error al leer la configuración: {reason}",
}


def report_outcome(outcome: Outcome, success_template: str = CONNECTION_SUCCESS) -> None:
    """Print the localized message for an outcome"""
    if outcome.kind == OutcomeKind.CONNECTED_WITH_RESULT:
        value = "null" if outcome.value is None else outcome.value
        print_success(success_template.format(value=value))
    elif outcome.kind == OutcomeKind.CONNECTED_NO_RESULT:
        print_normal(MESSAGES[outcome.kind])
    else:
        print_error(MESSAGES[outcome.kind].format(reason=outcome.reason))


def _run(demo: Callable[[DbConfig], Outcome], success_template: str) -> int:
    load_environment()
    setup_logging(enable=is_logging_enabled(), log_directory=get_logs_dir())
    log_only(f"Environment: {get_environment_info()}")

    try:
        try:
            config = load_config()
        except ConfigError as e:
            outcome = Outcome.from_config_error(e)
        else:
            outcome = demo(config)

        log_only(f"Outcome: {outcome.kind.value}")
        report_outcome(outcome, success_template)
    finally:
        close_logging()
    return outcome.exit_code


def main() -> int:
    """Main entry point - connection demo"""
    return _run(run_connection_demo, CONNECTION_SUCCESS)


def main_crud() -> int:
    """Entry point for the CRUD demo"""
    return _run(run_crud_demo, CRUD_SUCCESS)
