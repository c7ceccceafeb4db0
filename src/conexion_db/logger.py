import logging
import os
import sys
from datetime import datetime


class Colors:
    """Simple ANSI color codes"""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"


# Global logging setup
LOG_ENABLED = False
LOG_DIR = "logs"
LOG_FILE = None

_file_logger = logging.getLogger("conexion_db.run")
_file_logger.setLevel(logging.INFO)
_file_logger.propagate = False

_LEVELS = {
    "INFO": logging.INFO,
    "SUCCESS": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "DEBUG": logging.DEBUG,
}


def setup_logging(enable=True, log_directory="logs"):
    """
    Setup logging to file with timestamp.

    Args:
        enable: Whether to enable logging to file
        log_directory: Directory to store log files
    """
    global LOG_ENABLED, LOG_DIR, LOG_FILE

    LOG_ENABLED = enable
    LOG_DIR = log_directory

    if not enable:
        return

    os.makedirs(LOG_DIR, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    LOG_FILE = os.path.join(LOG_DIR, f"conexion_{timestamp}.log")

    file_handler = logging.FileHandler(filename=LOG_FILE, mode="a", encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    _file_logger.addHandler(file_handler)

    write_to_log(
        f"=== Demo de conexión - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} ==="
    )


def write_to_log(message, level="INFO"):
    """
    Write message to log file if logging is enabled.

    Args:
        message: Message to log
        level: Log level (INFO, SUCCESS, WARNING, ERROR)
    """
    if not LOG_ENABLED or not LOG_FILE:
        return

    if level == "SUCCESS":
        message = f"[SUCCESS] {message}"
    _file_logger.log(_LEVELS.get(level, logging.INFO), message)


def print_success(message):
    """Print success message in green and log it"""
    print(f"{Colors.GREEN}{message}{Colors.RESET}")
    write_to_log(message, "SUCCESS")


def print_error(message):
    """Print error message in red to stderr and log it"""
    print(f"{Colors.RED}{message}{Colors.RESET}", file=sys.stderr)
    write_to_log(message, "ERROR")


def print_normal(message):
    """Print normal message (no color) and log it"""
    print(message)
    write_to_log(message, "INFO")


def log_only(message, level="INFO"):
    """
    Write message to log file only (no console output).
    Useful for detailed debugging info.
    """
    write_to_log(message, level)


def close_logging():
    """
    Close logging session and release the log file.
    """
    global LOG_FILE

    if LOG_ENABLED and LOG_FILE:
        write_to_log("=== Ejecución finalizada ===", "INFO")
        for handler in list(_file_logger.handlers):
            handler.close()
            _file_logger.removeHandler(handler)
        print(f"Archivo de log guardado: {LOG_FILE}")
        LOG_FILE = None
