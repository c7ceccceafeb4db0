"""
Environment utility functions for configuration and logging settings.
"""

import os
from typing import Dict, Any

DEFAULT_CONFIG_FILE_PATH = "config/jdbc.properties"


def get_config_path() -> str:
    """Get the properties file path (DB_CONFIG_FILE overrides the default)."""
    return os.getenv("DB_CONFIG_FILE") or DEFAULT_CONFIG_FILE_PATH


def is_logging_enabled() -> bool:
    """Check whether the run log file should be written."""
    return os.getenv("ENABLE_LOGGING", "false").lower() == "true"


def get_logs_dir() -> str:
    """Get the directory for run log files."""
    return os.getenv("LOGS_DIR", "logs")


def mask_sensitive_value(value: str, mask_char: str = "*") -> str:
    """Mask sensitive values for logging."""
    if not value or len(value) <= 4:
        return mask_char * len(value) if value else ""
    return value[:2] + mask_char * (len(value) - 4) + value[-2:]


def get_environment_info() -> Dict[str, Any]:
    """Get the environment-driven settings in effect."""
    return {
        "config_file": get_config_path(),
        "logging_enabled": is_logging_enabled(),
        "logs_dir": get_logs_dir(),
    }
