"""
Database connection demo: load settings from a properties file, connect,
run a test query.
"""

from .config_manager import ConfigLoader, DbConfig, load_config
from .database_service import ConnectionRunner, resolve_driver
from .models.outcome import Outcome, OutcomeKind

__all__ = [
    "ConfigLoader",
    "DbConfig",
    "load_config",
    "ConnectionRunner",
    "resolve_driver",
    "Outcome",
    "OutcomeKind",
]
