"""
Error taxonomy for configuration loading, driver resolution and database access.
"""

from typing import Optional


class ConfigError(Exception):
    """Configuration could not be loaded"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigIOError(ConfigError):
    """Configuration file is missing, unreadable or malformed"""


class ConfigValidationError(ConfigError):
    """A required property is absent or blank"""

    def __init__(self, key: str, path: Optional[str] = None):
        super().__init__(
            f"La propiedad '{key}' no está definida o está vacía en {path}", path
        )
        self.key = key


class DriverResolutionError(Exception):
    """The named database driver module cannot be located"""

    def __init__(self, driver_name: str, reason: str):
        super().__init__(f"{driver_name} ({reason})")
        self.driver_name = driver_name
        self.reason = reason


class DatabaseFailure(Exception):
    """Base class for failures reported by the database"""


class DatabaseConnectionError(DatabaseFailure):
    """The database rejected or could not establish the connection"""


class QueryError(DatabaseFailure):
    """A statement failed to execute or its result could not be read"""
