"""
Database configuration loading
Reads connection settings from a properties file (config/jdbc.properties)
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from dotenv import load_dotenv

from .exceptions import ConfigIOError, ConfigValidationError
from .logger import log_only
from .utils.environment_utils import get_config_path, mask_sensitive_value
from .utils.properties_utils import PropertiesSyntaxError, load_properties

# Global logger for config loading
_config_logger = None

DEFAULT_TEST_QUERY = "SELECT 1"
JDBC_PREFIX = "jdbc:"

URL_KEY = "db.url"
USER_KEY = "db.user"
PASSWORD_KEY = "db.password"
DRIVER_KEY = "db.driver"
TEST_QUERY_KEY = "db.testQuery"


def set_config_logger(logger):
    """Set the logger for config loading."""
    global _config_logger
    _config_logger = logger


def config_log(message: str, level: str = "INFO"):
    """Log message using config logger if available, otherwise the run log."""
    if _config_logger:
        if level == "INFO":
            _config_logger.info(message)
        elif level == "WARNING":
            _config_logger.warning(message)
        elif level == "ERROR":
            _config_logger.error(message)
    else:
        log_only(message, level)


@dataclass(frozen=True)
class DbConfig:
    """Database connection configuration"""

    url: str
    user: str
    password: str = field(repr=False)
    test_query: str = DEFAULT_TEST_QUERY
    driver_name: Optional[str] = None

    @property
    def dsn(self) -> str:
        """Connection string handed to the driver, without any jdbc: prefix"""
        if self.url.lower().startswith(JDBC_PREFIX):
            return self.url[len(JDBC_PREFIX) :]
        return self.url

    def describe(self) -> str:
        """Loggable summary with the password masked"""
        return (
            f"url={self.url} user={self.user} "
            f"password={mask_sensitive_value(self.password)} "
            f"driver={self.driver_name or '(por defecto)'}"
        )


class ConfigLoader:
    """Loads a DbConfig from a properties file"""

    def __init__(self, require_driver: bool = True):
        self.require_driver = require_driver

    def load(self, path: str) -> DbConfig:
        """
        Load and validate the configuration file.

        Args:
            path: Path to the properties file

        Returns:
            DbConfig: Immutable configuration

        Raises:
            ConfigIOError: If the file is missing, unreadable or malformed
            ConfigValidationError: If a required property is absent or blank
        """
        config_log(f"Loading database config from {path}")

        try:
            properties = load_properties(path)
        except OSError as e:
            config_log(f"Cannot read {path}: {e}", "ERROR")
            raise ConfigIOError(
                f"No se pudo leer {path}: {e.strerror or e}", path
            ) from e
        except (UnicodeDecodeError, PropertiesSyntaxError) as e:
            config_log(f"Malformed properties file {path}: {e}", "ERROR")
            raise ConfigIOError(f"Formato inválido en {path}: {e}", path) from e

        url = self._require(properties, URL_KEY, path)
        user = self._require(properties, USER_KEY, path)
        password = self._require(properties, PASSWORD_KEY, path)
        driver_name = (
            self._require(properties, DRIVER_KEY, path)
            if self.require_driver
            else self._optional(properties, DRIVER_KEY)
        )
        test_query = properties.get(TEST_QUERY_KEY, DEFAULT_TEST_QUERY)

        config = DbConfig(
            url=url,
            user=user,
            password=password,
            test_query=test_query,
            driver_name=driver_name,
        )
        config_log(f"Database config loaded: {config.describe()}")
        return config

    def _require(self, properties: Dict[str, str], key: str, path: str) -> str:
        value = properties.get(key)
        if value is None or not value.strip():
            config_log(f"Missing required property '{key}' in {path}", "ERROR")
            raise ConfigValidationError(key, path)
        return value

    def _optional(self, properties: Dict[str, str], key: str) -> Optional[str]:
        value = properties.get(key)
        if value is None or not value.strip():
            return None
        return value


def load_environment(env_path: Optional[str] = None) -> None:
    """Load environment variables from a .env file if one exists"""
    env_path = env_path or os.path.join(os.getcwd(), ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path)
        config_log(f"Loaded environment from: {env_path}")
    else:
        config_log(f"No .env file found at: {env_path}")


def load_config(path: Optional[str] = None, require_driver: bool = True) -> DbConfig:
    """Load the database configuration from path or the configured default"""
    return ConfigLoader(require_driver=require_driver).load(path or get_config_path())
