"""
Data models for the result of a connection run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions import ConfigError, ConfigValidationError


class OutcomeKind(Enum):
    """Every way a run can end."""

    CONNECTED_WITH_RESULT = "connected_with_result"
    CONNECTED_NO_RESULT = "connected_no_result"
    CONNECTION_FAILED = "connection_failed"
    DRIVER_NOT_FOUND = "driver_not_found"
    CONFIG_IO_ERROR = "config_io_error"
    CONFIG_VALIDATION_ERROR = "config_validation_error"


SUCCESS_KINDS = (OutcomeKind.CONNECTED_WITH_RESULT, OutcomeKind.CONNECTED_NO_RESULT)


@dataclass(frozen=True)
class Outcome:
    """Result of a connection run."""

    kind: OutcomeKind
    value: Optional[str] = None
    reason: Optional[str] = None
    key: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.kind in SUCCESS_KINDS

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    @classmethod
    def connected_with_result(cls, value: Optional[str]) -> "Outcome":
        return cls(OutcomeKind.CONNECTED_WITH_RESULT, value=value)

    @classmethod
    def connected_no_result(cls) -> "Outcome":
        return cls(OutcomeKind.CONNECTED_NO_RESULT)

    @classmethod
    def connection_failed(cls, reason: str) -> "Outcome":
        return cls(OutcomeKind.CONNECTION_FAILED, reason=reason)

    @classmethod
    def driver_not_found(cls, reason: str) -> "Outcome":
        return cls(OutcomeKind.DRIVER_NOT_FOUND, reason=reason)

    @classmethod
    def from_config_error(cls, error: ConfigError) -> "Outcome":
        """Convert a configuration failure into an outcome."""
        if isinstance(error, ConfigValidationError):
            return cls(
                OutcomeKind.CONFIG_VALIDATION_ERROR, reason=str(error), key=error.key
            )
        return cls(OutcomeKind.CONFIG_IO_ERROR, reason=str(error))
