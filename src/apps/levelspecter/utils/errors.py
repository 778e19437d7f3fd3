"""Utility types for consistent CLI error handling."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardised exit codes for the LevelSpecter CLI."""

    SUCCESS = 0
    VALIDATION = 1
    IO = 2
    CONFIG = 3
    RUNTIME = 5


class LevelSpecterError(Exception):
    """Base for predictable CLI errors that surface to users."""

    exit_code: ExitCode = ExitCode.RUNTIME
    label = "Error"

    def __init__(
        self, message: str, *, exit_code: ExitCode | int | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        if exit_code is None:
            exit_code = type(self).exit_code
        self.exit_code = ExitCode(exit_code)

    def __str__(self) -> str:
        return self.message

    @property
    def heading(self) -> str:
        """Return a short label describing the error class."""

        return type(self).label


class LevelSpecterValidationError(LevelSpecterError):
    """Raised when a levelspec or other user input fails validation."""

    exit_code = ExitCode.VALIDATION
    label = "Validation error"


class LevelSpecterIOError(LevelSpecterError):
    """Raised when an input file cannot be read."""

    exit_code = ExitCode.IO
    label = "I/O error"


class LevelSpecterConfigError(LevelSpecterError):
    """Raised when configuration or environment is invalid."""

    exit_code = ExitCode.CONFIG
    label = "Configuration error"

