"""Errors raised while loading test outcomes."""

from pathlib import Path


class OutcomeLoaderError(Exception):
    """Base class for all outcome loading errors."""


class ConfigurationError(OutcomeLoaderError):
    """Raised when the configured report format is unknown or unsupported."""


class DirectoryNotFoundError(OutcomeLoaderError):
    """Raised when the report directory is missing or cannot be listed."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Could not find directory {path}")


class LoadError(OutcomeLoaderError):
    """Raised when a matching report file cannot be read or parsed."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Could not load test outcome from {path}: {cause}")
