"""Abstract base class for outcome deserializers."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from outcome_loader.errors import LoadError
from outcome_loader.models.outcome import TestOutcome

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutcomeDeserializer(ABC):
    """Reads one serialized outcome file back into a TestOutcome.

    Files that are unreadable or corrupt raise LoadError. Files that parse
    cleanly but do not describe a test outcome (including empty files) give
    None so the caller can skip them.
    """

    def try_load(self, path: Path) -> TestOutcome | None:
        """Load a test outcome from a report file.

        Args:
            path: Report file to read

        Returns:
            The test outcome, or None if the file is not an outcome report

        Raises:
            LoadError: If the file cannot be read or its content is corrupt

        """
        try:
            with path.open("rb") as report:
                content = report.read()
        except OSError as e:
            raise LoadError(path, e) from e

        if not content.strip():
            log.debug("Skipping empty report file %s", path)
            return None

        return self.parse(path, content)

    @abstractmethod
    def parse(self, path: Path, content: bytes) -> TestOutcome | None:
        """Parse the raw content of a report file.

        Args:
            path: File the content was read from, for error reporting
            content: Non-empty file content

        Returns:
            The test outcome, or None if the content is not an outcome report

        """

    def validate(self, path: Path, data: Any) -> TestOutcome | None:
        """Build a TestOutcome from parsed data, or None if it does not fit."""
        try:
            return TestOutcome.model_validate(data)
        except ValidationError as e:
            log.debug(
                "Skipping %s: not a test outcome (%d validation error(s))",
                path,
                e.error_count(),
            )
            return None
