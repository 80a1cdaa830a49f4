"""Deserializer for JSON outcome reports."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from outcome_loader.errors import LoadError
from outcome_loader.models.outcome import TestOutcome
from outcome_loader.reporters.base import OutcomeDeserializer

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonOutcomeDeserializer(OutcomeDeserializer):
    """Loads outcomes stored as a single JSON object per file."""

    def parse(self, path: Path, content: bytes) -> TestOutcome | None:
        """Decode the JSON document and validate it as a test outcome."""
        try:
            data = json.loads(content)
        except (ValueError, RecursionError) as e:
            raise LoadError(path, e) from e

        if not isinstance(data, dict):
            log.debug("Skipping %s: top-level JSON value is not an object", path)
            return None

        return self.validate(path, data)
