"""Serialization formats for persisted test outcomes."""

import enum
import logging

from outcome_loader.config import LoaderConfig
from outcome_loader.errors import ConfigurationError

log = logging.getLogger(__name__)


class OutcomeFormat(enum.Enum):
    """Supported outcome file formats, keyed by their file extension."""

    XML = ".xml"
    JSON = ".json"

    @property
    def extension(self) -> str:
        """Lowercase file extension, including the leading dot."""
        return self.value

    def matches(self, filename: str) -> bool:
        """Check if a file name carries this format's extension."""
        return filename.lower().endswith(self.extension)


def resolve_format(config: LoaderConfig) -> OutcomeFormat:
    """Resolve the configured report format.

    Raises:
        ConfigurationError: If the value does not name a known format

    """
    name = config.report_format.upper()
    try:
        fmt = OutcomeFormat[name]
    except KeyError:
        available = [f.name for f in OutcomeFormat]
        raise ConfigurationError(
            f"Unknown report format '{config.report_format}'. "
            f"Available formats: {available}"
        ) from None

    log.debug("Using %s report format", fmt.name)
    return fmt
