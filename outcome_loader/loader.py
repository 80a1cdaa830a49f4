"""Load test outcomes from a directory of serialized reports.

Used for aggregate reporting: every test of a previous run left one XML or
JSON report file in the output directory, and this module reads them back.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from outcome_loader.config import LoaderConfig
from outcome_loader.formats import OutcomeFormat, resolve_format
from outcome_loader.models.outcome import TestOutcome
from outcome_loader.outcomes import TestOutcomes
from outcome_loader.reporters.base import OutcomeDeserializer
from outcome_loader.reporters.registry import DESERIALIZERS, deserializer_for
from outcome_loader.scanner import find_outcome_files

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestOutcomeLoader:
    """Loads every test outcome stored in a report directory.

    The report format is resolved once, when the loader is built. Build a
    new loader to pick up a changed configuration.
    """

    __test__ = False

    outcome_format: OutcomeFormat = field(
        default_factory=lambda: resolve_format(LoaderConfig.from_environment())
    )
    deserializers: Mapping[OutcomeFormat, OutcomeDeserializer] = field(
        default_factory=lambda: DESERIALIZERS, repr=False
    )

    @classmethod
    def from_config(cls, config: LoaderConfig) -> "TestOutcomeLoader":
        """Create a loader for the format named in the configuration.

        Raises:
            ConfigurationError: If the configured format is unknown

        """
        return cls(outcome_format=resolve_format(config))

    @classmethod
    def from_environment(
        cls, environment: Mapping[str, str] | None = None
    ) -> "TestOutcomeLoader":
        """Create a loader configured from a key-value source.

        Args:
            environment: Configuration source; the process environment
                is used when omitted

        Raises:
            ConfigurationError: If the configured format is unknown

        """
        return cls.from_config(LoaderConfig.from_environment(environment))

    @property
    def outcome_reporter(self) -> OutcomeDeserializer:
        """Deserializer for the active report format."""
        return deserializer_for(self.outcome_format, self.deserializers)

    def load_from(self, report_directory: Path) -> tuple[TestOutcome, ...]:
        """Load the test outcomes from a report directory.

        Files that are not test outcomes are skipped. Any file that cannot
        be read or parsed aborts the whole load.

        Args:
            report_directory: Existing directory holding the outcome files

        Returns:
            Test outcomes in directory listing order

        Raises:
            ConfigurationError: If the active format has no deserializer
            DirectoryNotFoundError: If the directory cannot be listed
            LoadError: If a matching file cannot be read or parsed

        """
        reporter = self.outcome_reporter
        report_files = find_outcome_files(report_directory, self.outcome_format)
        log.info(
            "Found %d %s report file(s) in %s",
            len(report_files),
            self.outcome_format.name,
            report_directory,
        )

        outcomes: list[TestOutcome] = []
        for report_file in report_files:
            if (outcome := reporter.try_load(report_file)) is not None:
                outcomes.append(outcome)

        log.info("Loaded %d test outcome(s)", len(outcomes))
        return tuple(outcomes)

    @staticmethod
    def test_outcomes_in(report_directory: Path) -> TestOutcomes:
        """Load the outcomes in a directory using the process configuration."""
        loader = TestOutcomeLoader.from_environment()
        return TestOutcomes.of(loader.load_from(report_directory))


def load_test_outcomes(
    report_directory: Path, environment: Mapping[str, str] | None = None
) -> TestOutcomes:
    """Load and aggregate the outcomes in a directory.

    Args:
        report_directory: Directory holding the outcome files
        environment: Configuration source; the process environment
            is used when omitted

    Returns:
        Aggregate view over the loaded outcomes

    """
    loader = TestOutcomeLoader.from_environment(environment)
    return TestOutcomes.of(loader.load_from(report_directory))
