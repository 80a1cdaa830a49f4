"""Aggregate view over a set of loaded test outcomes."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from outcome_loader.models.outcome import TestOutcome, TestResult, TestTag

# Highest priority first; IGNORED and SKIPPED never decide the overall result.
RESULT_PRIORITY: tuple[TestResult, ...] = ("ERROR", "FAILURE", "PENDING", "SUCCESS")


@dataclass(frozen=True, kw_only=True)
class TestOutcomes:
    """Totals and groupings over an immutable collection of test outcomes."""

    __test__ = False

    outcomes: tuple[TestOutcome, ...] = ()

    @classmethod
    def of(cls, outcomes: Iterable[TestOutcome]) -> "TestOutcomes":
        """Wrap a collection of outcomes."""
        return cls(outcomes=tuple(outcomes))

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[TestOutcome]:
        return iter(self.outcomes)

    @property
    def total(self) -> int:
        """Number of outcomes."""
        return len(self.outcomes)

    def count(self, result: TestResult) -> int:
        """Number of outcomes with the given result."""
        return sum(1 for outcome in self.outcomes if outcome.result == result)

    @property
    def success_count(self) -> int:
        return self.count("SUCCESS")

    @property
    def failure_count(self) -> int:
        return self.count("FAILURE")

    @property
    def error_count(self) -> int:
        return self.count("ERROR")

    @property
    def pending_count(self) -> int:
        return self.count("PENDING")

    @property
    def skip_count(self) -> int:
        """Number of ignored or skipped outcomes."""
        return self.count("IGNORED") + self.count("SKIPPED")

    def with_result(self, result: TestResult) -> "TestOutcomes":
        """Outcomes with the given result, in the original order."""
        return TestOutcomes.of(o for o in self.outcomes if o.result == result)

    @property
    def passing_tests(self) -> "TestOutcomes":
        return self.with_result("SUCCESS")

    @property
    def failing_tests(self) -> "TestOutcomes":
        return self.with_result("FAILURE")

    @property
    def error_tests(self) -> "TestOutcomes":
        return self.with_result("ERROR")

    @property
    def pending_tests(self) -> "TestOutcomes":
        return self.with_result("PENDING")

    @property
    def result(self) -> TestResult:
        """Overall result, decided by the most severe outcome.

        A set with nothing but ignored or skipped outcomes is PENDING.
        """
        results = {outcome.result for outcome in self.outcomes}
        for result in RESULT_PRIORITY:
            if result in results:
                return result
        return "PENDING"

    @property
    def duration(self) -> int:
        """Total duration in milliseconds."""
        return sum(outcome.duration for outcome in self.outcomes)

    @property
    def percentage_passing(self) -> float:
        """Share of passing outcomes, between 0.0 and 1.0."""
        if not self.outcomes:
            return 0.0
        return self.success_count / self.total

    @property
    def tags(self) -> tuple[TestTag, ...]:
        """Distinct tags across all outcomes, in first-seen order."""
        seen: dict[TestTag, None] = {}
        for outcome in self.outcomes:
            for tag in outcome.tags:
                seen.setdefault(tag, None)
        return tuple(seen)

    def with_tag(self, name: str) -> "TestOutcomes":
        """Outcomes carrying a tag with the given name (case-insensitive)."""
        wanted = name.lower()
        return TestOutcomes.of(
            outcome
            for outcome in self.outcomes
            if any(tag.name.lower() == wanted for tag in outcome.tags)
        )

    def by_story(self) -> Mapping[str, "TestOutcomes"]:
        """Group outcomes by user story name.

        Outcomes without a story are grouped under an empty name.
        """
        groups: dict[str, list[TestOutcome]] = {}
        for outcome in self.outcomes:
            story = outcome.user_story.name if outcome.user_story else ""
            groups.setdefault(story, []).append(outcome)
        return {story: TestOutcomes.of(group) for story, group in groups.items()}

    def summary(self) -> dict[str, Any]:
        """Totals for a JSON report payload."""
        return {
            "total": self.total,
            "result": self.result,
            "passed": self.success_count,
            "failed": self.failure_count,
            "errors": self.error_count,
            "pending": self.pending_count,
            "skipped": self.skip_count,
            "duration": self.duration,
        }
