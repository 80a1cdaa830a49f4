"""Tests for outcome models."""

import pytest
from pydantic import ValidationError

from outcome_loader.models.outcome import TestOutcome
from outcome_loader.testing.factories import TestOutcomeFactory, TestStepFactory


def test_defaults_for_optional_fields() -> None:
    """Only name, title and result are required."""
    outcome = TestOutcome(name="t", title="T", result="PENDING")

    assert outcome.duration == 0
    assert outcome.timestamp is None
    assert outcome.user_story is None
    assert list(outcome.tags) == []
    assert outcome.step_count == 0
    assert not outcome.is_success


def test_rejects_negative_duration() -> None:
    """Durations cannot be negative."""
    with pytest.raises(ValidationError):
        TestOutcome(name="t", title="T", result="SUCCESS", duration=-1)


def test_outcomes_are_immutable() -> None:
    """Outcomes cannot be modified after loading."""
    outcome = TestOutcomeFactory.build()

    with pytest.raises(ValidationError):
        outcome.result = "FAILURE"  # type: ignore[misc]


def test_step_count_counts_top_level_steps() -> None:
    """Nested steps are not counted."""
    child = TestStepFactory.build()
    outcome = TestOutcomeFactory.build(
        steps=[TestStepFactory.build(children=[child]), TestStepFactory.build()]
    )

    assert outcome.step_count == 2
