"""Tests for the JSON outcome deserializer."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from outcome_loader.errors import LoadError
from outcome_loader.reporters.json_reporter import JsonOutcomeDeserializer
from outcome_loader.testing.payloads import outcome_json


@pytest.fixture
def reporter() -> JsonOutcomeDeserializer:
    """Create JSON deserializer."""
    return JsonOutcomeDeserializer()


def write(tmp_path: Path, content: str, name: str = "outcome.json") -> Path:
    report = tmp_path / name
    report.write_text(content, encoding="utf-8")
    return report


def test_loads_outcome(tmp_path: Path, reporter: JsonOutcomeDeserializer) -> None:
    """Loads a JSON outcome with steps and story."""
    report = write(
        tmp_path,
        outcome_json(
            name="should_pay",
            title="Should pay",
            result="ERROR",
            duration=42,
            story=("checkout", "Checkout"),
            steps=[
                {
                    "description": "Enter card",
                    "result": "ERROR",
                    "error_message": "Timeout",
                    "children": [{"description": "Type number", "result": "ERROR"}],
                }
            ],
        ),
    )

    outcome = reporter.try_load(report)

    assert outcome is not None
    assert outcome.name == "should_pay"
    assert outcome.result == "ERROR"
    assert outcome.duration == 42
    assert outcome.user_story is not None
    assert outcome.user_story.id == "checkout"
    assert outcome.steps[0].error_message == "Timeout"
    assert outcome.steps[0].children[0].description == "Type number"


def test_ignores_unknown_fields(
    tmp_path: Path, reporter: JsonOutcomeDeserializer
) -> None:
    """Extra fields written by newer reporters are ignored."""
    report = write(
        tmp_path,
        '{"name": "t", "title": "T", "result": "SUCCESS", "sessionId": "abc"}',
    )

    outcome = reporter.try_load(report)

    assert outcome is not None
    assert outcome.is_success


def test_returns_none_for_empty_file(
    tmp_path: Path, reporter: JsonOutcomeDeserializer
) -> None:
    """Empty files are not outcomes."""
    assert reporter.try_load(write(tmp_path, "")) is None


def test_returns_none_for_non_object(
    tmp_path: Path, reporter: JsonOutcomeDeserializer
) -> None:
    """A JSON array is valid JSON but not an outcome."""
    assert reporter.try_load(write(tmp_path, "[1, 2, 3]")) is None


def test_returns_none_for_unrelated_object(
    tmp_path: Path,
    reporter: JsonOutcomeDeserializer,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Objects that are not outcomes are skipped and logged at debug level."""
    report = write(tmp_path, '{"version": "1.0", "results": []}')

    with caplog.at_level(logging.DEBUG, logger="outcome_loader"):
        assert reporter.try_load(report) is None

    assert "not a test outcome" in caplog.text


def test_raises_for_malformed_json(
    tmp_path: Path, reporter: JsonOutcomeDeserializer
) -> None:
    """Corrupt JSON raises LoadError with the file path."""
    report = write(tmp_path, '{"name": "t", "title": ')

    with pytest.raises(LoadError) as exc_info:
        reporter.try_load(report)

    assert exc_info.value.path == report
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_raises_for_invalid_encoding(
    tmp_path: Path, reporter: JsonOutcomeDeserializer
) -> None:
    """Bytes that are not valid UTF-8 raise LoadError."""
    report = tmp_path / "outcome.json"
    report.write_bytes(b'{"name": "\xff\xfe\xfa"}')

    with pytest.raises(LoadError):
        reporter.try_load(report)


def test_raises_for_permission_error(
    tmp_path: Path, reporter: JsonOutcomeDeserializer
) -> None:
    """Permission errors are not swallowed."""
    report = write(tmp_path, outcome_json())

    with (
        patch.object(Path, "open", side_effect=PermissionError("denied")),
        pytest.raises(LoadError) as exc_info,
    ):
        reporter.try_load(report)

    assert isinstance(exc_info.value.cause, PermissionError)


def test_raises_for_excessively_nested_json(
    tmp_path: Path, reporter: JsonOutcomeDeserializer
) -> None:
    """Documents nested too deeply to decode raise LoadError."""
    depth = 100_000
    report = write(tmp_path, '{"steps": ' + "[" * depth + "]" * depth + "}")

    with pytest.raises(LoadError) as exc_info:
        reporter.try_load(report)

    assert exc_info.value.path == report
