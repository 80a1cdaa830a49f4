"""Models for test outcomes read back from serialized reports."""

from collections.abc import Sequence
from datetime import datetime
from typing import Literal, TypeAlias

from pydantic import Field

from outcome_loader.models.base import Model

TestResult: TypeAlias = Literal[
    "SUCCESS",
    "FAILURE",
    "ERROR",
    "PENDING",
    "IGNORED",
    "SKIPPED",
]


class TestTag(Model):
    """A tag attached to a test, such as a feature or capability."""

    __test__ = False

    name: str = Field(..., description="Tag name")
    type: str = Field(default="tag", description="Tag type (feature, story, ...)")


class Story(Model):
    """User story the test belongs to."""

    id: str = Field(..., description="Story identifier")
    name: str = Field(..., description="Human-readable story name")
    path: str | None = Field(default=None, description="Story source path")


class TestStep(Model):
    """A single step recorded during a test run."""

    __test__ = False

    description: str = Field(..., description="Step description")
    result: TestResult = Field(..., description="Step result")
    duration: int = Field(default=0, ge=0, description="Duration in milliseconds")
    error_message: str | None = Field(default=None, description="Failure cause")
    children: Sequence["TestStep"] = Field(
        default_factory=list, description="Nested steps"
    )


class TestOutcome(Model):
    """Outcome of one executed test."""

    __test__ = False

    name: str = Field(..., description="Test method name")
    title: str = Field(..., description="Human-readable test title")
    result: TestResult = Field(..., description="Overall test result")
    duration: int = Field(default=0, ge=0, description="Duration in milliseconds")
    timestamp: datetime | None = Field(default=None, description="Start time")
    user_story: Story | None = Field(default=None, description="Parent story")
    tags: Sequence[TestTag] = Field(default_factory=list, description="Test tags")
    steps: Sequence[TestStep] = Field(default_factory=list, description="Steps")
    issues: Sequence[str] = Field(default_factory=list, description="Issue keys")

    @property
    def is_success(self) -> bool:
        """Check if the test passed."""
        return self.result == "SUCCESS"

    @property
    def step_count(self) -> int:
        """Number of top-level steps."""
        return len(self.steps)
