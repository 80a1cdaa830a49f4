"""Configuration for the test outcome loader."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

REPORT_FORMAT_KEY = "REPORT_FORMAT"
DEFAULT_REPORT_FORMAT = "XML"


class LoaderConfig(BaseSettings):
    """Settings read once when a loader is constructed."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    report_format: str = Field(
        default=DEFAULT_REPORT_FORMAT,
        description="Serialization format of the outcome files (XML or JSON)",
    )

    @field_validator("report_format", mode="before")
    @classmethod
    def default_when_blank(cls, v: Any) -> Any:
        """Treat a missing or blank format as the default."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_REPORT_FORMAT
        if isinstance(v, str):
            return v.strip()
        return v

    @classmethod
    def from_environment(
        cls, environment: Mapping[str, str] | None = None
    ) -> "LoaderConfig":
        """Build configuration from a key-value source.

        Args:
            environment: Configuration source; the process environment
                is read through the settings sources when omitted

        Returns:
            The loader configuration, with defaults for missing values

        """
        if environment is None:
            return cls()
        # model_validate skips the settings sources, so only the mapping is read
        return cls.model_validate(
            {"report_format": environment.get(REPORT_FORMAT_KEY)}
        )
