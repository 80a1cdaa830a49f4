"""Base model configuration for outcome data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable base model; unknown fields in stored reports are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")
