# src/review/settings.py
"""Settings for the AI trade reviewer."""
from pydantic import BaseModel, Field, field_validator


class ReviewerSettings(BaseModel):
    """Settings for the Claude trade reviewer.

    Attributes:
        enabled: Whether AI reviews can be requested.
        model: Claude model used for reviews.
        max_tokens: Maximum tokens for the review reply.
        rate_limit_per_minute: Maximum review requests per minute.
    """

    enabled: bool = True
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = Field(default=1500, ge=100, le=4096)
    rate_limit_per_minute: int = Field(default=20, gt=0, le=100)

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        """Validate that a model name is given."""
        if not v.strip():
            raise ValueError("model must not be empty")
        return v.strip()
