"""Configuration settings for fit scoring."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Fit scoring configuration settings.

    Weights are expressed in score points: a perfect skill, seniority and
    location match adds up to ``weight_skill + weight_seniority +
    weight_location``, which may not exceed ``max_score``.

    All settings can be overridden via environment variables with the
    `SCORING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_score: Annotated[float, Field(gt=0.0)] = Field(
        default=100.0,
        description="Upper bound of the total fit score",
    )

    # Scoring weights (points, must not sum past max_score)
    weight_skill: Annotated[float, Field(ge=0.0)] = Field(
        default=60.0,
        description="Points for a complete overlap with the job's skills",
    )
    weight_seniority: Annotated[float, Field(ge=0.0)] = Field(
        default=20.0,
        description="Points for an exact seniority match",
    )
    weight_location: Annotated[float, Field(ge=0.0)] = Field(
        default=20.0,
        description="Points for a location match (exact or Remote)",
    )
    seniority_adjacency_credit: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.5,
        description="Fraction of weight_seniority granted one level apart",
    )

    # Matching settings
    remote_sentinel: str = Field(
        default="remote",
        description="Location value that matches any other location",
    )

    # Ranking settings
    rank_limit: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description="Default number of postings kept by rank()",
    )
    rank_max_workers: Annotated[int, Field(ge=1)] | None = Field(
        default=None,
        description="Thread pool size for rank() (None = score serially)",
    )

    @field_validator("remote_sentinel", mode="before")
    @classmethod
    def normalize_remote_sentinel(cls, v: object) -> str:
        """Store the Remote sentinel case-folded and trimmed."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("remote_sentinel must be a non-empty string")
        return v.strip().casefold()

    @model_validator(mode="after")
    def validate_weights_within_max_score(self) -> ScoringConfig:
        """Ensure the weights cannot add up past max_score."""
        weight_sum = self.weight_skill + self.weight_seniority + self.weight_location
        if weight_sum > self.max_score + 1e-6:
            raise ValueError(
                f"Scoring weights must not exceed max_score ({self.max_score}). "
                f"Got {weight_sum:.2f} "
                f"(skill={self.weight_skill}, seniority={self.weight_seniority}, "
                f"location={self.weight_location})."
            )
        return self


_scoring_config: ScoringConfig | None = None


def get_scoring_config() -> ScoringConfig:
    """Get the scoring configuration singleton."""
    global _scoring_config
    if _scoring_config is None:
        _scoring_config = ScoringConfig()
    return _scoring_config


def reset_scoring_config() -> None:
    """Reset the scoring configuration singleton (useful for testing)."""
    global _scoring_config
    _scoring_config = None
