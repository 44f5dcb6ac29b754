"""Data models for fit scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MUST_HAVE_MISSING_REASON = "Missing must-have skills"
NO_MATCH_REASON = "No significant match"


class SeniorityLevel(str, Enum):
    """Career stage of a candidate or the level a posting hires for."""

    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    STAFF = "staff"
    UNKNOWN = "unknown"

    @property
    def rank(self) -> int | None:
        """Position on the junior < mid < senior < staff scale."""
        return _SENIORITY_RANKS.get(self)


_SENIORITY_RANKS: dict[SeniorityLevel, int] = {
    SeniorityLevel.JUNIOR: 0,
    SeniorityLevel.MID: 1,
    SeniorityLevel.SENIOR: 2,
    SeniorityLevel.STAFF: 3,
}


class CandidateProfile(BaseModel):
    """Candidate side of a scoring call.

    Build instances through ``normalize_profile`` when the values come from
    storage or user input; the scorer assumes skills are already folded.
    """

    model_config = ConfigDict(frozen=True)

    resume_skills: tuple[str, ...] = Field(
        default=(), description="Skills listed on the resume"
    )
    seniority_level: SeniorityLevel = Field(
        default=SeniorityLevel.UNKNOWN, description="Current career stage"
    )
    location: str | None = Field(
        default=None, description="Current location ('Remote' matches anywhere)"
    )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> CandidateProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class JobPosting(BaseModel):
    """Job side of a scoring call."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque posting identifier")
    skills: tuple[str, ...] = Field(default=(), description="Skills the job asks for")
    must_have_skills: tuple[str, ...] = Field(
        default=(), description="Skills without which the posting is skipped"
    )
    seniority_level: SeniorityLevel = Field(
        default=SeniorityLevel.UNKNOWN, description="Level the job hires for"
    )
    location: str | None = Field(default=None, description="Job location")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> JobPosting:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


@dataclass
class GateResult:
    """Outcome of the must-have skills check."""

    passed: bool
    missing: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.passed and self.missing:
            raise ValueError(
                "GateResult.passed=True is incompatible with missing skills"
            )
        if not self.passed and not self.missing:
            raise ValueError(
                "GateResult.passed=False requires at least one missing skill"
            )


@dataclass
class ScoreBreakdown:
    """Per-factor points and their bounded total."""

    skill: float = 0.0
    seniority: float = 0.0
    location: float = 0.0
    total: float = 0.0

    def __post_init__(self) -> None:
        for name in ("skill", "seniority", "location", "total"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"{name} must be non-negative (got {value})")

    def to_dict(self) -> dict[str, float]:
        return {
            "skill": self.skill,
            "seniority": self.seniority,
            "location": self.location,
            "total": self.total,
        }


@dataclass
class MatchResult:
    """Scored posting with the reasons behind its score."""

    job_id: str
    scores: ScoreBreakdown
    reasons: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.reasons:
            raise ValueError("MatchResult requires at least one reason")

    @classmethod
    def disqualified(cls, job_id: str) -> MatchResult:
        """Terminal result for a posting that failed the must-have gate."""
        return cls(
            job_id=job_id,
            scores=ScoreBreakdown(),
            reasons=[MUST_HAVE_MISSING_REASON],
        )

    @property
    def is_disqualified(self) -> bool:
        return self.reasons == [MUST_HAVE_MISSING_REASON]

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the public field names (job_id, scores, reasons)."""
        return {
            "job_id": self.job_id,
            "scores": self.scores.to_dict(),
            "reasons": list(self.reasons),
        }
