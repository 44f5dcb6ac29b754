"""Normalization of raw profile and posting values before scoring.

Every function here degrades instead of raising: a value of the wrong type,
an unknown seniority label or a blank skill turns into the most restrictive
default (no skill, ``unknown`` seniority, no location). The only error is a
caller passing ``None`` or something that is neither a mapping nor a model.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from jobmatch.scoring.models import CandidateProfile, JobPosting, SeniorityLevel

_SENIORITY_ALIASES: dict[str, SeniorityLevel] = {
    "junior": SeniorityLevel.JUNIOR,
    "jr": SeniorityLevel.JUNIOR,
    "entry": SeniorityLevel.JUNIOR,
    "entry level": SeniorityLevel.JUNIOR,
    "mid": SeniorityLevel.MID,
    "mid level": SeniorityLevel.MID,
    "middle": SeniorityLevel.MID,
    "intermediate": SeniorityLevel.MID,
    "senior": SeniorityLevel.SENIOR,
    "sr": SeniorityLevel.SENIOR,
    "staff": SeniorityLevel.STAFF,
}


def normalize_skill(skill: str) -> str:
    """Normalize a skill string for comparison.

    Case-folds, trims surrounding whitespace and collapses inner runs of
    whitespace, preserving characters like "+", "#" and "." (e.g. "C++",
    "C#", "Node.js").
    """
    return re.sub(r"\s+", " ", skill).strip().casefold()


def normalize_skills(values: object) -> tuple[str, ...]:
    """Normalize a collection of skills, dropping blanks and duplicates.

    First-seen order is preserved so callers that care about order (the
    posting's skill list) keep it; sets come back sorted. Anything other
    than a list/tuple/set of strings yields an empty tuple; non-string
    entries are skipped.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return ()
    if isinstance(values, Mapping):
        return ()

    seen: dict[str, None] = {}
    for value in values:
        if not isinstance(value, str):
            continue
        normalized = normalize_skill(value)
        if normalized:
            seen.setdefault(normalized, None)

    if isinstance(values, (set, frozenset)):
        return tuple(sorted(seen))
    return tuple(seen)


def normalize_seniority(value: object) -> SeniorityLevel:
    """Map a seniority label onto the fixed scale, or ``unknown``."""
    if isinstance(value, SeniorityLevel):
        return value
    if not isinstance(value, str):
        return SeniorityLevel.UNKNOWN

    label = re.sub(r"[\s_\-]+", " ", value).strip().rstrip(".").casefold()
    return _SENIORITY_ALIASES.get(label, SeniorityLevel.UNKNOWN)


def normalize_location(value: object) -> str | None:
    """Trim a location; blank or non-string locations become ``None``."""
    if not isinstance(value, str):
        return None
    location = re.sub(r"\s+", " ", value).strip()
    return location or None


def normalize_profile(raw: CandidateProfile | Mapping[str, Any]) -> CandidateProfile:
    """Return a normalized copy of a candidate profile."""
    data = _as_mapping(raw, CandidateProfile)
    return CandidateProfile(
        resume_skills=normalize_skills(data.get("resume_skills")),
        seniority_level=normalize_seniority(data.get("seniority_level")),
        location=normalize_location(data.get("location")),
    )


def normalize_job(raw: JobPosting | Mapping[str, Any]) -> JobPosting:
    """Return a normalized copy of a job posting."""
    data = _as_mapping(raw, JobPosting)
    job_id = data.get("id")
    return JobPosting(
        id="" if job_id is None else str(job_id),
        skills=normalize_skills(data.get("skills")),
        must_have_skills=normalize_skills(data.get("must_have_skills")),
        seniority_level=normalize_seniority(data.get("seniority_level")),
        location=normalize_location(data.get("location")),
    )


def _as_mapping(
    raw: object, model: type[CandidateProfile] | type[JobPosting]
) -> Mapping[str, Any]:
    if raw is None:
        raise TypeError(f"{model.__name__} is required (got None)")
    if isinstance(raw, model):
        # Field access, not model_dump: the enum and tuples pass through as-is.
        return {name: getattr(raw, name) for name in type(raw).model_fields}
    if isinstance(raw, Mapping):
        return raw
    raise TypeError(
        f"{model.__name__} must be a mapping or a {model.__name__} "
        f"(got {type(raw).__name__})"
    )
