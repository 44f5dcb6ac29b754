"""Fit scoring service implementation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from jobmatch.scoring.config import ScoringConfig, get_scoring_config
from jobmatch.scoring.models import (
    NO_MATCH_REASON,
    CandidateProfile,
    GateResult,
    JobPosting,
    MatchResult,
    ScoreBreakdown,
)
from jobmatch.scoring.normalizer import normalize_job, normalize_profile
from jobmatch.utils.logging import get_logger

logger = get_logger("scoring.service")

ProfileInput = CandidateProfile | Mapping[str, Any]
JobInput = JobPosting | Mapping[str, Any]


class MatchScoringService:
    """Scores candidate profiles against job postings.

    The service holds only its configuration; every call is independent, so
    one instance can be shared across threads.
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or get_scoring_config()

    def check_must_haves(
        self, profile: CandidateProfile, job: JobPosting
    ) -> GateResult:
        """Check that every must-have skill of the job is on the resume."""
        available = set(profile.resume_skills)
        missing = [skill for skill in job.must_have_skills if skill not in available]
        if missing:
            return GateResult(passed=False, missing=missing)
        return GateResult(passed=True)

    def score_skills(
        self, profile: CandidateProfile, job: JobPosting
    ) -> tuple[float, list[str]]:
        """Score skill overlap.

        Returns:
            skill_score, overlapping skills in the order the job lists them
        """
        if not job.skills:
            return 0.0, []

        available = set(profile.resume_skills)
        overlap = [skill for skill in job.skills if skill in available]
        weight = self.config.weight_skill
        score = weight * len(overlap) / len(job.skills)
        return min(weight, score), overlap

    def score_seniority(self, profile: CandidateProfile, job: JobPosting) -> float:
        """Score seniority by distance on the junior..staff scale."""
        candidate_rank = profile.seniority_level.rank
        job_rank = job.seniority_level.rank
        if candidate_rank is None or job_rank is None:
            return 0.0

        distance = abs(candidate_rank - job_rank)
        if distance == 0:
            return self.config.weight_seniority
        if distance == 1:
            return self.config.weight_seniority * self.config.seniority_adjacency_credit
        return 0.0

    def score_location(
        self, profile: CandidateProfile, job: JobPosting
    ) -> tuple[float, str | None]:
        """Score location, treating the Remote sentinel as a wildcard.

        Returns:
            location_score, the location shown in the reason (None if no match)
        """
        if not profile.location or not job.location:
            return 0.0, None

        remote = self.config.remote_sentinel
        candidate_location = profile.location.casefold()
        job_location = job.location.casefold()

        if job_location == remote or job_location == candidate_location:
            return self.config.weight_location, job.location
        if candidate_location == remote:
            return self.config.weight_location, profile.location
        return 0.0, None

    def calculate_total(self, skill: float, seniority: float, location: float) -> float:
        """Sum the weighted sub-scores, clamped to [0, max_score]."""
        total = skill + seniority + location
        return max(0.0, min(self.config.max_score, total))

    def build_reasons(
        self,
        *,
        job: JobPosting,
        scores: ScoreBreakdown,
        overlap: list[str],
        location: str | None,
    ) -> list[str]:
        """Explain the positive contributions in a fixed order."""
        reasons: list[str] = []
        if scores.skill > 0:
            reasons.append(
                f"Matched {len(overlap)}/{len(job.skills)} required skills: "
                f"{', '.join(overlap)}"
            )
        if scores.seniority > 0:
            reasons.append(f"Seniority level matches ({job.seniority_level.value})")
        if scores.location > 0:
            reasons.append(f"Location matches ({location})")

        return reasons or [NO_MATCH_REASON]

    def evaluate(self, profile: ProfileInput, job: JobInput) -> MatchResult:
        """Score one posting for one candidate."""
        profile = normalize_profile(profile)
        job = normalize_job(job)

        gate = self.check_must_haves(profile, job)
        if not gate.passed:
            logger.debug(
                f"Job {job.id} skipped: missing must-have skills {gate.missing}"
            )
            return MatchResult.disqualified(job.id)

        skill_score, overlap = self.score_skills(profile, job)
        seniority_score = self.score_seniority(profile, job)
        location_score, location = self.score_location(profile, job)

        scores = ScoreBreakdown(
            skill=skill_score,
            seniority=seniority_score,
            location=location_score,
            total=self.calculate_total(skill_score, seniority_score, location_score),
        )
        reasons = self.build_reasons(
            job=job, scores=scores, overlap=overlap, location=location
        )
        logger.debug(f"Job {job.id} scored {scores.total:.2f}")

        return MatchResult(job_id=job.id, scores=scores, reasons=reasons)

    def rank(
        self,
        profile: ProfileInput,
        jobs: Iterable[JobInput],
        *,
        limit: int | None = None,
        include_zero: bool = False,
        max_workers: int | None = None,
    ) -> list[MatchResult]:
        """Score every posting for one candidate and return the best first.

        Zero-score postings are dropped unless ``include_zero`` is set. Ties
        keep the order the postings were given in.
        """
        if limit is None:
            limit = self.config.rank_limit
        if limit < 1:
            raise ValueError(f"limit must be at least 1 (got {limit})")
        if max_workers is None:
            max_workers = self.config.rank_max_workers

        profile = normalize_profile(profile)
        postings = list(jobs)

        if max_workers and len(postings) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                results = list(
                    pool.map(lambda job: self.evaluate(profile, job), postings)
                )
        else:
            results = [self.evaluate(profile, job) for job in postings]

        if not include_zero:
            results = [result for result in results if result.scores.total > 0]
        results.sort(key=lambda result: result.scores.total, reverse=True)

        logger.info(
            f"Ranked {len(postings)} postings: {len(results)} kept, "
            f"returning top {min(limit, len(results))}"
        )
        return results[:limit]

    def format_result(self, result: MatchResult) -> str:
        """Format a MatchResult for CLI output."""
        scores = result.scores
        lines: list[str] = []
        lines.append(f"Job: {result.job_id}")
        lines.append(f"Total: {scores.total:.1f}/{self.config.max_score:.0f}")
        lines.append(
            "Scores: "
            f"skill={scores.skill:.1f} "
            f"seniority={scores.seniority:.1f} "
            f"location={scores.location:.1f}"
        )
        for reason in result.reasons:
            lines.append(f"- {reason}")
        return "\n".join(lines)
