"""Candidate/job fit scoring.

This module scores a candidate profile against job postings with a fixed,
explainable rule set: a must-have skills gate followed by skill, seniority
and location points.

Public API:
    - MatchScoringService: Scoring, ranking and formatting
    - ProfileLoader: Load profiles and postings from YAML/JSON
    - CandidateProfile, JobPosting: Normalized inputs
    - MatchResult, ScoreBreakdown: Scoring output
    - ScoringConfig: Weights and ranking settings
"""

from jobmatch.scoring.config import (
    ScoringConfig,
    get_scoring_config,
    reset_scoring_config,
)
from jobmatch.scoring.loader import ProfileLoader
from jobmatch.scoring.models import (
    MUST_HAVE_MISSING_REASON,
    NO_MATCH_REASON,
    CandidateProfile,
    GateResult,
    JobPosting,
    MatchResult,
    ScoreBreakdown,
    SeniorityLevel,
)
from jobmatch.scoring.normalizer import normalize_job, normalize_profile
from jobmatch.scoring.report import build_rank_report
from jobmatch.scoring.service import MatchScoringService

__all__ = [
    "MatchScoringService",
    "ProfileLoader",
    "CandidateProfile",
    "JobPosting",
    "SeniorityLevel",
    "GateResult",
    "ScoreBreakdown",
    "MatchResult",
    "MUST_HAVE_MISSING_REASON",
    "NO_MATCH_REASON",
    "normalize_profile",
    "normalize_job",
    "build_rank_report",
    "ScoringConfig",
    "get_scoring_config",
    "reset_scoring_config",
]
