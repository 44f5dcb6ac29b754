"""JSON-serializable reports over ranked match results."""

from __future__ import annotations

from typing import Any

from jobmatch.scoring.models import MatchResult


def build_rank_report(
    *, results: list[MatchResult], total_jobs: int
) -> dict[str, Any]:
    """Build a report for the output of ``MatchScoringService.rank``."""
    return {
        "summary": summarize_results(results=results, total_jobs=total_jobs),
        "items": [result.to_dict() for result in results],
    }


def summarize_results(
    *, results: list[MatchResult], total_jobs: int
) -> dict[str, Any]:
    totals = [result.scores.total for result in results]
    disqualified = sum(1 for result in results if result.is_disqualified)

    return {
        "total_jobs": total_jobs,
        "returned": len(results),
        "matched": sum(1 for total in totals if total > 0),
        "disqualified": disqualified,
        "average_total": (sum(totals) / len(totals)) if totals else 0.0,
        "top_total": max(totals) if totals else 0.0,
    }
