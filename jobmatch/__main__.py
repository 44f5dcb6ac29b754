"""Main entry point for jobmatch."""

import argparse
import json
import sys
from datetime import UTC, datetime
from pathlib import Path

from jobmatch import __version__
from jobmatch.config.settings import Settings
from jobmatch.utils.logging import configure_logging


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("value must be at least 1")
    return number


def _timestamp_run_id(prefix: str) -> str:
    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}"


def _resolve_run_dir(
    settings: Settings, *, prefix: str, out_run_dir: Path | None
) -> Path:
    if out_run_dir is not None:
        run_dir = out_run_dir
    else:
        run_dir = settings.output_dir / "runs" / _timestamp_run_id(prefix)
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def _write_json(path: Path, payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        return str(value)

    path.write_text(
        json.dumps(payload, indent=2, default=_default),
        encoding="utf-8",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="jobmatch",
        description="jobmatch: deterministic candidate/job fit scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m jobmatch match profile.yaml job.json
  python -m jobmatch rank profile.yaml jobs.json --limit 5
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available operating modes",
    )

    match_parser = subparsers.add_parser(
        "match",
        help="Score one job posting against a profile",
    )
    match_parser.add_argument("profile", type=Path, help="Profile file (YAML/JSON)")
    match_parser.add_argument("jobs", type=Path, help="Job posting file (YAML/JSON)")
    match_parser.add_argument(
        "--job-id",
        default=None,
        help="Posting to score when the file holds several (default: the first)",
    )
    match_parser.add_argument(
        "--out-run-dir",
        type=Path,
        default=None,
        help="Directory to write match_result.json (default: OUTPUT_DIR/runs/...)",
    )

    rank_parser = subparsers.add_parser(
        "rank",
        help="Rank job postings against a profile",
    )
    rank_parser.add_argument("profile", type=Path, help="Profile file (YAML/JSON)")
    rank_parser.add_argument("jobs", type=Path, help="Job postings file (YAML/JSON)")
    rank_parser.add_argument(
        "--limit",
        type=_positive_int,
        default=None,
        help="Number of postings to keep (default: SCORING_RANK_LIMIT)",
    )
    rank_parser.add_argument(
        "--include-zero",
        action="store_true",
        help="Keep postings that scored zero",
    )
    rank_parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Score postings on a thread pool of this size",
    )
    rank_parser.add_argument(
        "--out-run-dir",
        type=Path,
        default=None,
        help="Directory to write rank_report.json (default: OUTPUT_DIR/runs/...)",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"jobmatch v{__version__} starting in {parsed.mode} mode")

    from jobmatch.scoring.loader import ProfileLoader
    from jobmatch.scoring.report import build_rank_report
    from jobmatch.scoring.service import MatchScoringService

    loader = ProfileLoader()
    try:
        profile = loader.load_profile(parsed.profile)
        jobs = loader.load_jobs(parsed.jobs)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for warning in loader.validate_profile(profile):
        logger.warning(f"Profile: {warning}")

    try:
        service = MatchScoringService()
    except ValueError as e:
        print(f"Error loading scoring config: {e}", file=sys.stderr)
        return 1

    if parsed.mode == "match":
        if parsed.job_id is not None:
            jobs = [job for job in jobs if job.id == parsed.job_id]
        if not jobs:
            print("Error: no matching job posting found", file=sys.stderr)
            return 1

        result = service.evaluate(profile, jobs[0])
        print(service.format_result(result))

        run_dir = _resolve_run_dir(
            settings, prefix="match", out_run_dir=parsed.out_run_dir
        )
        output_path = run_dir / "match_result.json"
        _write_json(output_path, result.to_dict())
        print(f"Wrote: {output_path}")
        return 0

    if parsed.mode == "rank":
        results = service.rank(
            profile,
            jobs,
            limit=parsed.limit,
            include_zero=parsed.include_zero,
            max_workers=parsed.workers,
        )

        if results:
            print(f"Top {len(results)} of {len(jobs)} postings:")
            for position, result in enumerate(results, start=1):
                print(
                    f"{position:>3}. {result.job_id} "
                    f"total={result.scores.total:.1f} "
                    f"({'; '.join(result.reasons)})"
                )
        else:
            print(f"No matching postings among {len(jobs)}.")

        run_dir = _resolve_run_dir(
            settings, prefix="rank", out_run_dir=parsed.out_run_dir
        )
        output_path = run_dir / "rank_report.json"
        report = build_rank_report(results=results, total_jobs=len(jobs))
        _write_json(output_path, report)
        print(f"Wrote: {output_path}")
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
