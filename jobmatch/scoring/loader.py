"""Profile and posting loading utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from jobmatch.scoring.models import CandidateProfile, JobPosting, SeniorityLevel
from jobmatch.scoring.normalizer import normalize_job, normalize_profile
from jobmatch.utils.logging import get_logger

logger = get_logger("scoring.loader")


class ProfileLoader:
    """Loads candidate profiles and job postings from YAML or JSON files.

    File problems (missing file, unparsable content, wrong top-level shape)
    raise. Field problems inside a well-formed document do not: they go
    through the normalizer and degrade to defaults.
    """

    def load_profile(self, path: Path | str) -> CandidateProfile:
        """Load and normalize a candidate profile."""
        data = self._load_document(Path(path))
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {path}")
        return normalize_profile(data)

    def load_jobs(self, path: Path | str) -> list[JobPosting]:
        """Load and normalize job postings.

        Supported payloads:
        - A single job mapping
        - A list of job mappings
        - A mapping with a "jobs" list
        """
        data = self._load_document(Path(path))

        if isinstance(data, dict) and isinstance(data.get("jobs"), list):
            entries = data["jobs"]
        elif isinstance(data, dict):
            entries = [data]
        elif isinstance(data, list):
            entries = data
        else:
            raise ValueError(f"Invalid job payload: {path}")

        jobs: list[JobPosting] = []
        for idx, entry in enumerate(entries):
            if not isinstance(entry, dict):
                logger.warning(f"Skipping job entry {idx} in {path}: not a mapping")
                continue
            jobs.append(normalize_job(entry))
        return jobs

    def validate_profile(self, profile: CandidateProfile) -> list[str]:
        """Return warnings for incomplete profiles."""
        warnings: list[str] = []

        if not profile.resume_skills:
            warnings.append("Skills list is empty")
        if profile.seniority_level is SeniorityLevel.UNKNOWN:
            warnings.append("Seniority level is unknown")
        if not profile.location:
            warnings.append("Missing location")

        return warnings

    def _load_document(self, path: Path) -> Any:
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        suffix = path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            return self._load_yaml(path)
        if suffix == ".json":
            return self._load_json(path)
        return self._load_unknown(path)

    def _load_yaml(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML file: {path}") from e

        return {} if data is None else data

    def _load_json(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON file: {path}") from e

    def _load_unknown(self, path: Path) -> Any:
        """Auto-detect the format when the file extension is unknown."""
        raw = path.read_text(encoding="utf-8")
        raw_stripped = raw.lstrip()

        # Try JSON first if it looks like JSON, otherwise fall back to YAML.
        if raw_stripped.startswith("{") or raw_stripped.startswith("["):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                pass

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid file format: {path}") from e

        return {} if data is None else data
