"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def scoring_config():
    """ScoringConfig with defaults, isolated from any local .env file."""
    from jobmatch.scoring.config import ScoringConfig

    return ScoringConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def service(scoring_config):
    """MatchScoringService using the default weights."""
    from jobmatch.scoring.service import MatchScoringService

    return MatchScoringService(config=scoring_config)


@pytest.fixture
def sample_profile() -> dict:
    """Raw candidate profile as stored by the application."""
    return {
        "resume_skills": ["TypeScript", "React"],
        "seniority_level": "senior",
        "location": "Remote",
    }


@pytest.fixture
def sample_job() -> dict:
    """Raw job posting as stored by the application."""
    return {
        "id": "job1",
        "skills": ["TypeScript", "Node.js", "React"],
        "must_have_skills": ["TypeScript"],
        "seniority_level": "senior",
        "location": "Remote",
    }


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Give every test fresh logging and configuration singletons."""
    yield

    from jobmatch.config.settings import reset_settings
    from jobmatch.scoring.config import reset_scoring_config
    from jobmatch.utils.logging import reset_logging

    reset_logging()
    reset_settings()
    reset_scoring_config()
