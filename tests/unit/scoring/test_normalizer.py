"""Tests for profile/posting normalization."""

import pytest


class TestNormalizeSkill:
    """Test normalize_skill."""

    def test_normalize_skill_lowercases(self):
        """normalize_skill should case-fold skill names."""
        from jobmatch.scoring.normalizer import normalize_skill

        assert normalize_skill("TypeScript") == "typescript"

    def test_normalize_skill_strips_and_collapses_whitespace(self):
        """normalize_skill should trim and collapse whitespace."""
        from jobmatch.scoring.normalizer import normalize_skill

        assert normalize_skill("  Machine   Learning \n") == "machine learning"

    def test_normalize_skill_handles_special_characters(self):
        """normalize_skill should preserve common special characters."""
        from jobmatch.scoring.normalizer import normalize_skill

        assert normalize_skill("C++") == "c++"
        assert normalize_skill("C#") == "c#"
        assert normalize_skill("Node.js") == "node.js"


class TestNormalizeSkills:
    """Test normalize_skills."""

    def test_dedupes_preserving_first_seen_order(self):
        """Duplicates that differ only by case/whitespace collapse to one."""
        from jobmatch.scoring.normalizer import normalize_skills

        result = normalize_skills(["Go", "Python", " go ", "PYTHON", "SQL"])

        assert result == ("go", "python", "sql")

    def test_drops_blank_and_non_string_entries(self):
        """Blank strings and non-strings are skipped."""
        from jobmatch.scoring.normalizer import normalize_skills

        assert normalize_skills(["", "   ", None, 42, "Rust"]) == ("rust",)

    def test_malformed_values_become_empty(self):
        """Anything that is not a collection of strings yields no skills."""
        from jobmatch.scoring.normalizer import normalize_skills

        assert normalize_skills(None) == ()
        assert normalize_skills("Python") == ()
        assert normalize_skills(42) == ()
        assert normalize_skills({"python": True}) == ()

    def test_accepts_sets_and_tuples(self):
        """Sets and tuples are accepted as well as lists."""
        from jobmatch.scoring.normalizer import normalize_skills

        assert normalize_skills(("A", "b")) == ("a", "b")
        assert normalize_skills({"Kotlin"}) == ("kotlin",)

    def test_sets_come_back_sorted(self):
        """Sets have no order of their own, so the result is sorted."""
        from jobmatch.scoring.normalizer import normalize_skills

        assert normalize_skills({"React", "Go", "TypeScript", "AWS"}) == (
            "aws",
            "go",
            "react",
            "typescript",
        )


class TestNormalizeSeniority:
    """Test normalize_seniority."""

    def test_known_labels_any_case(self):
        """Canonical labels map regardless of case and whitespace."""
        from jobmatch.scoring.models import SeniorityLevel
        from jobmatch.scoring.normalizer import normalize_seniority

        assert normalize_seniority("Junior") is SeniorityLevel.JUNIOR
        assert normalize_seniority(" MID ") is SeniorityLevel.MID
        assert normalize_seniority("senior") is SeniorityLevel.SENIOR
        assert normalize_seniority("Staff") is SeniorityLevel.STAFF

    def test_common_spellings(self):
        """Abbreviations and hyphenated forms are recognised."""
        from jobmatch.scoring.models import SeniorityLevel
        from jobmatch.scoring.normalizer import normalize_seniority

        assert normalize_seniority("Sr.") is SeniorityLevel.SENIOR
        assert normalize_seniority("jr") is SeniorityLevel.JUNIOR
        assert normalize_seniority("Mid-level") is SeniorityLevel.MID
        assert normalize_seniority("entry_level") is SeniorityLevel.JUNIOR

    def test_unknown_or_malformed_becomes_unknown(self):
        """Unrecognised labels degrade to unknown instead of raising."""
        from jobmatch.scoring.models import SeniorityLevel
        from jobmatch.scoring.normalizer import normalize_seniority

        assert normalize_seniority("wizard") is SeniorityLevel.UNKNOWN
        assert normalize_seniority("") is SeniorityLevel.UNKNOWN
        assert normalize_seniority(None) is SeniorityLevel.UNKNOWN
        assert normalize_seniority(3) is SeniorityLevel.UNKNOWN

    def test_enum_passes_through(self):
        """An enum value is returned unchanged."""
        from jobmatch.scoring.models import SeniorityLevel
        from jobmatch.scoring.normalizer import normalize_seniority

        assert normalize_seniority(SeniorityLevel.STAFF) is SeniorityLevel.STAFF


class TestNormalizeLocation:
    """Test normalize_location."""

    def test_trims_and_keeps_casing(self):
        """Locations are trimmed but keep their display casing."""
        from jobmatch.scoring.normalizer import normalize_location

        assert normalize_location("  New  York ") == "New York"

    def test_blank_or_malformed_is_none(self):
        """Blank and non-string locations mean no location."""
        from jobmatch.scoring.normalizer import normalize_location

        assert normalize_location("   ") is None
        assert normalize_location(None) is None
        assert normalize_location(["Remote"]) is None


class TestNormalizeProfile:
    """Test normalize_profile."""

    def test_normalizes_mapping(self):
        """A raw mapping becomes a normalized CandidateProfile."""
        from jobmatch.scoring.models import CandidateProfile, SeniorityLevel
        from jobmatch.scoring.normalizer import normalize_profile

        profile = normalize_profile(
            {
                "resume_skills": ["TypeScript", "typescript", "React "],
                "seniority_level": "Senior",
                "location": " Remote ",
                "target_roles": ["Engineer"],
            }
        )

        assert isinstance(profile, CandidateProfile)
        assert profile.resume_skills == ("typescript", "react")
        assert profile.seniority_level is SeniorityLevel.SENIOR
        assert profile.location == "Remote"

    def test_empty_mapping_uses_restrictive_defaults(self):
        """Missing fields default to no skills, unknown seniority, no location."""
        from jobmatch.scoring.models import SeniorityLevel
        from jobmatch.scoring.normalizer import normalize_profile

        profile = normalize_profile({})

        assert profile.resume_skills == ()
        assert profile.seniority_level is SeniorityLevel.UNKNOWN
        assert profile.location is None

    def test_renormalizes_model_instances(self):
        """Passing an already-built model returns a normalized copy."""
        from jobmatch.scoring.models import CandidateProfile
        from jobmatch.scoring.normalizer import normalize_profile

        raw = CandidateProfile(resume_skills=("Go", "GO"), location="  Berlin ")

        profile = normalize_profile(raw)

        assert profile.resume_skills == ("go",)
        assert profile.location == "Berlin"
        assert raw.resume_skills == ("Go", "GO")

    def test_none_is_a_contract_violation(self):
        """None is a caller bug and raises TypeError."""
        from jobmatch.scoring.normalizer import normalize_profile

        with pytest.raises(TypeError):
            normalize_profile(None)  # type: ignore[arg-type]

    def test_wrong_type_is_a_contract_violation(self):
        """A non-mapping value raises TypeError."""
        from jobmatch.scoring.normalizer import normalize_profile

        with pytest.raises(TypeError):
            normalize_profile(["python"])  # type: ignore[arg-type]


class TestNormalizeJob:
    """Test normalize_job."""

    def test_normalizes_mapping(self):
        """A raw mapping becomes a normalized JobPosting."""
        from jobmatch.scoring.models import SeniorityLevel
        from jobmatch.scoring.normalizer import normalize_job

        job = normalize_job(
            {
                "id": 17,
                "skills": ["Go", "Kubernetes", "go"],
                "must_have_skills": ["GO"],
                "seniority_level": "staff",
                "location": "Berlin",
            }
        )

        assert job.id == "17"
        assert job.skills == ("go", "kubernetes")
        assert job.must_have_skills == ("go",)
        assert job.seniority_level is SeniorityLevel.STAFF
        assert job.location == "Berlin"

    def test_null_must_haves_become_empty(self):
        """A null must_have_skills column means no must-haves."""
        from jobmatch.scoring.normalizer import normalize_job

        job = normalize_job({"id": "j", "skills": ["go"], "must_have_skills": None})

        assert job.must_have_skills == ()

    def test_missing_id_becomes_empty_string(self):
        """A posting without an id still normalizes."""
        from jobmatch.scoring.normalizer import normalize_job

        assert normalize_job({}).id == ""

    def test_profile_model_is_not_a_job(self):
        """Passing a profile where a job is expected raises TypeError."""
        from jobmatch.scoring.models import CandidateProfile
        from jobmatch.scoring.normalizer import normalize_job

        with pytest.raises(TypeError):
            normalize_job(CandidateProfile())  # type: ignore[arg-type]
