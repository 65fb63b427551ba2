"""Tests for aggregate project verification and feedback."""

from dataclasses import replace

import pytest

from xc3_verifier.config.settings import Settings
from xc3_verifier.exceptions import InsufficientInputError
from xc3_verifier.models.domain import ExtractedFields, ProjectMetadata
from xc3_verifier.verification.feedback import EXPLANATIONS, FeedbackGenerator, Tier
from xc3_verifier.verification.project_verifier import ProjectVerifier


def test_verify_empty_profiles_raises(settings, solar_project):
    with pytest.raises(InsufficientInputError):
        ProjectVerifier(settings).verify(solar_project, [])


def test_excellent_scenario(settings, solar_project, high_quality_profiles):
    result = ProjectVerifier(settings).verify(solar_project, high_quality_profiles)
    assert result.score >= 0.85
    assert result.explanation == EXPLANATIONS[Tier.EXCELLENT]
    assert result.strengths
    assert result.issues == []
    assert result.confidence == pytest.approx(0.90)
    assert result.model_name == settings.model_name


def test_poor_single_document_scenario(settings, solar_project, profile_factory):
    profiles = [profile_factory(0.5, 0.5, 0.4, 0.3)]
    result = ProjectVerifier(settings).verify(solar_project, profiles)
    assert result.score < 0.65
    assert result.explanation == EXPLANATIONS[Tier.POOR]
    assert "Document authenticity could not be fully established" in result.issues
    assert "Inconsistencies found between documents" in result.issues
    assert "Consider providing additional supporting documents" in result.issues


def test_good_tier_feedback(settings, solar_project, profile_factory):
    profiles = [profile_factory(0.7, 0.7, 0.85, 0.75) for _ in range(3)]
    result = ProjectVerifier(settings).verify(solar_project, profiles)
    assert result.score == pytest.approx(0.81)
    assert result.explanation == EXPLANATIONS[Tier.GOOD]
    assert result.strengths == ["Solid documentation foundation", "High document authenticity"]
    assert result.issues == []


def test_acceptable_tier_feedback(settings, solar_project, profile_factory):
    profiles = [profile_factory(0.6, 0.6, 0.65, 0.65) for _ in range(3)]
    result = ProjectVerifier(settings).verify(solar_project, profiles)
    assert result.explanation == EXPLANATIONS[Tier.ACCEPTABLE]
    assert result.issues == [
        "Document readability could be improved",
        "Some documentation appears incomplete",
        "Document authenticity could not be fully established",
        "Inconsistencies found between documents",
    ]


def test_score_formula(settings, solar_project, profile_factory):
    extracted = ExtractedFields(location="California, USA", methodology="VCS")
    profiles = [profile_factory(0.8, 0.8, 0.8, 0.8, extracted=extracted) for _ in range(2)]
    result = ProjectVerifier(settings).verify(solar_project, profiles)
    # 0.8*0.6 + 1.0*0.2 + (0.8 + 4*0.02)*0.2
    assert result.score == pytest.approx(0.48 + 0.2 + 0.176)


def test_portfolio_strength(settings, solar_project, profile_factory):
    profiles = [profile_factory() for _ in range(6)]
    result = ProjectVerifier(settings).verify(solar_project, profiles)
    assert "Comprehensive document portfolio" in result.strengths
    assert result.confidence == pytest.approx(0.95)


def test_unsupported_and_analysis_issues_appended(settings, solar_project, profile_factory):
    profiles = [
        profile_factory(),
        profile_factory(file_name="data.zip", mime_type="application/zip", supported=False),
        profile_factory(),
    ]
    result = ProjectVerifier(settings).verify(
        solar_project, profiles, ["Document 4 (scan.pdf) could not be analyzed in time"]
    )
    assert result.issues[-2] == (
        "Document data.zip has unsupported type 'application/zip' "
        "and was scored at reduced quality"
    )
    assert result.issues[-1] == "Document 4 (scan.pdf) could not be analyzed in time"


def test_malformed_metadata_degrades_not_raises(settings, profile_factory):
    metadata = ProjectMetadata(name="", location="", estimated_tco2e=0, vintage_year=1990)
    result = ProjectVerifier(settings).verify(metadata, [profile_factory()])
    assert 0.0 <= result.score <= 1.0


def test_score_in_range_for_extreme_profiles(settings, solar_project, profile_factory):
    for value in (0.0, 1.0, 2.0, -1.0):
        result = ProjectVerifier(settings).verify(
            solar_project, [profile_factory(value, value, value, value)]
        )
        assert 0.0 <= result.score <= 1.0
        assert 0.0 <= result.confidence <= 0.95


def test_artifacts_hash_deterministic(settings, solar_project, high_quality_profiles):
    verifier = ProjectVerifier(settings)
    a = verifier.verify(solar_project, high_quality_profiles)
    b = verifier.verify(solar_project, high_quality_profiles)
    assert a.artifacts_hash == b.artifacts_hash
    assert a.artifacts_hash.startswith("Qm")


def test_artifacts_hash_changes_with_inputs(settings, solar_project, high_quality_profiles):
    verifier = ProjectVerifier(settings)
    a = verifier.verify(solar_project, high_quality_profiles)
    b = verifier.verify(replace(solar_project, estimated_tco2e=20000), high_quality_profiles)
    assert a.artifacts_hash != b.artifacts_hash


def test_verify_idempotent(settings, solar_project, high_quality_profiles):
    verifier = ProjectVerifier(settings)
    a = verifier.verify(solar_project, high_quality_profiles)
    b = verifier.verify(solar_project, high_quality_profiles)
    assert replace(a, processing_time_ms=0) == replace(b, processing_time_ms=0)
    assert a.processing_time_ms >= 0


def test_confidence_monotonic_in_document_count(settings, solar_project, profile_factory):
    verifier = ProjectVerifier(settings)
    confidences = [
        verifier.verify(solar_project, [profile_factory() for _ in range(n)]).confidence
        for n in range(1, 10)
    ]
    assert confidences == sorted(confidences)


@pytest.mark.parametrize(
    "score,tier",
    [
        (0.85, Tier.EXCELLENT),
        (0.8499, Tier.GOOD),
        (0.75, Tier.GOOD),
        (0.7499, Tier.ACCEPTABLE),
        (0.65, Tier.ACCEPTABLE),
        (0.6499, Tier.POOR),
    ],
)
def test_tier_boundaries(settings, score, tier):
    assert FeedbackGenerator(settings).tier_for(score) is tier


def test_tier_thresholds_configurable():
    generator = FeedbackGenerator(Settings(tier_excellent_threshold=0.95))
    assert generator.tier_for(0.9) is Tier.GOOD
