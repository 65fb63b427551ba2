"""Tests for metadata, cross-reference, averaging and confidence scoring."""

import pytest

from xc3_verifier.config.settings import Settings
from xc3_verifier.models.domain import ExtractedFields, ProjectMetadata
from xc3_verifier.scoring.confidence import ConfidenceScorer
from xc3_verifier.scoring.cross_reference import CrossReferenceScorer
from xc3_verifier.scoring.document_quality import average_profiles
from xc3_verifier.scoring.metadata import MetadataScorer


def test_metadata_score_complete(solar_project):
    assert MetadataScorer().score(solar_project) == pytest.approx(1.0)


def test_metadata_score_empty():
    assert MetadataScorer().score(ProjectMetadata()) == pytest.approx(0.70)


def test_metadata_score_partial():
    metadata = ProjectMetadata(
        name="Short",  # exactly 5 chars does not pass
        location="Kenya",
        methodology="CDM",
        description="too short",
        vintage_year=2019,
        estimated_tco2e=0,
    )
    assert MetadataScorer().score(metadata) == pytest.approx(0.80)


def test_metadata_score_malformed_does_not_raise():
    metadata = ProjectMetadata(name="", estimated_tco2e=-5, vintage_year=None)
    assert MetadataScorer().score(metadata) == pytest.approx(0.70)


def test_cross_reference_no_extracted_fields(solar_project, profile_factory):
    profiles = [profile_factory() for _ in range(3)]
    assert CrossReferenceScorer().score(solar_project, profiles) == pytest.approx(0.80)


def test_cross_reference_case_insensitive_overlap(solar_project, profile_factory):
    extracted = ExtractedFields(location="near california, usa coast", methodology="vcs v4.5")
    profiles = [profile_factory(extracted=extracted)]
    assert CrossReferenceScorer().score(solar_project, profiles) == pytest.approx(0.84)


def test_cross_reference_clamped(solar_project, profile_factory):
    extracted = ExtractedFields(location="California, USA", methodology="VCS")
    profiles = [profile_factory(extracted=extracted) for _ in range(10)]
    assert CrossReferenceScorer().score(solar_project, profiles) == 1.0


def test_cross_reference_ignores_empty_declared(profile_factory):
    extracted = ExtractedFields(location="Kenya", methodology="CDM")
    profiles = [profile_factory(extracted=extracted)]
    assert CrossReferenceScorer().score(ProjectMetadata(), profiles) == pytest.approx(0.80)


def test_average_profiles_clamps_inputs(profile_factory):
    averages = average_profiles(
        [profile_factory(1.5, 0.5, -1.0, 0.5), profile_factory(0.5, 0.5, 1.0, 0.5)]
    )
    assert averages.readability == pytest.approx(0.75)
    assert averages.authenticity == pytest.approx(0.5)
    assert averages.document_score == pytest.approx((0.75 + 0.5 + 0.5 + 0.5) / 4)


def test_confidence_monotonic_and_capped():
    scorer = ConfidenceScorer(Settings())
    values = [scorer.score(n) for n in range(1, 15)]
    assert values == sorted(values)
    assert max(values) == pytest.approx(0.95)
    assert all(v <= 0.95 for v in values)
    assert scorer.score(1) == pytest.approx(0.75)
    assert scorer.score(4) == pytest.approx(0.90)
