"""Shared test fixtures."""

from __future__ import annotations

import pytest

from xc3_verifier.config.settings import Settings
from xc3_verifier.models.domain import (
    DocumentInput,
    DocumentQualityProfile,
    ExtractedFields,
    ProjectMetadata,
)


def make_profile(
    readability: float = 0.9,
    completeness: float = 0.9,
    authenticity: float = 0.9,
    consistency: float = 0.9,
    extracted: ExtractedFields | None = None,
    file_name: str = "report.pdf",
    mime_type: str = "application/pdf",
    supported: bool = True,
) -> DocumentQualityProfile:
    return DocumentQualityProfile(
        readability=readability,
        completeness=completeness,
        authenticity=authenticity,
        consistency=consistency,
        extracted=extracted or ExtractedFields(),
        file_name=file_name,
        mime_type=mime_type,
        supported=supported,
    )


@pytest.fixture
def profile_factory():
    return make_profile


@pytest.fixture
def settings():
    """Test settings with a fixed scorer seed."""
    return Settings(scorer_seed=1234, analysis_timeout_s=5.0)


@pytest.fixture
def solar_project():
    return ProjectMetadata(
        name="Solar Farm Initiative",
        description=(
            "Utility-scale photovoltaic array displacing grid electricity "
            "generated from natural gas peaker plants."
        ),
        location="California, USA",
        methodology="VCS",
        vintage_year=2023,
        estimated_tco2e=10000,
    )


@pytest.fixture
def high_quality_profiles():
    return [
        make_profile(0.95, 0.92, 0.94, 0.91, file_name=f"doc{i}.pdf") for i in range(4)
    ]


@pytest.fixture
def sample_documents():
    return [
        DocumentInput("monitoring_report.pdf", "application/pdf", b"%PDF-1.7 monitoring data"),
        DocumentInput("baseline.docx", "application/msword", b"baseline study contents"),
        DocumentInput(
            "summary.txt",
            "text/plain",
            b"Methodology: VCS\nLocation: California, USA\n"
            b"Expected reductions of 12,500 tCO2e over 2023-2025.",
        ),
    ]
