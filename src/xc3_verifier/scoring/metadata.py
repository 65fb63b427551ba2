"""Metadata score: base plus a fixed bonus per satisfied presence/quality check."""

from __future__ import annotations

from xc3_verifier.config.constants import (
    METADATA_BASE_SCORE,
    METADATA_CHECK_BONUS,
    MIN_DESCRIPTION_LENGTH,
    MIN_LOCATION_LENGTH,
    MIN_NAME_LENGTH,
    MIN_VINTAGE_YEAR,
)
from xc3_verifier.models.domain import ProjectMetadata


def metadata_checks(metadata: ProjectMetadata) -> list[bool]:
    return [
        len(metadata.name or "") > MIN_NAME_LENGTH,
        len(metadata.location or "") > MIN_LOCATION_LENGTH,
        bool(metadata.methodology),
        len(metadata.description or "") > MIN_DESCRIPTION_LENGTH,
        metadata.estimated_tco2e is not None and metadata.estimated_tco2e > 0,
        metadata.vintage_year is not None and metadata.vintage_year >= MIN_VINTAGE_YEAR,
    ]


class MetadataScorer:
    def score(self, metadata: ProjectMetadata) -> float:
        passed = sum(metadata_checks(metadata))
        return min(1.0, METADATA_BASE_SCORE + METADATA_CHECK_BONUS * passed)
