"""Cross-reference score: do extracted document fields agree with the declared project?"""

from __future__ import annotations

from xc3_verifier.config.constants import (
    CROSS_REFERENCE_BASE_SCORE,
    CROSS_REFERENCE_MATCH_BONUS,
)
from xc3_verifier.models.domain import DocumentQualityProfile, ProjectMetadata


def _overlaps(extracted: str | None, declared: str | None) -> bool:
    if not extracted or not declared:
        return False
    return declared.lower() in extracted.lower()


class CrossReferenceScorer:
    def score(
        self, metadata: ProjectMetadata, profiles: list[DocumentQualityProfile]
    ) -> float:
        matches = 0
        for profile in profiles:
            if _overlaps(profile.extracted.methodology, metadata.methodology):
                matches += 1
            if _overlaps(profile.extracted.location, metadata.location):
                matches += 1
        return min(1.0, CROSS_REFERENCE_BASE_SCORE + CROSS_REFERENCE_MATCH_BONUS * matches)
