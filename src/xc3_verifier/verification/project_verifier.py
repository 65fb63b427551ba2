"""Project verifier: aggregate document profiles and metadata into one result.

SCORE = 0.6*document + 0.2*metadata + 0.2*cross_reference
"""

from __future__ import annotations

import time
from collections.abc import Sequence

from xc3_verifier.config.constants import (
    CROSS_REFERENCE_WEIGHT,
    DOCUMENT_WEIGHT,
    METADATA_WEIGHT,
)
from xc3_verifier.config.settings import Settings
from xc3_verifier.exceptions import InsufficientInputError
from xc3_verifier.models.domain import (
    DocumentQualityProfile,
    ProjectMetadata,
    VerificationResult,
)
from xc3_verifier.observability.logger import get_logger
from xc3_verifier.scoring.confidence import ConfidenceScorer
from xc3_verifier.scoring.cross_reference import CrossReferenceScorer
from xc3_verifier.scoring.document_quality import average_profiles
from xc3_verifier.scoring.metadata import MetadataScorer
from xc3_verifier.verification.artifacts import artifacts_hash
from xc3_verifier.verification.feedback import FeedbackGenerator

logger = get_logger("project_verifier")


class ProjectVerifier:
    def __init__(self, settings: Settings) -> None:
        self.model_name = settings.model_name
        self._metadata_scorer = MetadataScorer()
        self._cross_reference_scorer = CrossReferenceScorer()
        self._confidence_scorer = ConfidenceScorer(settings)
        self._feedback = FeedbackGenerator(settings)

    def verify(
        self,
        metadata: ProjectMetadata,
        profiles: list[DocumentQualityProfile],
        analysis_issues: Sequence[str] = (),
    ) -> VerificationResult:
        if not profiles:
            raise InsufficientInputError(
                "At least one analysable document is required for verification"
            )

        start = time.monotonic()

        averages = average_profiles(profiles)
        document_score = averages.document_score
        metadata_score = self._metadata_scorer.score(metadata)
        cross_reference_score = self._cross_reference_scorer.score(metadata, profiles)

        final_score = (
            document_score * DOCUMENT_WEIGHT
            + metadata_score * METADATA_WEIGHT
            + cross_reference_score * CROSS_REFERENCE_WEIGHT
        )
        final_score = max(0.0, min(1.0, final_score))

        feedback = self._feedback.generate(
            final_score,
            averages,
            metadata_score,
            cross_reference_score,
            len(profiles),
        )
        issues = list(feedback.issues)
        for profile in profiles:
            if not profile.supported:
                issues.append(
                    f"Document {profile.file_name} has unsupported type "
                    f"'{profile.mime_type}' and was scored at reduced quality"
                )
        issues.extend(analysis_issues)

        result = VerificationResult(
            score=final_score,
            confidence=self._confidence_scorer.score(len(profiles)),
            explanation=feedback.explanation,
            issues=issues,
            strengths=list(feedback.strengths),
            model_name=self.model_name,
            processing_time_ms=int(round((time.monotonic() - start) * 1000)),
            artifacts_hash=artifacts_hash(metadata, profiles),
        )

        logger.info(
            "project_verified",
            documents=len(profiles),
            document_score=round(document_score, 4),
            metadata_score=round(metadata_score, 4),
            cross_reference_score=round(cross_reference_score, 4),
            score=round(final_score, 4),
            tier=feedback.tier.value,
        )
        return result
