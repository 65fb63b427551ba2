"""Tiered explanation, issue and strength generation over the final score."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from xc3_verifier.config.constants import (
    CROSS_REFERENCE_BASE_SCORE,
    HIGH_AUTHENTICITY,
    LOW_AUTHENTICITY,
    LOW_COMPLETENESS,
    LOW_CONSISTENCY,
    LOW_READABILITY,
    THIN_METADATA,
)
from xc3_verifier.config.settings import Settings
from xc3_verifier.scoring.document_quality import DocumentAverages


class Tier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ACCEPTABLE = "acceptable"
    POOR = "poor"


EXPLANATIONS: dict[Tier, str] = {
    Tier.EXCELLENT: (
        "Excellent project documentation. All verification criteria exceeded expectations."
    ),
    Tier.GOOD: "Good project documentation with minor areas for improvement.",
    Tier.ACCEPTABLE: (
        "Acceptable documentation but improvements needed for optimal verification."
    ),
    Tier.POOR: (
        "Documentation requires significant improvements before verification can proceed."
    ),
}


@dataclass
class Feedback:
    tier: Tier
    explanation: str
    issues: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)


class FeedbackGenerator:
    def __init__(self, settings: Settings) -> None:
        self._excellent = settings.tier_excellent_threshold
        self._good = settings.tier_good_threshold
        self._acceptable = settings.tier_acceptable_threshold
        self._min_documents = settings.min_recommended_documents
        self._portfolio_documents = settings.portfolio_documents

    def tier_for(self, score: float) -> Tier:
        if score >= self._excellent:
            return Tier.EXCELLENT
        if score >= self._good:
            return Tier.GOOD
        if score >= self._acceptable:
            return Tier.ACCEPTABLE
        return Tier.POOR

    def generate(
        self,
        score: float,
        averages: DocumentAverages,
        metadata_score: float,
        cross_reference_score: float,
        document_count: int,
    ) -> Feedback:
        tier = self.tier_for(score)
        feedback = Feedback(tier=tier, explanation=EXPLANATIONS[tier])
        issues, strengths = feedback.issues, feedback.strengths

        if tier is Tier.EXCELLENT:
            strengths.append("Comprehensive documentation")
            strengths.append("High data consistency")
            strengths.append("Clear methodology alignment")
        elif tier is Tier.GOOD:
            strengths.append("Solid documentation foundation")
            if averages.authenticity > HIGH_AUTHENTICITY:
                strengths.append("High document authenticity")
        elif tier is Tier.ACCEPTABLE:
            if averages.readability < LOW_READABILITY:
                issues.append("Document readability could be improved")
            if averages.completeness < LOW_COMPLETENESS:
                issues.append("Some documentation appears incomplete")
            self._integrity_issues(averages, issues)
        else:
            issues.append("Insufficient documentation quality")
            if metadata_score < THIN_METADATA:
                issues.append("Project metadata needs more detail")
            if cross_reference_score <= CROSS_REFERENCE_BASE_SCORE:
                issues.append("Document contents could not be matched to the declared project")
            self._integrity_issues(averages, issues)

        if document_count < self._min_documents:
            issues.append("Consider providing additional supporting documents")
        elif document_count > self._portfolio_documents:
            strengths.append("Comprehensive document portfolio")

        return feedback

    @staticmethod
    def _integrity_issues(averages: DocumentAverages, issues: list[str]) -> None:
        if averages.authenticity < LOW_AUTHENTICITY:
            issues.append("Document authenticity could not be fully established")
        if averages.consistency < LOW_CONSISTENCY:
            issues.append("Inconsistencies found between documents")
