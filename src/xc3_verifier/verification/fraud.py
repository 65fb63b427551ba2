"""Rule-based fraud risk scan: additive penalties mapped to a risk level."""

from __future__ import annotations

from xc3_verifier.config.settings import Settings
from xc3_verifier.exceptions import InsufficientInputError
from xc3_verifier.models.domain import (
    DocumentQualityProfile,
    FraudRiskReport,
    ProjectMetadata,
    RiskLevel,
)
from xc3_verifier.observability.logger import get_logger
from xc3_verifier.scoring.document_quality import average_profiles

logger = get_logger("fraud")


def classify_risk(
    risk_score: float, medium_threshold: float = 0.3, high_threshold: float = 0.6
) -> RiskLevel:
    """low < medium_threshold <= medium < high_threshold <= high."""
    if risk_score >= high_threshold:
        return RiskLevel.HIGH
    if risk_score >= medium_threshold:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


class FraudDetector:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def assess_risk(
        self, metadata: ProjectMetadata, profiles: list[DocumentQualityProfile]
    ) -> FraudRiskReport:
        if not profiles:
            raise InsufficientInputError("Fraud assessment requires at least one document")

        s = self._settings
        averages = average_profiles(profiles)
        flags: list[str] = []
        risk = 0.0

        if len(profiles) < s.fraud_min_documents:
            flags.append("Insufficient documentation")
            risk += s.fraud_penalty_documentation

        if metadata.estimated_tco2e is not None and metadata.estimated_tco2e > s.fraud_high_volume_tco2e:
            flags.append("Unusually high carbon volume claimed")
            risk += s.fraud_penalty_volume

        if averages.authenticity < s.fraud_authenticity_floor:
            flags.append("Low document authenticity scores")
            risk += s.fraud_penalty_authenticity

        if averages.consistency < s.fraud_consistency_floor:
            flags.append("Inconsistent data across documents")
            risk += s.fraud_penalty_consistency

        # Rounding keeps sums such as 0.1 + 0.2 on the intended side of a threshold
        risk = round(max(0.0, min(1.0, risk)), 4)
        level = classify_risk(risk, s.fraud_medium_threshold, s.fraud_high_threshold)

        logger.info("fraud_assessed", risk_score=risk, risk_level=level.value, flags=flags)
        return FraudRiskReport(risk_level=level, flags=flags, risk_score=risk)
