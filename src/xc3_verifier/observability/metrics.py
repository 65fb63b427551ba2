"""Metric recording helpers for verification calls."""

from __future__ import annotations

from xc3_verifier.models.domain import FraudRiskReport, VerificationResult
from xc3_verifier.observability.logger import get_logger

logger = get_logger("metrics")


def log_analysis_metrics(
    trace_id: str,
    submitted: int,
    analyzed: int,
    excluded: int,
) -> None:
    logger.info(
        "analysis_metrics",
        trace_id=trace_id,
        submitted=submitted,
        analyzed=analyzed,
        excluded=excluded,
    )


def log_verification_metrics(
    trace_id: str,
    result: VerificationResult,
    fraud: FraudRiskReport,
) -> None:
    logger.info(
        "verification_metrics",
        trace_id=trace_id,
        score=round(result.score, 4),
        confidence=round(result.confidence, 4),
        issues=len(result.issues),
        strengths=len(result.strengths),
        risk_level=fraud.risk_level.value,
        risk_score=fraud.risk_score,
        artifacts_hash=result.artifacts_hash,
    )


def log_latency(trace_id: str, spans: list[dict], total_ms: float) -> None:
    logger.info(
        "latency",
        trace_id=trace_id,
        spans=spans,
        total_ms=round(total_ms, 2),
    )
