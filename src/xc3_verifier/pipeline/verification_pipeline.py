"""Verification pipeline orchestrator: analyze -> (verify || assess fraud)."""

from __future__ import annotations

import asyncio

from xc3_verifier.analysis.analyzer import DocumentAnalyzer
from xc3_verifier.exceptions import InsufficientInputError
from xc3_verifier.models.domain import DocumentInput, ProjectMetadata, VerificationOutcome
from xc3_verifier.observability.logger import get_logger
from xc3_verifier.observability.metrics import (
    log_analysis_metrics,
    log_latency,
    log_verification_metrics,
)
from xc3_verifier.observability.tracing import TraceContext
from xc3_verifier.verification.fraud import FraudDetector
from xc3_verifier.verification.project_verifier import ProjectVerifier

logger = get_logger("verification_pipeline")


class VerificationPipeline:
    def __init__(
        self,
        analyzer: DocumentAnalyzer,
        verifier: ProjectVerifier,
        fraud_detector: FraudDetector,
    ) -> None:
        self._analyzer = analyzer
        self._verifier = verifier
        self._fraud = fraud_detector

    async def run(
        self, metadata: ProjectMetadata, documents: list[DocumentInput]
    ) -> VerificationOutcome:
        """Raises InsufficientInputError when no document could be analysed."""
        trace = TraceContext()

        # STEP 1: per-document analysis
        with trace.stage("analysis", documents_in=len(documents)) as span:
            batch = await self._analyzer.analyze_batch(documents)
            span.documents_excluded = len(batch.issues)

        log_analysis_metrics(
            trace.trace_id,
            submitted=len(documents),
            analyzed=len(batch.profiles),
            excluded=len(batch.issues),
        )

        if not batch.profiles:
            logger.warning(
                "no_analysable_documents", trace_id=trace.trace_id, issues=batch.issues
            )
            raise InsufficientInputError("Please upload at least one supporting document")

        # STEP 2: aggregate verification and fraud scan over the same profiles
        with trace.stage("scoring", documents_in=len(batch.profiles)):
            result, fraud = await asyncio.gather(
                asyncio.to_thread(
                    self._verifier.verify, metadata, batch.profiles, batch.issues
                ),
                asyncio.to_thread(self._fraud.assess_risk, metadata, batch.profiles),
            )

        log_verification_metrics(trace.trace_id, result, fraud)
        log_latency(trace.trace_id, trace.summary(), trace.elapsed_ms)
        return VerificationOutcome(result=result, fraud=fraud)
