"""FastAPI application factory with lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from xc3_verifier import __version__
from xc3_verifier.analysis.analyzer import DocumentAnalyzer
from xc3_verifier.analysis.scorer import SimulatedDocumentScorer
from xc3_verifier.api.middleware import RequestTimingMiddleware
from xc3_verifier.api.routes_health import router as health_router
from xc3_verifier.api.routes_verify import router as verify_router
from xc3_verifier.config.settings import Settings
from xc3_verifier.observability.logger import get_logger, setup_logging
from xc3_verifier.pipeline.verification_pipeline import VerificationPipeline
from xc3_verifier.verification.fraud import FraudDetector
from xc3_verifier.verification.project_verifier import ProjectVerifier

logger = get_logger("app")


def build_pipeline(settings: Settings) -> VerificationPipeline:
    scorer = SimulatedDocumentScorer(seed=settings.scorer_seed)
    return VerificationPipeline(
        analyzer=DocumentAnalyzer(scorer, settings),
        verifier=ProjectVerifier(settings),
        fraud_detector=FraudDetector(settings),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        resolved = settings or Settings()
        setup_logging(resolved.log_level, resolved.log_json)

        app.state.settings = resolved
        app.state.verification_pipeline = build_pipeline(resolved)

        logger.info(
            "startup_complete",
            model=resolved.model_name,
            seeded=resolved.scorer_seed is not None,
            concurrency=resolved.analysis_concurrency,
        )

        yield

        logger.info("shutdown_complete")

    app = FastAPI(
        title="XC3 Verifier",
        version=__version__,
        description="Carbon-credit project document verification and fraud screening",
        lifespan=lifespan,
    )
    app.add_middleware(RequestTimingMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(verify_router, tags=["verify"])
    return app
