"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Request

from xc3_verifier.config.settings import Settings
from xc3_verifier.pipeline.verification_pipeline import VerificationPipeline


def get_verification_pipeline(request: Request) -> VerificationPipeline:
    return request.app.state.verification_pipeline


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
