"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from xc3_verifier import __version__
from xc3_verifier.api.dependencies import get_settings
from xc3_verifier.config.settings import Settings
from xc3_verifier.models.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", model=settings.model_name, version=__version__)
