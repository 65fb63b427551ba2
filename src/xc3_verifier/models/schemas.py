"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from xc3_verifier.models.domain import (
    FraudRiskReport,
    ProjectMetadata,
    VerificationOutcome,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ProjectPayload(_CamelModel):
    name: str | None = None
    description: str | None = None
    location: str | None = None
    methodology: str | None = None
    vintage_year: int | None = Field(default=None, alias="vintageYear")
    estimated_tco2e: float | None = Field(default=None, alias="estimatedTCO2e")

    def to_domain(self) -> ProjectMetadata:
        return ProjectMetadata(
            name=self.name or "",
            description=self.description or "",
            location=self.location or "",
            methodology=self.methodology or "",
            vintage_year=self.vintage_year,
            estimated_tco2e=self.estimated_tco2e,
        )


class DocumentPayload(_CamelModel):
    file_name: str = Field(alias="fileName")
    mime_type: str = Field(alias="mimeType")
    content: str  # base64


class VerifyRequest(BaseModel):
    project: ProjectPayload
    documents: list[DocumentPayload] = Field(default_factory=list)


class FraudResponse(_CamelModel):
    risk_level: Literal["low", "medium", "high"] = Field(alias="riskLevel")
    flags: list[str]
    score: float

    @classmethod
    def from_domain(cls, report: FraudRiskReport) -> FraudResponse:
        return cls(
            risk_level=report.risk_level.value,
            flags=list(report.flags),
            score=report.risk_score,
        )


class VerifyResponse(_CamelModel):
    score: float
    confidence: float
    explanation: str
    issues: list[str]
    strengths: list[str]
    model: str
    processing_time: int = Field(alias="processingTime")
    artifacts_hash: str = Field(alias="artifactsHash")
    fraud: FraudResponse

    @classmethod
    def from_outcome(cls, outcome: VerificationOutcome) -> VerifyResponse:
        result = outcome.result
        return cls(
            score=result.score,
            confidence=result.confidence,
            explanation=result.explanation,
            issues=list(result.issues),
            strengths=list(result.strengths),
            model=result.model_name,
            processing_time=result.processing_time_ms,
            artifacts_hash=result.artifacts_hash,
            fraud=FraudResponse.from_domain(outcome.fraud),
        )


class HealthResponse(_CamelModel):
    status: str
    model: str
    version: str
