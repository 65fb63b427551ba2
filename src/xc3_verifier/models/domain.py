"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class ProjectMetadata:
    name: str = ""
    description: str = ""
    location: str = ""
    methodology: str = ""
    vintage_year: int | None = None
    estimated_tco2e: float | None = None


@dataclass(frozen=True)
class DocumentInput:
    file_name: str
    declared_mime_type: str
    raw_bytes: bytes


@dataclass
class ExtractedFields:
    location: str | None = None
    methodology: str | None = None
    carbon_volume: float | None = None
    timeframe: str | None = None


@dataclass
class QualityScores:
    readability: float
    completeness: float
    authenticity: float
    consistency: float


@dataclass
class DocumentQualityProfile:
    readability: float
    completeness: float
    authenticity: float
    consistency: float
    extracted: ExtractedFields = field(default_factory=ExtractedFields)
    file_name: str = ""
    mime_type: str = ""
    supported: bool = True


@dataclass
class AnalysisBatch:
    profiles: list[DocumentQualityProfile]
    issues: list[str]  # one entry per excluded document


@dataclass
class VerificationResult:
    score: float
    confidence: float
    explanation: str
    issues: list[str]
    strengths: list[str]
    model_name: str
    processing_time_ms: int
    artifacts_hash: str


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class FraudRiskReport:
    risk_level: RiskLevel
    flags: list[str]
    risk_score: float


@dataclass
class VerificationOutcome:
    result: VerificationResult
    fraud: FraudRiskReport
