"""Protocol for document quality scorers."""

from __future__ import annotations

from typing import Protocol

from xc3_verifier.analysis.mime import DocumentKind
from xc3_verifier.models.domain import ExtractedFields, QualityScores


class DocumentScorer(Protocol):
    def score(
        self, raw_bytes: bytes, file_name: str, kind: DocumentKind
    ) -> tuple[QualityScores, ExtractedFields]:
        """Returns (quality scores in [0, 1], best-effort extracted fields)."""
        ...
