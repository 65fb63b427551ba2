"""Document quality aggregation across per-document profiles."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from xc3_verifier.models.domain import DocumentQualityProfile


@dataclass
class DocumentAverages:
    readability: float
    completeness: float
    authenticity: float
    consistency: float

    @property
    def document_score(self) -> float:
        return float(
            np.mean([self.readability, self.completeness, self.authenticity, self.consistency])
        )


def average_profiles(profiles: list[DocumentQualityProfile]) -> DocumentAverages:
    """Per-field means with each input clamped to [0, 1]. Caller guarantees non-empty input."""
    matrix = np.array(
        [[p.readability, p.completeness, p.authenticity, p.consistency] for p in profiles],
        dtype=float,
    )
    means = np.clip(matrix, 0.0, 1.0).mean(axis=0)
    return DocumentAverages(
        readability=float(means[0]),
        completeness=float(means[1]),
        authenticity=float(means[2]),
        consistency=float(means[3]),
    )
