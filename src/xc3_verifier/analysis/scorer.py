"""Simulated document scorer: seeded draws inside type-dependent quality bands.

Stands in for a real OCR/NLP backend. Any replacement only has to honour the
DocumentScorer protocol (four scores in [0, 1] plus extracted fields).
"""

from __future__ import annotations

import hashlib
import random

from xc3_verifier.analysis.extraction import extract_location, extract_methodology
from xc3_verifier.analysis.mime import INTEGRITY_BAND, QUALITY_BANDS, DocumentKind
from xc3_verifier.config.constants import (
    DEFAULT_TIMEFRAME,
    MAX_SIMULATED_VOLUME,
    MIN_SIMULATED_VOLUME,
)
from xc3_verifier.models.domain import ExtractedFields, QualityScores


class SimulatedDocumentScorer:
    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed

    def score(
        self, raw_bytes: bytes, file_name: str, kind: DocumentKind
    ) -> tuple[QualityScores, ExtractedFields]:
        rng = self._rng_for(raw_bytes, file_name)
        low, high = QUALITY_BANDS[kind]
        int_low, int_high = INTEGRITY_BAND

        scores = QualityScores(
            readability=min(1.0, rng.uniform(low, high)),
            completeness=min(1.0, rng.uniform(low, high)),
            authenticity=min(1.0, rng.uniform(int_low, int_high)),
            consistency=min(1.0, rng.uniform(int_low, int_high)),
        )
        extracted = ExtractedFields(
            location=extract_location(file_name),
            methodology=extract_methodology(file_name),
            carbon_volume=float(rng.randint(MIN_SIMULATED_VOLUME, MAX_SIMULATED_VOLUME)),
            timeframe=DEFAULT_TIMEFRAME,
        )
        return scores, extracted

    def _rng_for(self, raw_bytes: bytes, file_name: str) -> random.Random:
        if self._seed is None:
            return random.Random()
        # Keyed per document so results do not depend on analysis order
        h = hashlib.sha256()
        h.update(str(self._seed).encode("utf-8"))
        h.update(b"\x00")
        h.update(file_name.encode("utf-8"))
        h.update(b"\x00")
        h.update(raw_bytes)
        return random.Random(int.from_bytes(h.digest()[:8], "big"))
