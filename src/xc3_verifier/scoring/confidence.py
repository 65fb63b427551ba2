"""Result confidence: CONF = min(cap, base + step * document_count)."""

from __future__ import annotations

from xc3_verifier.config.settings import Settings


class ConfidenceScorer:
    def __init__(self, settings: Settings) -> None:
        self.base = settings.conf_base
        self.step = settings.conf_step
        self.cap = settings.conf_cap

    def score(self, document_count: int) -> float:
        conf = self.base + self.step * max(0, document_count)
        return max(0.0, min(self.cap, conf))
