"""Per-verification stage timing.

A ``TraceContext`` covers one pipeline run. Each stage opens a ``StageSpan``
that records how many documents entered it and how many it dropped, so the
latency log shows where documents were lost as well as where time went.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator
from uuid import uuid4


@dataclass
class StageSpan:
    stage: str
    start_ms: float
    end_ms: float = 0.0
    documents_in: int = 0
    documents_excluded: int = 0

    @property
    def duration_ms(self) -> float:
        return self.end_ms - self.start_ms

    @property
    def documents_out(self) -> int:
        return self.documents_in - self.documents_excluded


class TraceContext:
    def __init__(self, trace_id: str | None = None) -> None:
        self.trace_id = trace_id or str(uuid4())
        self.spans: list[StageSpan] = []
        self._start = time.monotonic()

    def _now_ms(self) -> float:
        return (time.monotonic() - self._start) * 1000

    @contextmanager
    def stage(self, stage: str, documents_in: int) -> Iterator[StageSpan]:
        span = StageSpan(stage=stage, start_ms=self._now_ms(), documents_in=documents_in)
        try:
            yield span
        finally:
            span.end_ms = self._now_ms()
            self.spans.append(span)

    @property
    def elapsed_ms(self) -> float:
        return self._now_ms()

    def summary(self) -> list[dict]:
        return [
            {
                "stage": s.stage,
                "duration_ms": round(s.duration_ms, 2),
                "documents_in": s.documents_in,
                "documents_out": s.documents_out,
            }
            for s in self.spans
        ]
