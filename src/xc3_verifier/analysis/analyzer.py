"""Per-document analysis: classify -> score -> extract -> quality profile."""

from __future__ import annotations

import asyncio
import time
from concurrent.futures import Future, ThreadPoolExecutor

from xc3_verifier.analysis.extraction import decode_text, extract_from_text, merge_extracted
from xc3_verifier.analysis.mime import DocumentKind, classify_mime_type
from xc3_verifier.config.settings import Settings
from xc3_verifier.exceptions import (
    AnalysisTimeout,
    EmptyDocumentError,
    UnsupportedDocumentType,
)
from xc3_verifier.models.domain import AnalysisBatch, DocumentInput, DocumentQualityProfile
from xc3_verifier.observability.logger import get_logger
from xc3_verifier.protocols.scorer import DocumentScorer

logger = get_logger("analyzer")


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class DocumentAnalyzer:
    def __init__(self, scorer: DocumentScorer, settings: Settings) -> None:
        self._scorer = scorer
        self._concurrency = max(1, settings.analysis_concurrency)
        self._timeout_s = settings.analysis_timeout_s
        self._latency_s = settings.simulated_latency_s

    def analyze(
        self, raw_bytes: bytes, file_name: str, declared_mime_type: str
    ) -> DocumentQualityProfile:
        if not raw_bytes:
            raise EmptyDocumentError(f"Document '{file_name}' is empty")

        supported = True
        try:
            kind = classify_mime_type(declared_mime_type)
        except UnsupportedDocumentType as e:
            logger.warning("unsupported_document_type", file_name=file_name, mime_type=e.mime_type)
            kind = DocumentKind.UNSUPPORTED
            supported = False

        scores, extracted = self._scorer.score(raw_bytes, file_name, kind)
        if kind is DocumentKind.TEXT:
            extracted = merge_extracted(extracted, extract_from_text(decode_text(raw_bytes)))

        profile = DocumentQualityProfile(
            readability=_clamp(scores.readability),
            completeness=_clamp(scores.completeness),
            authenticity=_clamp(scores.authenticity),
            consistency=_clamp(scores.consistency),
            extracted=extracted,
            file_name=file_name,
            mime_type=declared_mime_type,
            supported=supported,
        )
        logger.info(
            "document_analyzed",
            file_name=file_name,
            kind=kind.value,
            size=len(raw_bytes),
            readability=round(profile.readability, 4),
            completeness=round(profile.completeness, 4),
            authenticity=round(profile.authenticity, 4),
            consistency=round(profile.consistency, 4),
        )
        return profile

    def _analyze_input(self, document: DocumentInput) -> DocumentQualityProfile:
        # Runs on a worker thread; simulated backend latency holds the slot too
        if self._latency_s > 0:
            time.sleep(self._latency_s)
        return self.analyze(document.raw_bytes, document.file_name, document.declared_mime_type)

    async def analyze_document(self, document: DocumentInput) -> DocumentQualityProfile:
        return await asyncio.to_thread(self._analyze_input, document)

    async def analyze_batch(self, documents: list[DocumentInput]) -> AnalysisBatch:
        """Analyse documents concurrently. Failed documents are excluded and reported as issues.

        A concurrency slot is held until its worker thread returns, even when the
        document has already timed out, so at most ``analysis_concurrency``
        scorer calls run at once.
        """
        loop = asyncio.get_running_loop()
        semaphore = asyncio.Semaphore(self._concurrency)
        executor = ThreadPoolExecutor(
            max_workers=self._concurrency, thread_name_prefix="xc3-analysis"
        )

        def release_slot(_: Future) -> None:
            if not loop.is_closed():
                loop.call_soon_threadsafe(semaphore.release)

        async def run_one(number: int, document: DocumentInput):
            await semaphore.acquire()
            work = executor.submit(self._analyze_input, document)
            work.add_done_callback(release_slot)
            try:
                return await self._await_with_deadline(work, document), None
            except AnalysisTimeout as e:
                logger.warning("analysis_timeout", file_name=e.file_name, timeout_s=e.timeout_s)
                return None, (
                    f"Document {number} ({document.file_name}) could not be analyzed in time"
                )
            except EmptyDocumentError:
                logger.warning("empty_document", file_name=document.file_name)
                return None, f"Document {number} ({document.file_name}) is empty and was skipped"
            except Exception as e:
                logger.warning(
                    "analysis_failed",
                    file_name=document.file_name,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                return None, f"Document {number} ({document.file_name}) could not be analyzed"

        try:
            outcomes = await asyncio.gather(
                *(run_one(i, doc) for i, doc in enumerate(documents, start=1))
            )
        finally:
            executor.shutdown(wait=False)

        profiles = [profile for profile, _ in outcomes if profile is not None]
        issues = [issue for _, issue in outcomes if issue is not None]
        return AnalysisBatch(profiles=profiles, issues=issues)

    async def _await_with_deadline(
        self, work: Future, document: DocumentInput
    ) -> DocumentQualityProfile:
        try:
            return await asyncio.wait_for(asyncio.wrap_future(work), self._timeout_s)
        except asyncio.TimeoutError:
            raise AnalysisTimeout(document.file_name, self._timeout_s) from None
