"""Classify declared MIME types into document kinds with quality bands."""

from __future__ import annotations

from enum import Enum

from xc3_verifier.config.constants import SUPPORTED_MIME_TYPES
from xc3_verifier.exceptions import UnsupportedDocumentType


class DocumentKind(str, Enum):
    PDF = "pdf"
    WORD = "word"
    IMAGE = "image"
    TEXT = "text"
    UNSUPPORTED = "unsupported"


# (low, high) band for readability/completeness per kind
QUALITY_BANDS: dict[DocumentKind, tuple[float, float]] = {
    DocumentKind.WORD: (0.90, 1.00),
    DocumentKind.PDF: (0.80, 1.00),
    DocumentKind.TEXT: (0.75, 0.95),
    DocumentKind.IMAGE: (0.60, 0.90),
    DocumentKind.UNSUPPORTED: (0.40, 0.65),
}

# authenticity/consistency do not depend on the container format
INTEGRITY_BAND: tuple[float, float] = (0.70, 0.95)


def normalize_mime_type(mime_type: str) -> str:
    """Lower-case and drop parameters, e.g. 'Text/Plain; charset=utf-8' -> 'text/plain'."""
    return mime_type.split(";", 1)[0].strip().lower()


def classify_mime_type(mime_type: str) -> DocumentKind:
    mime = normalize_mime_type(mime_type)
    if mime not in SUPPORTED_MIME_TYPES:
        raise UnsupportedDocumentType(mime_type)
    if mime == "application/pdf":
        return DocumentKind.PDF
    if mime.startswith("image/"):
        return DocumentKind.IMAGE
    if mime.startswith("text/"):
        return DocumentKind.TEXT
    return DocumentKind.WORD
