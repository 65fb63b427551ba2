"""Best-effort field extraction from file names and decoded text."""

from __future__ import annotations

import hashlib
import re

from charset_normalizer import from_bytes

from xc3_verifier.config.constants import LOCATIONS, METHODOLOGIES
from xc3_verifier.models.domain import ExtractedFields

_VOLUME_RE = re.compile(
    r"(\d[\d,]*(?:\.\d+)?)\s*(?:tCO2e?|t\s+CO2e?|tonnes?\s+(?:of\s+)?CO2e?)",
    re.IGNORECASE,
)
_TIMEFRAME_RE = re.compile(r"\b((?:19|20)\d{2})\s*(?:-|–|to)\s*((?:19|20)\d{2})\b")
_LOCATION_LABEL_RE = re.compile(
    r"^\s*(?:project\s+)?location\s*[:=]\s*(.+?)\s*$", re.IGNORECASE | re.MULTILINE
)


def stable_index(value: str, modulo: int) -> int:
    """Map a string to [0, modulo) identically across processes."""
    digest = hashlib.sha256(value.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") % modulo


def extract_location(file_name: str) -> str:
    return LOCATIONS[stable_index(file_name, len(LOCATIONS))]


def extract_methodology(file_name: str) -> str:
    return METHODOLOGIES[stable_index(file_name, len(METHODOLOGIES))]


def decode_text(raw_bytes: bytes) -> str:
    best = from_bytes(raw_bytes).best()
    return str(best) if best is not None else ""


def _term_pattern(term: str) -> re.Pattern[str]:
    # Acronyms such as CAR or CDM only match in upper case
    flags = 0 if term.isupper() else re.IGNORECASE
    return re.compile(r"(?<!\w)" + re.escape(term) + r"(?!\w)", flags)


_METHODOLOGY_PATTERNS = [(term, _term_pattern(term)) for term in METHODOLOGIES]
_LOCATION_PATTERNS = [(term, _term_pattern(term)) for term in LOCATIONS]


def _first_match(text: str, patterns: list[tuple[str, re.Pattern[str]]]) -> str | None:
    hits = []
    for term, pattern in patterns:
        match = pattern.search(text)
        if match:
            hits.append((match.start(), term))
    return min(hits)[1] if hits else None


def extract_from_text(text: str) -> ExtractedFields:
    """Pull methodology, location, carbon volume and timeframe out of plain text."""
    fields = ExtractedFields()
    if not text:
        return fields

    fields.methodology = _first_match(text, _METHODOLOGY_PATTERNS)

    label = _LOCATION_LABEL_RE.search(text)
    fields.location = label.group(1) if label else _first_match(text, _LOCATION_PATTERNS)

    volume = _VOLUME_RE.search(text)
    if volume:
        fields.carbon_volume = float(volume.group(1).replace(",", ""))

    timeframe = _TIMEFRAME_RE.search(text)
    if timeframe:
        fields.timeframe = f"{timeframe.group(1)}-{timeframe.group(2)}"

    return fields


def merge_extracted(base: ExtractedFields, override: ExtractedFields) -> ExtractedFields:
    """Fields found in `override` win; the rest fall back to `base`."""
    return ExtractedFields(
        location=override.location or base.location,
        methodology=override.methodology or base.methodology,
        carbon_volume=(
            override.carbon_volume
            if override.carbon_volume is not None
            else base.carbon_volume
        ),
        timeframe=override.timeframe or base.timeframe,
    )
