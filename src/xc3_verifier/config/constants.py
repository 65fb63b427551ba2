"""Fixed scoring constants and vocabularies."""

from __future__ import annotations

# Aggregate weights
DOCUMENT_WEIGHT = 0.6
METADATA_WEIGHT = 0.2
CROSS_REFERENCE_WEIGHT = 0.2

# Metadata scoring
METADATA_BASE_SCORE = 0.70
METADATA_CHECK_BONUS = 0.05
MIN_NAME_LENGTH = 5
MIN_LOCATION_LENGTH = 3
MIN_DESCRIPTION_LENGTH = 50
MIN_VINTAGE_YEAR = 2020

# Cross-reference scoring
CROSS_REFERENCE_BASE_SCORE = 0.80
CROSS_REFERENCE_MATCH_BONUS = 0.02

# Feedback sub-score limits
LOW_READABILITY = 0.7
LOW_COMPLETENESS = 0.7
LOW_AUTHENTICITY = 0.7
LOW_CONSISTENCY = 0.7
HIGH_AUTHENTICITY = 0.8
THIN_METADATA = 0.8

# Simulated extraction
DEFAULT_TIMEFRAME = "2023-2024"
MIN_SIMULATED_VOLUME = 1_000
MAX_SIMULATED_VOLUME = 51_000

SUPPORTED_MIME_TYPES = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "image/jpeg",
        "image/png",
        "text/plain",
        "text/csv",
    }
)

LOCATIONS = (
    "Brazil, Amazon Basin",
    "California, USA",
    "British Columbia, Canada",
    "Queensland, Australia",
    "Rajasthan, India",
    "Acre, Brazil",
    "Costa Rica",
    "Philippines",
    "Indonesia",
    "Kenya",
)

METHODOLOGIES = (
    "REDD+",
    "CDM",
    "VCS",
    "Gold Standard",
    "CAR",
    "ACR",
)
