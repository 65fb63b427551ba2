"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Model identity
    model_name: str = "XC3 Local Carbon Verifier v1.0"

    # Document analysis
    scorer_seed: int | None = None  # None = fresh entropy per document
    analysis_concurrency: int = 8
    analysis_timeout_s: float = 30.0
    simulated_latency_s: float = 0.0
    max_documents: int = 50

    # Feedback tiers (lower bound of each band)
    tier_excellent_threshold: float = 0.85
    tier_good_threshold: float = 0.75
    tier_acceptable_threshold: float = 0.65

    # Confidence policy: min(cap, base + step * document_count)
    conf_base: float = 0.70
    conf_step: float = 0.05
    conf_cap: float = 0.95

    # Document-count feedback
    min_recommended_documents: int = 3
    portfolio_documents: int = 5

    # Fraud detection
    fraud_medium_threshold: float = 0.3
    fraud_high_threshold: float = 0.6
    fraud_min_documents: int = 2
    fraud_high_volume_tco2e: float = 100_000
    fraud_authenticity_floor: float = 0.6
    fraud_consistency_floor: float = 0.5
    fraud_penalty_documentation: float = 0.20
    fraud_penalty_volume: float = 0.15
    fraud_penalty_authenticity: float = 0.25
    fraud_penalty_consistency: float = 0.30

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {
        "env_file": ".env",
        "env_prefix": "XC3_",
        "protected_namespaces": ("settings_",),
    }
