"""YAML config loading and validation."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_DATABASE_URL = "sqlite:///data/peal_mentors.db"


@dataclass
class ScoringWeights:
    skill: float = 10
    interest: float = 5
    location: float = 8
    experience: float = 3  # per year
    experience_cap: float = 30
    availability: float = 15  # bonus for "available" mentors
    remote: float = 5


@dataclass
class MatchingConfig:
    default_limit: int = 10
    recommendation_limit: int = 5
    weights: ScoringWeights = field(default_factory=ScoringWeights)


@dataclass
class AppConfig:
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    database_url: str = DEFAULT_DATABASE_URL
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from a YAML file, filling in defaults."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and adjust it."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    matching_raw = raw.get("matching", {}) or {}
    weights_raw = matching_raw.get("weights", {}) or {}
    defaults = ScoringWeights()
    config.matching = MatchingConfig(
        default_limit=matching_raw.get("default_limit", 10),
        recommendation_limit=matching_raw.get("recommendation_limit", 5),
        weights=ScoringWeights(
            skill=weights_raw.get("skill", defaults.skill),
            interest=weights_raw.get("interest", defaults.interest),
            location=weights_raw.get("location", defaults.location),
            experience=weights_raw.get("experience", defaults.experience),
            experience_cap=weights_raw.get("experience_cap", defaults.experience_cap),
            availability=weights_raw.get("availability", defaults.availability),
            remote=weights_raw.get("remote", defaults.remote),
        ),
    )

    # DATABASE_URL env var takes precedence
    config.database_url = os.environ.get(
        "DATABASE_URL", raw.get("database_url", DEFAULT_DATABASE_URL)
    )
    config.log_dir = raw.get("log_dir", "logs")
    config.log_level = str(raw.get("log_level", "INFO"))

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if config.matching.default_limit < 1:
        warnings.append("matching.default_limit must be positive - matches will be empty")

    if config.matching.recommendation_limit < 1:
        warnings.append("matching.recommendation_limit must be positive - recommendations will be empty")

    weights = config.matching.weights
    for name in ("skill", "interest", "location", "experience", "experience_cap", "availability", "remote"):
        if getattr(weights, name) < 0:
            warnings.append(f"Negative weight for {name} will penalize matching mentors")

    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        warnings.append(f"Unknown log_level {config.log_level!r} - using INFO")

    if not config.database_url:
        warnings.append("No database_url configured - falling back to local SQLite")

    return warnings
