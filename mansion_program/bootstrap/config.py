"""
bootstrap/config.py - Application configuration

Configuration loading from JSON files, environment variables, and defaults.
Engine functions never read this module; applications load a config here
and pass config.scoring into the engine.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from ..validation.scoring import ScoringConfig

logger = logging.getLogger("bootstrap.config")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def scoring_from_env() -> ScoringConfig:
    """Scoring constants from MANSION_SCORING_* variables."""
    defaults = ScoringConfig()
    return ScoringConfig(
        base_score=int(os.getenv("MANSION_SCORING_BASE", str(defaults.base_score))),
        per_deviation_penalty=int(
            os.getenv("MANSION_SCORING_PER_DEVIATION", str(defaults.per_deviation_penalty))
        ),
        max_penalty=int(os.getenv("MANSION_SCORING_MAX_PENALTY", str(defaults.max_penalty))),
        floor_score=int(os.getenv("MANSION_SCORING_FLOOR", str(defaults.floor_score))),
        checklist_bonus_max=int(
            os.getenv("MANSION_SCORING_CHECKLIST_BONUS", str(defaults.checklist_bonus_max))
        ),
    )


def _scoring_overrides(scoring: ScoringConfig, data: Dict[str, Any]) -> ScoringConfig:
    """Apply known scoring keys from a config file, coerced to int."""
    known = {f.name for f in fields(ScoringConfig)}
    overrides = {}
    for key, value in data.items():
        if key not in known:
            continue
        try:
            overrides[key] = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Scoring setting {key} must be an integer, got {value!r}") from None
    return replace(scoring, **overrides)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("MANSION_LOG_LEVEL", "INFO"),
            format=os.getenv("MANSION_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("MANSION_LOG_FILE"),
            json_logs=os.getenv("MANSION_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class EngineConfig:
    """Root configuration for the mansion program engine."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("MANSION_ENVIRONMENT", "development"),
            debug=os.getenv("MANSION_DEBUG", "false").lower() == "true",
            scoring=scoring_from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "EngineConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Create config from dictionary, file values over environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        if "scoring" in data:
            config.scoring = _scoring_overrides(config.scoring, data["scoring"])

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "scoring": self.scoring.to_dict(),
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "format": self.logging.format,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[EngineConfig] = None


def load_config(filepath: str = None) -> EngineConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        EngineConfig instance
    """
    global _config

    if filepath:
        _config = EngineConfig.from_file(filepath)
    else:
        default_paths = [
            "./mansion-program.json",
            "./config/mansion-program.json",
            os.path.expanduser("~/.mansion-program/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = EngineConfig.from_file(path)
                return _config

        _config = EngineConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> EngineConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
