"""
bootstrap/ - Configuration, logging and CLI entry points.
"""

from .config import (
    LoggingConfig,
    EngineConfig,
    scoring_from_env,
    load_config,
    get_config,
)
from .entrypoints import (
    JSONFormatter,
    setup_logging,
    build_parser,
    cli_main,
)

__all__ = [
    # Config
    "LoggingConfig",
    "EngineConfig",
    "scoring_from_env",
    "load_config",
    "get_config",

    # Entry points
    "JSONFormatter",
    "setup_logging",
    "build_parser",
    "cli_main",
]
