"""
bootstrap/entrypoints.py - Application entry points

Logging setup and the mansion-program CLI.
"""

from __future__ import annotations
from typing import Any, Optional
import argparse
import json
import logging
import sys

from pydantic import ValidationError

from ..benchmarks import PRESET_LIBRARY, parse_tier
from ..decisions import get_decisions_for_preset, summarize_personalization
from ..errors import MansionProgramError
from ..schemas import ValidationResultRecord, parse_checklist_state, parse_choices
from ..validation import ValidationEngine
from .config import DEFAULT_LOG_FORMAT, EngineConfig, load_config

logger = logging.getLogger("bootstrap.entrypoints")


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "INFO",
    log_file: str = None,
    json_format: bool = False,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        log_format: Record format when json_format is off
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(log_format)

    # Console handler; stdout carries command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)


def _load_json(path: str) -> Any:
    with open(path) as f:
        return json.load(f)


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


# =============================================================================
# COMMANDS
# =============================================================================

def _cmd_tiers(parsed, config: EngineConfig) -> int:
    _emit([
        {
            "id": preset.id,
            "name": preset.name,
            "target_area": preset.target_area,
            "space_count": len(preset.spaces),
            "relationship_count": len(preset.adjacency_matrix),
            "required_bridges": sorted(
                bridge_id for bridge_id, required in preset.bridge_requirements.items() if required
            ),
        }
        for preset in PRESET_LIBRARY.all_presets()
    ])
    return 0


def _cmd_decisions(parsed, config: EngineConfig) -> int:
    _emit([d.to_dict() for d in get_decisions_for_preset(parsed.tier)])
    return 0


def _cmd_validate(parsed, config: EngineConfig) -> int:
    if parsed.area is not None:
        preset = PRESET_LIBRARY.preset_for_area(parsed.area)
    else:
        preset = PRESET_LIBRARY.get(parsed.tier)

    choices = parse_choices(_load_json(parsed.choices)) if parsed.choices else []
    checklist = parse_checklist_state(_load_json(parsed.checklist)) if parsed.checklist else None
    decisions = get_decisions_for_preset(preset.id)

    engine = ValidationEngine(scoring=config.scoring)
    result = engine.run(preset, choices, decisions, checklist_state=checklist)

    payload = result.to_dict()
    payload["personalization"] = summarize_personalization(choices, decisions).to_dict()
    if parsed.matrix:
        payload["proposed_matrix"] = result.proposed_matrix.to_dict()
    _emit(payload)
    return 0


def _cmd_audit(parsed, config: EngineConfig) -> int:
    record = ValidationResultRecord.model_validate(_load_json(parsed.result))
    audit = record.audit()
    _emit(audit)
    return 0 if audit["consistent"] else 1


def _tier_arg(value: str) -> str:
    try:
        return parse_tier(value).value
    except MansionProgramError as e:
        raise argparse.ArgumentTypeError(e.message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Adjacency matrix personalization and validation",
        prog="mansion-program",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides configuration)",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )

    commands = parser.add_subparsers(dest="command", required=True)

    tiers = commands.add_parser("tiers", help="List benchmark tiers")
    tiers.set_defaults(handler=_cmd_tiers)

    decisions = commands.add_parser("decisions", help="List decisions for a tier")
    decisions.add_argument("--tier", type=_tier_arg, required=True, help="Tier id (5k, 10k, 15k, 20k)")
    decisions.set_defaults(handler=_cmd_decisions)

    validate = commands.add_parser("validate", help="Validate a choice set")
    target = validate.add_mutually_exclusive_group(required=True)
    target.add_argument("--area", type=float, help="Target floor area in square feet")
    target.add_argument("--tier", type=_tier_arg, help="Tier id (5k, 10k, 15k, 20k)")
    validate.add_argument("--choices", help="JSON file with recorded choices", default=None)
    validate.add_argument("--checklist", help="JSON file with checklist state per module", default=None)
    validate.add_argument("--matrix", action="store_true", help="Include the proposed matrix")
    validate.set_defaults(handler=_cmd_validate)

    audit = commands.add_parser("audit", help="Re-derive the gate of a stored result")
    audit.add_argument("result", help="JSON file with a stored validation result")
    audit.set_defaults(handler=_cmd_audit)

    return parser


def cli_main(args: Optional[list] = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code: 0 success, 1 audit mismatch, 2 rejected input
    """
    parsed = build_parser().parse_args(args)

    try:
        config = load_config(parsed.config) if parsed.config else EngineConfig.from_env()
    except (OSError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if parsed.verbose:
        log_level = "DEBUG"
    else:
        log_level = parsed.log_level or config.logging.level
    setup_logging(
        level=log_level,
        log_file=parsed.log_file or config.logging.log_file,
        json_format=config.logging.json_logs,
        log_format=config.logging.format,
    )

    try:
        return parsed.handler(parsed, config)
    except MansionProgramError as e:
        logger.error(f"Rejected input: {e}")
        print(json.dumps(e.to_dict(), indent=2, default=str), file=sys.stderr)
        return 2
    except ValidationError as e:
        logger.error(f"Malformed payload: {e}")
        return 2
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Cannot read input: {e}")
        return 2


def main():
    """Main entry point for the package."""
    sys.exit(cli_main(sys.argv[1:]))


if __name__ == "__main__":
    main()
