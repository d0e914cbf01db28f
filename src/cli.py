"""
Command-line entry point for the pattern demos.

Runs the selected demos and prints one line per action record to stdout.
Logs go to stderr.
"""

import argparse
import sys
from typing import List, Optional

from src.core.config import get_config
from src.core.constants import DemoDefaults
from src.core.exceptions import GUIDemoError
from src.core.logging import setup_logging, get_logger, resolve_level
from src.products.base import ActionRecord
from src.services.demo_service import DemoService

logger = get_logger(__name__)

DEMOS = ["abstract-factory", "factory-method", "all"]


def log_level(value: str) -> str:
    """Argparse type for ``--log-level``: a registered level name."""
    try:
        resolve_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value.strip().upper()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gui-demo",
        description="Run the Abstract Factory and Factory Method GUI demos.",
    )
    parser.add_argument(
        "--demo",
        choices=DEMOS,
        default="all",
        help="Demo to run (default: all)",
    )
    parser.add_argument(
        "--log-level",
        type=log_level,
        default=None,
        help="Override the configured log level (e.g. DEBUG)",
    )
    parser.add_argument(
        "--log-format",
        choices=DemoDefaults.LOG_FORMATS,
        default=None,
        help="Override the configured log format",
    )
    return parser


def run_demo(service: DemoService, demo: str) -> List[ActionRecord]:
    """Run one demo by name."""
    if demo == "abstract-factory":
        return service.run_abstract_factory_demo()
    if demo == "factory-method":
        return service.run_factory_method_demo()
    return service.run_all()


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the demos."""
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
        setup_logging(
            level=args.log_level or config.log_level,
            format_type=args.log_format or config.log_format,
            log_file=config.log_file,
        )

        records = run_demo(DemoService(config=config), args.demo)
        for record in records:
            print(record)

        logger.info(f"Demo {args.demo!r} emitted {len(records)} record(s)")
        return 0

    except GUIDemoError as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
