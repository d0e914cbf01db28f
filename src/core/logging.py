"""
Centralized logging configuration for the GUI pattern demos.

Logs go to stderr so that stdout carries only action lines. Product
operations log their action record with ``platform`` and ``action``
attributes, which the JSON formatter lifts into top-level fields.
"""

import logging
import sys
from typing import Optional, Dict, Any
from pathlib import Path
import json
from datetime import datetime, timezone

HUMAN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HUMAN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ACTION_FIELDS = ("platform", "action")


class StructuredFormatter(logging.Formatter):
    """JSON formatter that exposes action record fields."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in ACTION_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def resolve_level(level: str) -> int:
    """
    Resolve a level name such as ``debug`` to its numeric value.

    Raises:
        ValueError: If the name is not a registered logging level
    """
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return numeric_level


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type.lower() == "json":
        return StructuredFormatter()
    return logging.Formatter(fmt=HUMAN_FORMAT, datefmt=HUMAN_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    format_type: str = "human",
    log_file: Optional[Path] = None,
) -> None:
    """
    Set up logging configuration for the demos.

    Handlers installed by a previous call are closed and replaced.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "human" for human-readable, "json" for structured
        log_file: Optional path to log file. If None, logs only to stderr

    Raises:
        ValueError: If the level is not a registered logging level
    """
    numeric_level = resolve_level(level)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(numeric_level)

    formatter = _build_formatter(format_type)
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (typically ``__name__``)."""
    return logging.getLogger(name)
