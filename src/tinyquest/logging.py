"""Logging configuration for tinyquest.

The console game writes narration to stdout, so log lines go to stderr
unless a log file is given.
"""

import hashlib
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import structlog

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def hash_fingerprint_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Replace client certificate fingerprints with a short hash."""
    fp = event_dict.pop("fingerprint", None)
    if fp:
        event_dict["fingerprint_hash"] = hashlib.sha256(fp.encode()).hexdigest()[:12]
    return event_dict


def configure_logging(
    log_level: str = "WARNING",
    log_file: Path | None = None,
    json_logs: bool = False,
    hash_fingerprints: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure structured logging for the application."""
    if log_file:
        output_stream = open(log_file, "a")
    else:
        output_stream = stream or sys.stderr

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
    ]
    if hash_fingerprints:
        processors.append(hash_fingerprint_processor)

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=output_stream.isatty())
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            _LEVELS.get(log_level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
