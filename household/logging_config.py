"""
Logging setup shared by Hearth entry points.

Lines go to stdout as ``<UTC timestamp> [<source>] <LEVEL> <message>``, e.g.
    2026-01-06T14:05:52Z [api] INFO Built relationship graph with 3 people

Levels are the stdlib ones plus TRACE (5), used for per-person payload dumps
while building relationship graphs:
    logger.log(TRACE, ...)
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVEL_NAMES = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


def parse_level(level: int | str | None) -> int:
    """Resolve a level name ("trace", "DEBUG", ...) or number; None means INFO."""
    if level is None or level == "":
        return logging.INFO
    if isinstance(level, int):
        return level
    name = level.upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level: {level}. Expected one of {', '.join(LEVEL_NAMES)}")
    return TRACE if name == "TRACE" else logging.getLevelName(name)


class ISO8601Formatter(logging.Formatter):
    """Stamps each record with its own creation time in UTC and a source tag."""

    def __init__(self, source: str = "hearth"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        line = f"{stamp} [{self.source}] {record.levelname} {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class HealthCheckFilter(logging.Filter):
    """Hides uvicorn access lines for GET /health unless DEBUG or lower is active."""

    def __init__(self, path: str = "/health"):
        super().__init__()
        self.path = path

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno <= logging.DEBUG:
            return True
        message = record.getMessage()
        return not (f"GET {self.path} " in message or f"GET {self.path}?" in message)


def configure_logging(source: str = "hearth", level: int | str | None = None) -> logging.Logger:
    """Route the root and uvicorn loggers through one stdout handler.

    Args:
        source: Tag shown in brackets, e.g. "api"
        level: Level name or number; defaults to INFO

    Returns:
        The root logger
    """
    resolved = parse_level(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(resolved)

    # uvicorn's own handlers would skip the health filter
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.addHandler(handler)
        server_logger.setLevel(resolved)
        server_logger.propagate = False

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
