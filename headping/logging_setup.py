"""Logging configuration for headping.

Diagnostics go to stderr so they never interleave with the report
lines on stdout. Verbosity follows the -v count unless the
HEADPING_LOG_LEVEL setting overrides it.
"""

import json
import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG", "TRACE")

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; message and traceback are escaped."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def level_for_verbosity(verbose: int) -> str:
    """Map a repeated -v count to a level name.

    0 -> WARNING, 1 -> INFO, 2 -> DEBUG, 3 or more -> TRACE.
    """
    if verbose < 0:
        verbose = 0
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(log_level: str, log_format: str = "text") -> None:
    """Configure application logging.

    Args:
        log_level: Level name (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )
    # httpx logs every request at INFO; only let it through at TRACE.
    transport_level = level if level <= TRACE else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(transport_level)
