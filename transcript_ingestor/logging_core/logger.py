# transcript_ingestor/logging_core/logger.py
"""
Centralized structured logging for the transcript ingestor.

Every record is emitted as one JSON line with:
- timestamp (ISO, UTC)
- level
- message
- run_id (bound per pipeline invocation)
- stage_name, event_type, metadata (optional, filled by caller)

Logs go to stderr; stdout is reserved for command output.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, MutableMapping, Optional, Tuple
from uuid import UUID


LOGGER_NAME = "transcript_ingestor"

_configured = False


class JSONFormatter(logging.Formatter):
    """Formatter that outputs structured JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
        }

        if hasattr(record, "run_id"):
            log_record["run_id"] = str(record.run_id)

        for field in ("stage_name", "event_type", "metadata"):
            value = getattr(record, field, None)
            if value is not None:
                log_record[field] = value

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class RunLogger(logging.LoggerAdapter):
    """Adapter binding run_id to every record, merged with per-call extra."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach the JSON handler to the package logger (once per process).

    Calling again only updates the level.
    """
    global _configured  # pylint: disable=global-statement

    logger = logging.getLogger(LOGGER_NAME)
    if level:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    elif not _configured:
        logger.setLevel(logging.INFO)

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    return logger


def get_logger(run_id: UUID) -> RunLogger:
    """Return a logger bound to the given pipeline run."""
    return RunLogger(configure_logging(), {"run_id": str(run_id)})


def log_event(
    logger: logging.LoggerAdapter | logging.Logger,
    level: int,
    message: str,
    *,
    stage_name: str | None = None,
    event_type: str,
    metadata: Dict[str, Any] | None = None,
) -> None:
    """Convenience wrapper for structured logging."""
    extra: Dict[str, Any] = {"event_type": event_type}
    if stage_name:
        extra["stage_name"] = stage_name
    if metadata:
        extra["metadata"] = metadata

    logger.log(level, message, extra=extra)


# High-Level Intent
# One logging facility for the whole package. Every pipeline invocation gets a
# run_id, and every line it emits carries that id, so a single request can be
# traced end to end in a log stream.

# Data Flow
# Entry point calls configure_logging(level) once.
# Runner calls get_logger(run_id) per invocation and passes it to log_event.

# Edge Cases & Failure Scenarios
# Metadata values that are not JSON-serializable are rendered with str().
# configure_logging called repeatedly → handler attached once, level updated.
