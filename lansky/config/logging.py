"""
Structured logging for the ledger service and CLI.

Development gets colored console lines; staging and production emit one
JSON object per event. Secrets that end up in event keyword context are
masked before rendering.
"""

import logging
import sys
import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from lansky.config.settings import get_settings

# Event keys whose values never reach the log output
REDACTED_KEYS = frozenset({"api_key", "token", "x_admin_token", "authorization"})

_QUIET_LOGGERS = ("httpx", "httpcore", "aiosqlite", "uvicorn.access", "multipart")


def redact_secrets(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    for key in REDACTED_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def add_service_context(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Tag every event with the workspace service name and environment."""
    settings = get_settings()
    event_dict.setdefault("service", settings.app_name)
    event_dict.setdefault("env", settings.environment)
    return event_dict


def _renderer(json_logs: bool) -> list[Processor]:
    if json_logs:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: log level name (default ``LOG_LEVEL``)
        json_logs: force JSON output (default: everywhere but development)
    """
    settings = get_settings()
    level = level or settings.log_level
    if json_logs is None:
        json_logs = settings.environment != "development"

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_secrets,
        add_service_context,
        *_renderer(json_logs),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # CLI output goes to stdout, so log lines go to stderr
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
