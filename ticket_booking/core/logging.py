"""
Structured logging configuration using structlog.
Outputs JSON in production, pretty-printed in development.

Log lines go to stderr so they never interleave with the menus on stdout.
Each console session binds a short session id (and the admin's name once
logged in) so every event can be traced back to the session that caused it.
"""

import logging
import sys
import uuid

import structlog
from ticket_booking.core.config import Settings, get_settings


def _renderer(settings: Settings):
    if settings.ENVIRONMENT == "production":
        # JSON output for production (machine-parseable)
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging() -> None:
    settings = get_settings()

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.ENVIRONMENT == "production":
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(settings),
        ]
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    # setup_logging may run more than once (tests); keep a single handler
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING))


def start_session() -> str:
    """Bind a fresh session id for all log calls that follow."""
    session_id = str(uuid.uuid4())[:8]
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(session_id=session_id, role="user")
    return session_id


def bind_admin(username: str) -> None:
    structlog.contextvars.bind_contextvars(role="admin", admin=username)


def unbind_admin() -> None:
    structlog.contextvars.unbind_contextvars("admin")
    structlog.contextvars.bind_contextvars(role="user")


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
