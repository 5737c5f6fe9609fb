"""
Centralized logging configuration using structlog
"""

import logging
import re
import secrets
import sys
from contextvars import ContextVar
from typing import Any

import structlog

# Context variables for request tracking
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
user_id_ctx: ContextVar[str | None] = ContextVar("user_id", default=None)

# Caller-supplied request ids are echoed into logs and headers
_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9._-]{1,64}")


def add_request_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict:
    """structlog processor: stamp the current request and user on every event."""
    _ = logger, method_name

    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id

    user_id = user_id_ctx.get()
    if user_id:
        event_dict["user_id"] = user_id

    return event_dict


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        debug: Console renderer with colors when True, JSON lines otherwise.
        level: Log level name; DEBUG in debug mode and INFO otherwise when omitted.
    """
    if level:
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_context,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def start_request_context(incoming_id: str | None = None) -> str:
    """Begin logging context for one HTTP request and return its request id.

    A well-formed id sent by the client (``X-Request-ID``) is reused so log
    lines can be correlated across services; anything else gets a fresh id.
    """
    if incoming_id and _REQUEST_ID_RE.fullmatch(incoming_id):
        request_id = incoming_id
    else:
        request_id = secrets.token_urlsafe(12)

    request_id_ctx.set(request_id)
    user_id_ctx.set(None)
    return request_id


def bind_user_id(user_id: str | None) -> None:
    """Attach the resolved user to subsequent log lines of this request."""
    user_id_ctx.set(user_id)


def clear_request_context() -> None:
    request_id_ctx.set(None)
    user_id_ctx.set(None)
