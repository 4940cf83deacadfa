import logging
from collections.abc import MutableMapping
from typing import Any

import structlog

from gatekeeper.utils import mask_token

# Event keys that may carry a session token
TOKEN_KEYS = ("token", "auth_token")


def mask_session_tokens(_: Any, __: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Replace session tokens in the event with a short prefix."""
    for key in TOKEN_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = mask_token(value)
    return event_dict


def setup_logging(debug: bool, service: str) -> None:
    """Configure structlog on top of stdlib logging for one of the services.

    Every event carries ``service`` (``basic`` or ``session``) so the two
    servers can share a log sink.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
    )

    # pymongo logs every heartbeat and command at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        mask_session_tokens,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if not debug else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=service)
