from __future__ import annotations

import logging
import sys

import structlog


LOGGER_NAME = "portfolio.web"


def configure_logging(log_level: str) -> None:
    level = log_level.upper()
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger(LOGGER_NAME).setLevel(level)
    # Lines go through stdlib logging so uvicorn and alembic share the same handlers.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        cache_logger_on_first_use=True,
    )


def bind_request(path: str, method: str) -> None:
    """Start a fresh log context for one request; every line it emits carries path and method."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(path=path, method=method)


logger = structlog.get_logger(LOGGER_NAME)
