import logging
import sys

import structlog


def configure_logging(level: str = "info", json: bool = False) -> None:
    """Route structlog output to stderr, filtered at `level`."""
    renderer = structlog.processors.JSONRenderer(indent=2) if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
