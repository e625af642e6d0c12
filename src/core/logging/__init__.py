"""
structlog setup for the newsletter service.

Every event carries an ISO timestamp, its level and whatever is bound in
structlog's context variables (the request id set by the HTTP middleware).
Output is one JSON object per line when `LOG_JSON` is true, coloured console
lines otherwise.
"""

import logging

import structlog


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Route structlog through stdlib logging at `log_level`."""
    logging.basicConfig(format="%(message)s", level=log_level.upper())

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()

__all__ = ["configure_logging", "logger"]
