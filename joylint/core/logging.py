"""Structured logging configuration — structlog + stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

_RENDERERS = {
    "console": structlog.dev.ConsoleRenderer,
    "json": structlog.processors.JSONRenderer,
}


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_config(level: str, pre_chain: list, renderer: structlog.types.Processor) -> dict:
    # stdout belongs to the package managers we spawn
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "joylint": {
                "()": structlog.stdlib.ProcessorFormatter,
                "foreign_pre_chain": pre_chain,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    renderer,
                ],
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "joylint",
            },
        },
        "root": {"handlers": ["stderr"], "level": level},
        "loggers": {"joylint": {"level": level}},
    }


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and stdlib logging.

    *level* wins over ``JOYLINT_LOG_LEVEL`` (default INFO).
    ``JOYLINT_LOG_FORMAT`` picks ``console`` (default) or ``json`` output.
    """
    log_level = (level or os.environ.get("JOYLINT_LOG_LEVEL", "INFO")).upper()
    log_format = os.environ.get("JOYLINT_LOG_FORMAT", "console").lower()
    renderer = _RENDERERS.get(log_format, structlog.dev.ConsoleRenderer)()

    pre_chain = _pre_chain()
    # Not cached: structlog.testing.capture_logs must be able to swap processors
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    logging.config.dictConfig(_stderr_config(log_level, pre_chain, renderer))
