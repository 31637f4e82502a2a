"""
structlog + stdlib logging setup for the import job and the browser app.

Modules log through `structlog.get_logger(__name__)`; this wires those loggers
(and any third-party stdlib logging, e.g. SQLAlchemy) to a single stream
handler rendering either human-readable console lines or JSON.
"""

import logging
import sys

import structlog

from .config import log_level, log_format


def setup_logging(level=None, fmt=None, stream=None):
    level_name = (level or log_level()).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    fmt = (fmt or log_format()).lower()

    logging.captureWarnings(True)

    if fmt == 'json':
        renderer = structlog.processors.JSONRenderer()
        exc_processors = [structlog.processors.format_exc_info]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
        exc_processors = []

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.processors.TimeStamper(fmt='iso', utc=True),
            structlog.processors.StackInfoRenderer(),
            *exc_processors,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
