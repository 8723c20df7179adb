"""structlog configuration for applications embedding assertmatch.

The engine logs through stdlib loggers under ``assertmatch``; calling
:func:`configure_logging` routes those records through structlog.
"""

import logging
import sys
from typing import Optional

import structlog

from .settings import get_settings


def configure_logging(
    *,
    verbose: Optional[bool] = None,
    log_json: Optional[bool] = None,
) -> None:
    """Configure structlog processors and the stderr handler.

    Args:
        verbose: Enable DEBUG output for ``assertmatch`` loggers. Defaults to
            ``MatchSettings.verbose``.
        log_json: Use the JSON renderer. Defaults to ``MatchSettings.log_json``.
    """
    settings = get_settings()
    if verbose is None:
        verbose = settings.verbose
    if log_json is None:
        log_json = settings.log_json

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    engine_logger = logging.getLogger('assertmatch')
    engine_logger.handlers = [h for h in engine_logger.handlers if isinstance(h, logging.NullHandler)]
    engine_logger.addHandler(handler)
    engine_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    engine_logger.propagate = False
