"""structlog configuration for applications embedding eralabel.

The library itself only logs through ``logging.getLogger(__name__)``;
nothing here runs on import. Call :func:`configure_logging` (or
:func:`configure_from_settings`) once at application start-up.

Two output modes:
- Human (default): console output to stderr
- JSON (log_json=True): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from eralabel.config.settings import EraLabelSettings

PACKAGE_LOGGER = "eralabel"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _select_renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Replaces any existing root handlers, so repeated calls never stack.

    Args:
        verbose: DEBUG for the ``eralabel`` logger. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _select_renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def configure_from_settings(settings: EraLabelSettings) -> None:
    """Apply the ``verbose``/``log_json`` flags of *settings*."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
