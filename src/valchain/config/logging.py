"""structlog configuration for valchain.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON (log_json=True): structured JSON lines to stderr

valchain is a library, so only the ``valchain`` logger is touched: one
structlog-formatted handler is attached there and propagation to the root
logger is switched off.  Handlers and levels owned by the host application
are left alone.

valchain itself only logs at DEBUG (failed rules, suppressed chains), so
nothing is emitted unless *verbose* is set.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from valchain.config.models import LogConfig

LOGGER_NAME = "valchain"
HANDLER_NAME = "valchain.structlog"


def _build_formatter(log_json: bool, stream: TextIO) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route ``valchain.*`` records through a structlog formatter.

    Calling again replaces the handler installed by the previous call;
    any other handler on the ``valchain`` logger is kept.

    Args:
        verbose: Enable DEBUG-level output for ``valchain.*``. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Destination stream. Defaults to ``sys.stderr`` at call time.

    Returns:
        The installed handler.
    """
    target = sys.stderr if stream is None else stream
    handler = logging.StreamHandler(target)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(_build_formatter(log_json, target))

    logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return handler


def configure_from(config: LogConfig) -> logging.Handler:
    """Apply the ``[log]`` section of :class:`ValchainSettings`."""
    return configure_logging(verbose=config.verbose, log_json=config.log_json)
