"""Logging for bfn: stdlib loggers rendered by structlog.

Modules log with ``logging.getLogger(__name__)`` (or ``structlog.get_logger``);
both reach one stderr handler whose :class:`structlog.stdlib.ProcessorFormatter`
renders either a console line or, with ``--log-json``, one JSON object.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "bfn"
HANDLER_NAME = "bfn-stderr"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging through structlog on stderr.

    Only ``bfn.*`` loggers drop to DEBUG with *verbose*; everything else
    stays at WARNING. Calling this again swaps the bfn handler rather than
    adding a second one.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    for stale in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(stale)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
