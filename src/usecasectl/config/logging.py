"""Log routing for the usecasectl CLI.

The core never configures logging; it only emits records through
``logging.getLogger(__name__)``. The CLI calls :func:`configure_logging`
once per invocation so those records reach stderr, never stdout, where
command results (and ``--json`` payloads) are written.

Two renderings share one processor chain:

- console lines (colored on a TTY) by default
- one JSON object per record with ``--log-json``

Only the ``usecasectl`` namespace is raised to DEBUG by ``--verbose``;
third-party loggers stay at WARNING.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAMESPACE = "usecasectl"


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied to structlog events and stdlib records alike."""
    return [
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


def _stderr_handler(formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route usecasectl records to stderr through structlog.

    Calling it again replaces the previous root handler instead of adding
    a second one.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _select_renderer(log_json),
        ],
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(formatter)]
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.DEBUG if verbose else logging.WARNING)
