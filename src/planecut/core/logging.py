"""
Logging setup for planecut.

Two kinds of records reach the same handlers: structlog events from the cut
driver (``cut_complete``, ``cut_skipped``) and %-style stdlib records from the
OBJ and plane-descriptor readers. Both are rendered by one structlog renderer,
JSON lines with ``--json-logs`` and console lines otherwise.
"""

import logging
import sys
from typing import Optional

import structlog


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Route structlog and stdlib records to stderr and, optionally, a log file.

    Called by the ``planecut`` group before any command runs, with values
    from the ``logging`` config section or the command-line overrides.

    Args:
        level: Minimum level name; unknown names fall back to INFO.
        json_output: Render JSON lines instead of console lines.
        log_file: Extra file handler target.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Standard library logging configuration (for the I/O modules and third-party libs)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=handlers,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Route stdlib records through the same renderer
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structlog logger for key/value events such as ``cut_complete``."""
    return structlog.get_logger(name)
