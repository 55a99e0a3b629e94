"""Structured logging for cl-gallery.

Every module logs through ``get_logger(__name__)`` with snake_case event
names and keyword fields, e.g. ``logger.info("images_resolved", loaded=4)``.
Output goes to stderr so the CLI result printed on stdout stays parseable.
"""

import logging
import sys

import structlog

__all__ = ["configure_logging", "get_logger"]


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(verbose: bool = False, json_output: bool = False) -> None:
    """Route structlog through the standard library logger on stderr.

    Args:
        verbose: Log at DEBUG instead of INFO (probe outcomes, modal events).
        json_output: Render one JSON object per line instead of the
            colored console format.

    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.INFO,
        force=True,
    )

    processors = _shared_processors()
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # the console renderer formats exc_info itself
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger for a module (pass ``__name__``)."""
    return structlog.get_logger(name)
