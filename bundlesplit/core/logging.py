"""
Structured logging for bundlesplit.

Splitting passes emit structlog events. The module being split is bound as
context for the duration of a pass, so every event of that pass carries it
without repeating it at each call site.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from rich.console import Console
from rich.logging import RichHandler

from .config import Config, get_config


def setup_logging(config: Config | None = None) -> None:
    """Configure structured logging.

    Args:
        config: Configuration providing the log level. Defaults to the
            cached environment configuration.
    """
    if config is None:
        config = get_config()
    level = getattr(logging, config.log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
                tracebacks_show_locals=config.log_level == "DEBUG",
            )
        ],
    )

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    # Build systems capture stderr; they get one JSON object per event.
    if sys.stderr.isatty():
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured bound logger
    """
    return structlog.get_logger(name)


@contextmanager
def splitting_context(module_name: str, dimension: str) -> Iterator[None]:
    """Bind the module and dimension being split to every event in the block."""
    with structlog.contextvars.bound_contextvars(module=module_name, dimension=dimension):
        yield
