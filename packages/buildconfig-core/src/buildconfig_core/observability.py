"""Structured logging setup for buildconfig.

Library modules only call structlog.get_logger(__name__). Applications
(the CLI) call configure_logging() once to choose level and renderer.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(verbose: bool = False, *, json_output: bool = False) -> None:
    """Configure structlog for console output on stderr.

    Args:
        verbose: Emit DEBUG events (step creation, dependency registration).
            Otherwise only WARNING and above are shown.
        json_output: Render events as JSON lines instead of console text.

    Example:
        >>> configure_logging(verbose=True)
        >>> structlog.get_logger("demo").debug("generate_step_created", step="generateBuildConfig")
    """
    level = logging.DEBUG if verbose else logging.WARNING
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # Stdlib loggers (the source generator) follow the same level
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
