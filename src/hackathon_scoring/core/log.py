"""structlog + rich logging setup for command line entry points."""

from __future__ import annotations

import logging

import structlog
from rich.console import Console
from rich.logging import RichHandler


def configure_logging(console: Console, verbose: bool = False) -> None:
    """Route structlog events through stdlib logging into a RichHandler.

    Library modules only call structlog.get_logger(); nothing is printed until
    an entry point calls this. Debug events (leaderboard recomputes, report
    writes) show only with verbose.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=verbose, show_path=verbose)],
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
