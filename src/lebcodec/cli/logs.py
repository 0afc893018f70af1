"""Logging setup for the lebcodec CLI.

The library never configures logging; only the command-line entry point does,
so importing lebcodec has no effect on a host application's output.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


def setup_logging(*, debug: bool = False, json: bool = False, stream: TextIO | None = None) -> None:
    """Configure structlog to write to stderr.

    Args:
        debug: Emit debug events (default: warnings and above)
        json: Render one JSON object per line instead of key=value text
        stream: Output stream (default: sys.stderr)
    """
    renderer: Any
    if json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
