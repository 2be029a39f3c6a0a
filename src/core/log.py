"""Logging setup.

Modules log through `logging.getLogger(__name__)`. The CLI calls
`setup_logging` once at startup, which sends records to stderr through Rich so
they do not mix with table or JSON output on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Configure the root logger and return it.

    Calling it again replaces the previous handler, so the level can be
    raised after settings are loaded (e.g. by `--verbose`).
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)
    return root_logger
