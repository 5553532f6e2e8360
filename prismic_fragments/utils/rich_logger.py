"""
Rich logging for the command line.

Library modules only create loggers; handlers are installed here, on the
package logger, when the CLI starts.
"""

import logging
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

PACKAGE_LOGGER = "prismic_fragments"


def setup_logging(level: str = "INFO", console: Optional[Console] = None) -> logging.Logger:
    """
    Setup logging for the package.

    Args:
        level: Log level name
        console: Console to log to (defaults to stderr)

    Returns:
        The configured package logger
    """
    console = console or Console(stderr=True)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()
    logger.addHandler(rich_handler)
    logger.debug(f"Rich logging initialized at {level} level")
    return logger


def print_table(console: Console, title: str, rows: Dict[str, Any]) -> None:
    """
    Display a mapping in a two-column rich table.

    Args:
        console: Target console
        title: Table title
        rows: Property name to value
    """
    table = Table(title=escape(title))
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="magenta")

    for key, value in rows.items():
        table.add_row(escape(str(key)), escape(str(value)))

    console.print(table)
