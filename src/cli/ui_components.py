"""CLI output components (Rich).

Why separate components:
- Keeps command wiring free of presentation details.
- Results go to stdout and errors to stderr, in every command the same way.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.commands import serialize_error
from core.domain.errors import CliError


def print_output(console: Console, output: str) -> None:
    """Print a serialized command result verbatim.

    `soft_wrap` keeps Rich from breaking long JSON lines at the terminal width.
    """

    console.print(output, markup=False, highlight=False, soft_wrap=True)


def print_error(console: Console, error: CliError) -> None:
    console.print(serialize_error(error), markup=False, highlight=False, soft_wrap=True)


def configure_logging(level: int | str, console: Console) -> None:
    """Route all log records through a single Rich handler on `console`."""

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # httpx logs every request at INFO; only useful when debugging.
    logging.getLogger("httpx").setLevel(logging.DEBUG if root.level <= logging.DEBUG else logging.WARNING)
