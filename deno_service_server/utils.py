"""Shared utility functions for the Deno Service Server.

Provides the stderr Rich console, logging setup and JSON serialisation used
by the generators.  Stdout is reserved for the MCP stdio transport, so every
human-facing line goes to stderr.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(level: str = "INFO") -> None:
    """Route the root logger through a Rich handler bound to stderr.

    Unknown level names fall back to ``INFO``.  Calling it again replaces the
    previously installed Rich handler and leaves any other handlers alone.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)

    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* as 2-space indented JSON.

    Non-ASCII characters are kept as-is so generated files stay readable.
    """
    return json.dumps(data, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()
