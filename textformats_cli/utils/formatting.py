"""Rich formatting utilities for CLI output."""

import json
from enum import Enum
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

# Shared console instances
console = Console()
error_console = Console(stderr=True)


class OutputFormat(str, Enum):
    """Output format options for CLI commands."""

    TABLE = "table"
    JSON = "json"


# Type annotation for the --format option
FormatOption = typer.Option(
    OutputFormat.TABLE,
    "--format",
    "-f",
    help="Output format: table (default) or json",
    case_sensitive=False,
)


def to_json(data: Any, indent: int = 2) -> str:
    """Convert data to formatted JSON string."""
    return json.dumps(data, indent=indent, ensure_ascii=False)


def print_json(data: Any):
    """Print data as formatted JSON, without rich markup or highlighting."""
    console.print(to_json(data), markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_raw(text: str):
    """Print converted content exactly, without rich markup or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def create_table(title: str, columns: list[tuple]) -> Table:
    """Create a Rich table with specified columns.

    Args:
        title: Table title
        columns: List of (column_name, style, no_wrap) tuples

    Returns:
        Configured Rich Table
    """
    table = Table(title=title)
    for col_data in columns:
        name = col_data[0]
        style = col_data[1] if len(col_data) > 1 else None
        no_wrap = col_data[2] if len(col_data) > 2 else False
        table.add_column(name, style=style, no_wrap=no_wrap)
    return table


def print_error(message: str):
    """Print an error message with consistent styling."""
    error_console.print(f"❌ {message}", style="bold red", markup=False)


def print_success(message: str):
    """Print a success message with consistent styling."""
    console.print(f"✅ {message}", style="bold green", markup=False)
