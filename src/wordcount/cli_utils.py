"""
Shared CLI utilities for wordcount commands.

Provides the Rich consoles, status messages, input checks and the error panel
used by the counting and config commands.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.filesize import decimal
from rich.panel import Panel

console = Console()
err_console = Console(stderr=True)

# (substring of the error message, hint shown to the user)
ERROR_HINTS = [
    ("not valid UTF-8", "Convert the input to UTF-8 first, e.g. with iconv."),
    ("Unknown output format", "Use --format tsv, json or yaml."),
    ("Permission denied", "Check file permissions or write the output elsewhere."),
    ("No space left", "Free up disk space or write the output elsewhere."),
]
DEFAULT_HINT = "Check the input file and options. Use --help for usage information."


def info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {message}")


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    err_console.print(f"[red]✗[/red] {message}")


def describe_file(path: str) -> tuple[str, str]:
    """Return a Rich status string and human-readable size for ``path``."""
    p = Path(path)
    if not p.is_file():
        return "[red]✗ Not found[/red]", "-"
    return "[green]✓ Found[/green]", decimal(p.stat().st_size)


def validate_file_exists(path: str, description: str) -> None:
    """Exit with a "File Not Found" panel when ``path`` is not a file."""
    if Path(path).is_file():
        return
    console.print(
        Panel(
            f"[red]Error:[/red] {description} not found:\n  [yellow]{path}[/yellow]",
            title="File Not Found",
            border_style="red",
        )
    )
    raise typer.Exit(code=1)


def handle_error(e: Exception, context: str, hints: Optional[list] = None) -> None:
    """Print an error panel with a hint matched on the message, then exit 1.

    Args:
        e: The exception that occurred
        context: What was being done, e.g. "unit counting"
        hints: Extra (pattern, hint) pairs checked before the defaults
    """
    message = str(e)
    hint = next(
        (text for pattern, text in (hints or []) + ERROR_HINTS if pattern.lower() in message.lower()),
        DEFAULT_HINT,
    )
    console.print(
        Panel(
            f"[red]Error during {context}:[/red]\n  {message}\n\n[dim]Hint: {hint}[/dim]",
            title="Error",
            border_style="red",
        )
    )
    raise typer.Exit(code=1)
