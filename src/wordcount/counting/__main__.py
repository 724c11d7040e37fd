import os
from typing import Optional
from typing_extensions import Annotated

import typer
from rich.panel import Panel
from rich.table import Table

# Local Imports
from wordcount.cli_utils import console, describe_file, handle_error, validate_file_exists
from wordcount.config import get_config
from wordcount.counting.count_units import CountMode, InvalidEncodingError
from wordcount.counting.run_counting import STDIN_NAME, run_count_units

app = typer.Typer(pretty_exceptions_short=False)


def _show_dry_run(
    in_file: Optional[str],
    mode: Optional[CountMode],
    out_file: Optional[str],
    output_format: Optional[str],
    top: Optional[int],
) -> None:
    config = get_config()
    console.print(Panel("[bold]Dry Run Mode[/bold]\n[dim]Nothing will be counted[/dim]", border_style="yellow"))

    table = Table(title="Input Validation", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    if in_file is None or in_file == STDIN_NAME:
        table.add_row("Input", "<stdin>")
    else:
        status, size = describe_file(in_file)
        table.add_row("Input", f"{in_file} {status} ({size})")

    if out_file is None:
        table.add_row("Output", "<stdout>")
    else:
        out_dir = os.path.dirname(os.path.abspath(out_file))
        writable = os.access(out_dir, os.W_OK)
        table.add_row("Output", f"{out_file} " + ("[green]writable[/green]" if writable else "[red]not writable[/red]"))

    table.add_row("Mode", mode.value if mode is not None else config.mode)
    table.add_row("Format", output_format or config.output_format)
    table.add_row("Top", str(top if top is not None else (config.top or "all")))
    console.print(table)


@app.command()
def count_units(
    in_file: Annotated[
        Optional[str],
        typer.Argument(help="Text file to count. Reads standard input if omitted or '-'")
    ] = None,
    mode: Annotated[
        Optional[CountMode],
        typer.Option(
            "--mode",
            "-m",
            case_sensitive=False,
            help=(
                "Unit to count: char, word or line. "
                "Defaults to the configured mode (word)"
            )
        )
    ] = None,
    out_file: Annotated[
        Optional[str],
        typer.Option(
            "--out_file",
            "--outfile",
            "--out",
            "-o",
            help=(
                "Output file for counts. "
                "Defaults to standard output"
            )
        )
    ] = None,
    output_format: Annotated[
        Optional[str],
        typer.Option(
            "--format",
            "-f",
            help=(
                "Output format: tsv, json or yaml. "
                "Defaults to the configured format (tsv)"
            )
        )
    ] = None,
    top: Annotated[
        Optional[int],
        typer.Option(
            "--top",
            "-n",
            min=1,
            help="Only report the N most frequent units",
        )
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Validate inputs and show settings without counting")
    ] = False,
) -> None:
    """
    Count characters, words or lines in a UTF-8 text file.

    This command calls :func:`run_count_units` with the given options. Counts
    are written as a two column table (unit, count) ordered from most to
    least frequent.

    Parameters
    ----------
    in_file : Optional[str]
        Path to the input text file, or '-' for standard input.
    mode : Optional[CountMode]
        Unit to count.
    out_file : Optional[str]
        Output file for counts. Defaults to standard output.
    output_format : Optional[str]
        tsv, json or yaml.
    top : Optional[int]
        Only keep the N most frequent units.
    dry_run : bool
        Show what would be done and exit.

    Examples
    --------
    >>> count_units("book.txt", mode=CountMode.WORD, out_file="words.tsv")
    """
    if dry_run:
        _show_dry_run(in_file, mode, out_file, output_format, top)
        return

    if in_file is not None and in_file != STDIN_NAME:
        validate_file_exists(in_file, "Input file")

    try:
        run_count_units(
            in_file=in_file,
            mode=mode,
            out_file=out_file,
            output_format=output_format,
            top=top,
        )
    except (InvalidEncodingError, OSError, ValueError) as e:
        handle_error(e, "unit counting")


if __name__ == "__main__":
    app()
