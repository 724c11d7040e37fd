import platform
from dataclasses import replace
from importlib.metadata import PackageNotFoundError, version as package_version
from typing import Optional
from typing_extensions import Annotated

import typer
from rich.table import Table

# Local Imports
from wordcount import __version__
from wordcount import config as wc_config
from wordcount.cli_utils import console, error, info as info_msg, success
from wordcount.counting.__main__ import app as counting_app

# Create a Typer app instance with a brief description.
app: typer.Typer = typer.Typer(
    help="wordcount: Count characters, words or lines in UTF-8 text.",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Show or edit the user configuration.", no_args_is_help=True)

# Register subcommands (command groups) with their respective Typer app objects.
app.add_typer(counting_app, name="count", help="Commands for counting unit frequencies.")
app.add_typer(config_app, name="config", help="Show or edit the user configuration.")

DEPENDENCIES = {
    "typer": "typer",
    "rich": "rich",
    "polars": "polars",
    "yaml": "PyYAML",
}


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"wordcount version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        )
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase verbosity (-v info, -vv debug).")
    ] = 0,
    log_file: Annotated[
        Optional[str],
        typer.Option("--log-file", help="Also write log messages to this file.")
    ] = None,
) -> None:
    """Configure logging before any subcommand runs."""
    config = wc_config.get_config()
    wc_config.setup_logging(
        verbosity=verbose,
        log_file=log_file or config.log_file,
        default_level=config.log_level,
    )


@app.command()
def info() -> None:
    """Show version, platform, dependency and configuration details."""
    table = Table(title="wordcount", show_header=False)
    table.add_column("Item", style="cyan")
    table.add_column("Value")
    table.add_row("wordcount Version", __version__)
    table.add_row("Python Version", platform.python_version())
    table.add_row("Platform", platform.platform())
    console.print(table)

    deps = Table(title="Dependencies", show_header=True)
    deps.add_column("Package", style="cyan")
    deps.add_column("Version")
    for name, dist in DEPENDENCIES.items():
        try:
            deps.add_row(name, package_version(dist))
        except PackageNotFoundError:
            deps.add_row(name, "[red]not installed[/red]")
    console.print(deps)

    path = wc_config.get_config_path()
    cfg = Table(title="Configuration", show_header=False)
    cfg.add_column("Item", style="cyan")
    cfg.add_column("Value")
    cfg.add_row("Config File", str(path))
    cfg.add_row("Exists", "yes" if path.exists() else "no (using defaults)")
    console.print(cfg)


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration."""
    config = wc_config.load_config()
    table = Table(title="Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in vars(config).items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)


@config_app.command("path")
def config_path() -> None:
    """Print the location of the configuration file."""
    typer.echo(str(wc_config.get_config_path()))


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Configuration key, e.g. mode")],
    value: Annotated[str, typer.Argument(help="New value, 'none' to unset optional keys")],
) -> None:
    """Set one configuration value and save the file."""
    try:
        parsed = wc_config.parse_config_value(key, value)
    except ValueError as e:
        error(str(e))
        raise typer.Exit(code=1)

    config = replace(wc_config.load_config(), **{key: parsed})
    path = wc_config.save_config(config)
    wc_config.reset_config()
    success(f"Set {key} = {parsed} in {path}")


@config_app.command("reset")
def config_reset() -> None:
    """Restore the default configuration."""
    path = wc_config.get_config_path()
    if path.exists():
        path.unlink()
        wc_config.reset_config()
        success(f"Removed {path}")
    else:
        info_msg("No configuration file, defaults already in use")


def main() -> None:
    """
    Entry point for the wordcount CLI.

    **Usage Examples:**
      - Count words in a file:
        ```
        wordcount count count-units book.txt
        ```
      - Count characters from standard input as JSON:
        ```
        cat book.txt | wordcount count count-units --mode char --format json
        ```

    Returns:
        None
    """
    app()


if __name__ == "__main__":
    main()
