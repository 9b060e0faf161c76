"""rangepass CLI entry point."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rangepass.application.generator import PasswordGenerator
from rangepass.application.presets import PRESET_PREFIX, PRESETS
from rangepass.config.settings import GeneratorSettings
from rangepass.core.domain.errors import RangepassError

load_dotenv()

app = typer.Typer(
    name="rangepass",
    help="rangepass - random passwords from character-range specifications",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    rich_markup_mode="rich",
)
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config", help="Configuration management")

console = Console()
err_console = Console(stderr=True)


def setup_logging(debug: bool = False, level_name: str = "WARNING") -> None:
    """Configure structlog for console or JSON output."""
    if debug or os.getenv("RANGEPASS_DEBUG"):
        level = logging.DEBUG
    else:
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _load_settings(config_path: Optional[Path]) -> GeneratorSettings:
    if config_path:
        return GeneratorSettings.load_from_file(config_path)
    return GeneratorSettings()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """rangepass - random passwords from character-range specifications."""
    # Store global options in context for subcommands
    settings = _load_settings(config)
    ctx.obj = {"settings": settings, "verbose": verbose}
    setup_logging(debug=verbose, level_name=settings.log_level)


@app.command()
def generate(
    ctx: typer.Context,
    length: Optional[int] = typer.Option(None, "--length", "-l", min=0, help="Password length"),
    include: Optional[str] = typer.Option(
        None, "--include", "-i", help="Allowed characters, e.g. 'A-Za-z0-9' or '@alnum'"
    ),
    exclude: Optional[str] = typer.Option(
        None, "--exclude", "-x", help="Characters to remove from the allowed set"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of passwords"),
    source: Optional[str] = typer.Option(
        None, "--source", "-s", help="Entropy source: auto, strong or weak"
    ),
    chunk_size: Optional[int] = typer.Option(
        None, "--chunk-size", min=1, help="Entropy bytes drawn per round"
    ),
):
    """Generate random passwords."""
    settings = ctx.obj["settings"]
    if source is not None:
        if source not in ("auto", "strong", "weak"):
            err_console.print(f"[red]Error: Unknown entropy source '{escape(source)}'[/red]")
            raise typer.Exit(1)
        settings.update_setting("entropy_strategy", source)
    if chunk_size is not None:
        settings.update_setting("chunk_size", chunk_size)

    generator = PasswordGenerator(settings=settings)
    try:
        results = generator.generate_many(count, length=length, include=include, exclude=exclude)
    except RangepassError as e:
        if ctx.obj.get("verbose"):
            err_console.print_exception()
        else:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    for result in results:
        typer.echo(result.value)

    if any(not result.secure for result in results):
        err_console.print(
            "[yellow]Warning: no secure entropy source was available; "
            "these passwords came from a pseudo-random generator.[/yellow]"
        )


@app.command()
def presets():
    """List named character-range presets."""
    table = Table(title="Presets")
    table.add_column("Name", style="cyan")
    table.add_column("Spec", style="white")

    for name, spec in sorted(PRESETS.items()):
        table.add_row(f"{PRESET_PREFIX}{name}", spec)

    console.print(table)


@config_app.command("show")
def show_config(ctx: typer.Context):
    """Show effective settings."""
    settings = ctx.obj["settings"]

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    for key, value in settings.model_dump().items():
        table.add_row(key, repr(value))

    console.print(table)


@config_app.command("save")
def save_config(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="YAML file to write"),
):
    """Write effective settings to a YAML file."""
    settings = ctx.obj["settings"]
    settings.save_to_file(path)
    console.print(f"[green]Settings written to {escape(str(path))}[/green]")


@app.command()
def version():
    """Show rangepass version."""
    from rangepass import __version__

    console.print(f"[bold blue]rangepass[/bold blue] version [cyan]{__version__}[/cyan]")


def cli_main():
    """Main CLI entry point."""
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
