"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain import dates
from ..domain.exceptions import SchedulerError
from ..domain.month_navigator import MonthNavigator

app = typer.Typer(
    name="mealscheduler",
    help="Congregation meal scheduling helpers and web server",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml"),
]


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(config_file: Optional[Path]) -> AppConfig:
    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _setup_logging(config.log_level)
    return config


def _parse_date(value: str, tz: str) -> pendulum.DateTime:
    try:
        return pendulum.from_format(value, "YYYY-MM-DD", tz=tz)
    except ValueError as e:
        console.print(f"[red]Could not parse date '{value}': {e}[/red]")
        raise typer.Exit(1)


@app.command()
def time_options():
    """
    Show the bookable meal times.
    """
    table = Table(title="Meal Times", show_header=True, header_style="bold cyan")
    table.add_column("Value", style="bold yellow")
    table.add_column("Label")

    for option in dates.get_time_options():
        table.add_row(option.value, option.label)

    console.print()
    console.print(table)
    console.print()


@app.command()
def calendar_view(
    anchor: Annotated[Optional[str], typer.Argument(help="Date inside the first month (YYYY-MM-DD)")] = None,
    config_file: ConfigOption = None,
):
    """
    Show the range covered by the 6-month calendar view.
    """
    config = _load(config_file)
    anchor_date = _parse_date(anchor, config.timezone) if anchor else pendulum.now(config.timezone)

    view = dates.get_calendar_view_dates(anchor_date)
    console.print(f"\n[bold cyan]Calendar view:[/bold cyan] {view}\n")


@app.command()
def months(
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Number of months to list")] = 6,
    config_file: ConfigOption = None,
):
    """
    List the upcoming months starting with the current one.
    """
    config = _load(config_file)
    now = pendulum.now(config.timezone)

    for option in MonthNavigator(now).get_next_months(count, now=now):
        console.print(f"  {option.value}  {option.label}")


@app.command()
def check_date(
    date: Annotated[str, typer.Argument(help="Date to check (YYYY-MM-DD)")],
    config_file: ConfigOption = None,
):
    """
    Check whether a date can still be booked.
    """
    config = _load(config_file)
    when = _parse_date(date, config.timezone)

    if dates.is_within_booking_range(when, now=pendulum.now(config.timezone)):
        console.print(f"[green]✓ {dates.format_date(when)} is within the booking window.[/green]")
    else:
        console.print(f"[yellow]⚠ {dates.format_date(when)} is outside the booking window.[/yellow]")


@app.command()
def format_time(
    time: Annotated[str, typer.Argument(help="Time of day (HH:MM, 24-hour)")],
):
    """
    Convert a 24-hour time to its 12-hour label.
    """
    try:
        console.print(dates.format_time_from_24_to_12(time))
    except SchedulerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def format_phone(
    number: Annotated[str, typer.Argument(help="Phone number in any notation")],
):
    """
    Format a 10-digit phone number as (XXX) XXX-XXXX.
    """
    console.print(dates.format_phone_number(number))


@app.command()
def list_congregations(config_file: ConfigOption = None):
    """
    List all configured congregations.
    """
    config = _load(config_file)

    if not config.congregations:
        console.print("[yellow]No congregations defined in the config file.[/yellow]")
        return

    table = Table(
        title="Configured Congregations",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("ID", style="bold yellow")
    table.add_column("Name")
    table.add_column("Active", style="dim")

    for congregation in config.congregations:
        table.add_row(
            str(congregation.id),
            congregation.name,
            "yes" if congregation.active else "no"
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def serve(
    config_file: ConfigOption = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to listen on")] = None,
    production: Annotated[bool, typer.Option("--production", help="Serve the built client from the dist directory")] = False,
):
    """
    Start the web server.
    """
    import uvicorn

    from ..server import create_app, log

    config = _load(config_file)
    server_updates = {}
    if host:
        server_updates["host"] = host
    if port:
        server_updates["port"] = port
    if production:
        server_updates["mode"] = "production"
    if server_updates:
        config = config.model_copy(
            update={"server": config.server.model_copy(update=server_updates)}
        )

    try:
        web_app = create_app(config)
    except SchedulerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    log(f"serving on port {config.server.port}")
    uvicorn.run(web_app, host=config.server.host, port=config.server.port, log_level=config.log_level.lower())


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(Panel.fit(f"[bold cyan]mealscheduler[/bold cyan] version [bold]{__version__}[/bold]"))


if __name__ == "__main__":
    app()
