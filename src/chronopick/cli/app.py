"""Typer CLI for inspecting picker days and replaying picker events."""

from __future__ import annotations

import logging
from datetime import date

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from chronopick.container import ServiceContainer
from chronopick.domain import DurationSelection, PickerDay, Selection
from chronopick.events import PickerEvent, parse_event
from chronopick.exceptions import ChronopickError
from chronopick.utils import utc_now

from .deps import get_container

app = typer.Typer(help="chronopick command-line interface")

logger = logging.getLogger(__name__)


def _load_container() -> ServiceContainer:
    try:
        return get_container()
    except ChronopickError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"{value!r} is not an ISO date (YYYY-MM-DD)") from exc


def _parse_events(values: list[str]) -> list[PickerEvent]:
    try:
        return [parse_event(value) for value in values]
    except ChronopickError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _format_selection(selection: Selection | None) -> str:
    if selection is None:
        return "none"
    return selection.instant.isoformat()


def _format_times(values: tuple[int, ...]) -> str:
    if not values:
        return "-"
    if len(values) > 2 and values == tuple(range(values[0], values[-1] + 1)):
        return f"{values[0]}-{values[-1]}"
    return ",".join(str(value) for value in values)


def _describe_day(day: PickerDay) -> list[str]:
    return [
        "Start:\t" + day.start.isoformat(),
        "End:\t" + day.end.isoformat(),
        "Disabled:\t" + ("yes" if day.disabled else "no"),
    ]


@app.callback()
def main() -> None:
    """Configure logging from the resolved settings."""

    container = _load_container()
    logging.basicConfig(
        level=container.settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = _load_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Timezone:\t" + settings.timezone)
    typer.echo("Day window:\t" + settings.day_window)
    typer.echo("Open weekdays:\t" + ",".join(str(day) for day in sorted(settings.open_weekdays)))
    holidays = ",".join(holiday.isoformat() for holiday in settings.holidays)
    typer.echo("Holidays:\t" + (holidays or "none"))


@app.command("day")
def show_day(target: str = typer.Argument(..., help="ISO date, e.g. 2021-01-01")) -> None:
    """Print the picker day for a date and the times it offers."""

    container = _load_container()
    picker = container.single_picker()
    picker.open(_parse_date(target))
    day = picker.base_day
    for line in _describe_day(day):
        typer.echo(line)
    times = picker.selectable_times()
    typer.echo("Hours:\t" + _format_times(times.hours))
    typer.echo("Minutes:\t" + _format_times(times.minutes))


@app.command("single")
def replay_single(
    events: list[str] = typer.Argument(..., help="Events such as day=2021-01-01 hour=9"),
    base: str | None = typer.Option(None, help="Base date the time controls start from"),
) -> None:
    """Replay events through a single picker and print the selection."""

    parsed = _parse_events(events)
    container = _load_container()
    picker = container.single_picker()
    picker.open(_parse_date(base) if base else utc_now())

    for event in parsed:
        selection = picker.apply(event)
        logger.info("%s -> %s", event, _format_selection(selection))

    typer.echo("Selection:\t" + _format_selection(picker.selection))


@app.command("duration")
def replay_duration(
    events: list[str] = typer.Argument(..., help="Events such as day=2021-01-01 end-hour=12"),
    base: str | None = typer.Option(None, help="Base date the time controls start from"),
) -> None:
    """Replay events through a range picker and print every step."""

    parsed = _parse_events(events)
    container = _load_container()
    picker = container.duration_picker()
    picker.open(_parse_date(base) if base else utc_now())

    table = Table(title="Range picker replay")
    table.add_column("Step", justify="right")
    table.add_column("Event")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Changed")

    previous: DurationSelection = picker.selection
    for index, event in enumerate(parsed, start=1):
        current = picker.apply(event)
        table.add_row(
            str(index),
            str(event),
            _format_selection(current.start),
            _format_selection(current.end),
            "no" if current == previous else "yes",
        )
        previous = current

    Console().print(table)
    typer.echo("Start:\t" + _format_selection(picker.selection.start))
    typer.echo("End:\t" + _format_selection(picker.selection.end))
