"""mdagenda CLI - task and agenda extraction from markdown notes."""

import logging
import sys
from datetime import date
from typing import NoReturn

import click

from .adapters.markdown_files import MarkdownTaskSource
from .config import Config, load_config
from .core.agenda import current_day, filter_agenda, parse_date, resolve_timezone
from .core.render import OutputFormat, render
from .core.repeater import next_occurrence
from .core.tasks import Task
from .core.timestamp import parse_org_timestamp
from .errors import MdAgendaError
from .ports import TaskSource

FORMATS = ["json", "md", "markdown", "html"]


def _setup_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _load(locale: str | None) -> Config:
    config = load_config()
    if locale:
        config.locale = locale.lower()
    return config


def _fail(message: object) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _scan(directory: str, glob: str | None, config: Config) -> list[Task]:
    source: TaskSource = MarkdownTaskSource(
        directory,
        glob=glob or config.glob,
        mappings=config.mappings(),
        max_file_size=config.max_file_size,
        max_tasks=config.max_tasks,
    )
    return source.fetch_all()


@click.group()
@click.version_option(package_name="mdagenda")
def main():
    """mdagenda - agenda views over tasks in markdown notes."""
    pass


@main.command()
@click.argument("directory", type=click.Path(), default=".")
@click.option("--glob", default=None, help="File pattern to scan (default from config, '*.md')")
@click.option("--format", "fmt", type=click.Choice(FORMATS, case_sensitive=False), default="json")
@click.option("--locale", default=None, help="Weekday name locale (en, ru, de)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def extract(directory: str, glob: str | None, fmt: str, locale: str | None, debug: bool):
    """List every task found in DIRECTORY."""
    _setup_logging(debug)
    config = _load(locale)
    try:
        tasks = _scan(directory, glob, config)
    except MdAgendaError as e:
        _fail(e)
    click.echo(render(tasks, OutputFormat.parse(fmt)))


@main.command()
@click.argument("directory", type=click.Path(), default=".")
@click.option("--mode", "-m", default="day", help="Agenda mode: day, week or tasks")
@click.option("--date", "-d", "target_date", default=None, help="Day to show (YYYY-MM-DD), defaults to today")
@click.option("--from", "date_from", default=None, help="Week range start (YYYY-MM-DD)")
@click.option("--to", "date_to", default=None, help="Week range end (YYYY-MM-DD)")
@click.option("--tz", default=None, help="IANA timezone (default from config, 'UTC')")
@click.option("--glob", default=None, help="File pattern to scan (default from config, '*.md')")
@click.option("--format", "fmt", type=click.Choice(FORMATS, case_sensitive=False), default="json")
@click.option("--locale", default=None, help="Weekday name locale (en, ru, de)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def agenda(
    directory: str,
    mode: str,
    target_date: str | None,
    date_from: str | None,
    date_to: str | None,
    tz: str | None,
    glob: str | None,
    fmt: str,
    locale: str | None,
    debug: bool,
):
    """Show the day, week or open-task agenda for DIRECTORY."""
    _setup_logging(debug)
    config = _load(locale)
    try:
        tasks = _scan(directory, glob, config)
        tasks = filter_agenda(
            tasks,
            mode,
            date=target_date,
            date_from=date_from,
            date_to=date_to,
            timezone=tz or config.timezone,
        )
    except MdAgendaError as e:
        _fail(e)
    click.echo(render(tasks, OutputFormat.parse(fmt)))


@main.command("next")
@click.argument("timestamp")
@click.option("--from", "from_date", default=None, help="Reference date (YYYY-MM-DD), defaults to today")
@click.option("--tz", default=None, help="IANA timezone used for today")
@click.option("--locale", default=None, help="Weekday name locale (en, ru, de)")
def next_cmd(timestamp: str, from_date: str | None, tz: str | None, locale: str | None):
    """Print the next occurrence of a repeating TIMESTAMP."""
    config = _load(locale)
    try:
        reference: date = (
            parse_date(from_date, "'from' date")
            if from_date
            else current_day(resolve_timezone(tz or config.timezone))
        )
    except MdAgendaError as e:
        _fail(e)

    parsed = parse_org_timestamp(timestamp, config.mappings())
    if parsed is None:
        _fail(f"No timestamp found in '{timestamp}'")
    if parsed.repeater is None:
        click.echo(parsed.date.isoformat())
        return

    upcoming = next_occurrence(parsed.date, parsed.repeater, reference)
    if upcoming is None:
        _fail(f"Next occurrence of '{timestamp}' is out of range")
    click.echo(upcoming.isoformat())
