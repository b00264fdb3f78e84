"""
Command-line interface for the BabySync Analytics package.

This module runs the analytics engines over exported event logs and prints
the results as JSON, optionally writing per-day breakdowns to CSV.
"""

import json
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import click
import pandas as pd

from .clock import Clock, FixedClock, SystemClock
from .constants import CSVConstants
from .data import EventDataLoader, EventRepository
from .exceptions import BabySyncAnalyticsError
from .models import BabyProfile, DateRangeSelector
from .services import AnalyticsService
from .settings import Settings, load_settings

RANGE_CHOICES = [selector.value for selector in DateRangeSelector]


# Configure basic logging
def configure_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def common_options(func: Callable) -> Callable:
    """Options shared by every analytics command."""
    options = [
        click.option(
            "--config",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Path to configuration file",
        ),
        click.option(
            "--verbose/--quiet",
            default=False,
            help="Enable verbose output",
        ),
        click.option(
            "--events",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Path to events CSV/JSON export (overrides config)",
        ),
        click.option(
            "--babies",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Path to baby profiles JSON (overrides config)",
        ),
        click.option("--baby-id", required=True, help="Baby profile to analyze"),
        click.option(
            "--reference-time",
            type=click.DateTime(),
            help="Pin the reference time instead of using the current time",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def range_options(func: Callable) -> Callable:
    """Options selecting the report date range."""
    options = [
        click.option(
            "--range",
            "range_name",
            type=click.Choice(RANGE_CHOICES),
            default=None,
            help="Report range (defaults to the configured range)",
        ),
        click.option(
            "--start",
            type=click.DateTime(),
            help="Start of a custom range (inclusive)",
        ),
        click.option(
            "--end",
            type=click.DateTime(),
            help="End of a custom range (exclusive)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _prepare(
    config: Path | None,
    verbose: bool,
    events: Path | None,
    babies: Path | None,
    baby_id: str,
    reference_time: datetime | None,
) -> tuple[Settings, EventRepository, BabyProfile, AnalyticsService]:
    configure_logging(verbose)
    settings = load_settings(config)

    # Override settings if paths provided
    if events is not None:
        settings.events_file = events
    if babies is not None:
        settings.babies_file = babies

    repository = EventRepository(EventDataLoader(settings), settings)
    baby = repository.get_baby(baby_id)
    if baby is None:
        raise BabySyncAnalyticsError(f"Baby {baby_id} not found")

    clock: Clock = FixedClock(reference_time) if reference_time else SystemClock()
    return settings, repository, baby, AnalyticsService(settings, clock)


def _selector(settings: Settings, range_name: str | None) -> DateRangeSelector:
    if range_name is None:
        return settings.default_range
    return DateRangeSelector(range_name)


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, default=str))


def _write_daily_csv(rows: list[dict[str, Any]], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows).to_csv(path, index=False, sep=CSVConstants.DEFAULT_SEPARATOR)
    logging.getLogger(__name__).info(f"Daily breakdown saved to {path}")


@click.group()
def main():
    """
    Summarize infant sleep and feeding logs.

    This tool reads exported event logs, computes sleep and feeding
    statistics over a date range, and classifies wake windows against
    age-appropriate targets.
    """


@main.command()
@common_options
@range_options
@click.option(
    "--daily-csv",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the per-day breakdown to this CSV file",
)
def sleep(
    config: Path | None,
    verbose: bool,
    events: Path | None,
    babies: Path | None,
    baby_id: str,
    reference_time: datetime | None,
    range_name: str | None,
    start: datetime | None,
    end: datetime | None,
    daily_csv: Path | None,
) -> None:
    """Compute sleep analytics for a baby."""
    logger = logging.getLogger(__name__)

    try:
        settings, repository, baby, service = _prepare(
            config, verbose, events, babies, baby_id, reference_time
        )
        result = service.sleep_analytics(
            repository.get_sleep_events(baby.id),
            baby,
            _selector(settings, range_name),
            custom_start=start,
            custom_end=end,
        )
        _echo_json(result.model_dump(mode="json"))

        if daily_csv is not None:
            _write_daily_csv(
                [day.model_dump(mode="json") for day in result.sleep_by_day],
                daily_csv,
            )

    except BabySyncAnalyticsError as e:
        logger.error(f"Sleep analytics failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@common_options
@range_options
@click.option(
    "--daily-csv",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the per-day breakdown to this CSV file",
)
def feeding(
    config: Path | None,
    verbose: bool,
    events: Path | None,
    babies: Path | None,
    baby_id: str,
    reference_time: datetime | None,
    range_name: str | None,
    start: datetime | None,
    end: datetime | None,
    daily_csv: Path | None,
) -> None:
    """Compute feeding analytics for a baby."""
    logger = logging.getLogger(__name__)

    try:
        settings, repository, baby, service = _prepare(
            config, verbose, events, babies, baby_id, reference_time
        )
        result = service.feeding_analytics(
            repository.get_feed_events(baby.id),
            baby,
            _selector(settings, range_name),
            custom_start=start,
            custom_end=end,
        )
        _echo_json(result.model_dump(mode="json"))

        if daily_csv is not None:
            _write_daily_csv(
                [day.model_dump(mode="json") for day in result.feedings_by_day],
                daily_csv,
            )

    except BabySyncAnalyticsError as e:
        logger.error(f"Feeding analytics failed: {str(e)}")
        raise click.Abort() from e


@main.command("wake-windows")
@common_options
def wake_windows(
    config: Path | None,
    verbose: bool,
    events: Path | None,
    babies: Path | None,
    baby_id: str,
    reference_time: datetime | None,
) -> None:
    """Derive and classify wake windows over the full sleep history."""
    logger = logging.getLogger(__name__)

    try:
        _, repository, baby, service = _prepare(
            config, verbose, events, babies, baby_id, reference_time
        )
        windows = service.wake_windows(repository.get_sleep_events(baby.id), baby)
        _echo_json([window.model_dump(mode="json") for window in windows])

    except BabySyncAnalyticsError as e:
        logger.error(f"Wake window analysis failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@common_options
@click.option(
    "--date",
    "day",
    type=click.DateTime(),
    help="Day to summarize (defaults to the reference day)",
)
def day(
    config: Path | None,
    verbose: bool,
    events: Path | None,
    babies: Path | None,
    baby_id: str,
    reference_time: datetime | None,
    day: datetime | None,
) -> None:
    """Summarize every event kind for a single day."""
    logger = logging.getLogger(__name__)

    try:
        _, repository, baby, service = _prepare(
            config, verbose, events, babies, baby_id, reference_time
        )
        summary = service.day_summary(repository.get_events_for_baby(baby.id), day)
        payload = summary.model_dump(mode="json")
        payload["total_sleep_hours"] = summary.total_sleep_hours
        _echo_json(payload)

    except BabySyncAnalyticsError as e:
        logger.error(f"Day summary failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@common_options
@range_options
def report(
    config: Path | None,
    verbose: bool,
    events: Path | None,
    babies: Path | None,
    baby_id: str,
    reference_time: datetime | None,
    range_name: str | None,
    start: datetime | None,
    end: datetime | None,
) -> None:
    """
    Compute sleep and feeding analytics together and save them.

    Both halves share one reference time. The combined report is printed and
    written to the configured output directory.
    """
    logger = logging.getLogger(__name__)

    try:
        settings, repository, baby, service = _prepare(
            config, verbose, events, babies, baby_id, reference_time
        )
        result = service.report(
            repository.get_sleep_events(baby.id),
            repository.get_feed_events(baby.id),
            baby,
            _selector(settings, range_name),
            custom_start=start,
            custom_end=end,
        )
        payload = {
            "reference_time": result.reference_time.isoformat(),
            "sleep": result.sleep.model_dump(mode="json"),
            "feeding": result.feeding.model_dump(mode="json"),
            "sleep_target": result.sleep_target.model_dump(mode="json"),
            "feeding_target": result.feeding_target.model_dump(mode="json"),
        }
        _echo_json(payload)

        settings.output_dir.mkdir(parents=True, exist_ok=True)
        report_file = settings.output_dir / f"report_{baby.id}.json"
        with open(report_file, "w", encoding=CSVConstants.DEFAULT_ENCODING) as f:
            json.dump(payload, f, indent=2, default=str)
        logger.info(f"Report saved to {report_file}")

    except BabySyncAnalyticsError as e:
        logger.error(f"Report generation failed: {str(e)}")
        raise click.Abort() from e


if __name__ == "__main__":
    main()
