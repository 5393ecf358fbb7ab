"""CLI entry point for the hair progress tracker."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from hairsnap.models.config import ReminderSettings, TrackerConfig
from hairsnap.models.progress import ProgressTrend
from hairsnap.reminders.schedule import next_reminder, plan_reminders
from hairsnap.reporter.progress_report import (
    default_report_path,
    format_percent_change,
    format_progress_summary,
    generate_json_report,
    trend_label,
)
from hairsnap.tracker import ProgressTracker

console = Console()

_TREND_STYLES = {
    ProgressTrend.IMPROVING: "green",
    ProgressTrend.STABLE: "blue",
    ProgressTrend.DECLINING: "red",
    ProgressTrend.INSUFFICIENT_DATA: "yellow",
}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load_config(config: str) -> TrackerConfig:
    try:
        return TrackerConfig.load(config)
    except FileNotFoundError:
        console.print(f"[red]Config file not found: {config}[/red]")
        console.print("Run 'hairsnap init' to create a default config.")
        sys.exit(1)
    except (ValidationError, json.JSONDecodeError, TypeError) as e:
        console.print(f"[red]Invalid config {config}:[/red] {escape(str(e))}")
        sys.exit(1)


def _load_tracker(config: str) -> ProgressTracker:
    return ProgressTracker.from_config(_load_config(config))


def _fmt_score(value: float | None) -> str:
    return f"{value:.0f}" if value is not None else "-"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Track hair density progression from periodic photos."""
    setup_logging(verbose)


@cli.command()
@click.option("--frequency", type=click.Choice(["daily", "twice-daily"]), default="daily",
              help="Reminder frequency")
def init(frequency: str) -> None:
    """Create a default configuration file."""
    config_path = Path("hairsnap-config.json")
    if config_path.exists():
        if not click.confirm("hairsnap-config.json already exists. Overwrite?"):
            return

    cfg = TrackerConfig(reminders=ReminderSettings(frequency=frequency))
    cfg.save(config_path)
    console.print(f"[green]Created {config_path}[/green]")
    console.print("\nCapture your first photo with:")
    console.print("  [blue]hairsnap capture path/to/photo.jpg[/blue]")


@cli.command()
@click.argument("image")
@click.option("--notes", "-n", default=None, help="Free-text notes")
@click.option("--timestamp", "-t", type=int, default=None,
              help="Capture time in milliseconds since epoch (default: now)")
@click.option("--config", "-c", default="hairsnap-config.json", help="Config file path")
def capture(image: str, notes: str | None, timestamp: int | None, config: str) -> None:
    """Record a new photo snapshot."""
    tracker = _load_tracker(config)
    try:
        snapshot = tracker.capture(image, timestamp=timestamp, notes=notes)
    except ValidationError as e:
        console.print(f"[red]Invalid snapshot:[/red] {escape(str(e))}")
        sys.exit(1)
    console.print(f"[green]Captured[/green] {snapshot.id} ({snapshot.captured_date})")


@cli.command()
@click.argument("snapshot_id", required=False)
@click.option("--all", "review_all", is_flag=True, help="Score every unscored snapshot")
@click.option("--config", "-c", default="hairsnap-config.json", help="Config file path")
def review(snapshot_id: str | None, review_all: bool, config: str) -> None:
    """Score snapshots with the density estimator."""
    tracker = _load_tracker(config)
    if review_all:
        scored = tracker.review_pending()
        console.print(f"[green]Scored {len(scored)} snapshots[/green]")
        return
    if not snapshot_id:
        console.print("[red]Give a snapshot id or use --all[/red]")
        sys.exit(1)
    try:
        snapshot = tracker.review(snapshot_id)
    except KeyError:
        console.print(f"[red]Snapshot not found: {snapshot_id}[/red]")
        sys.exit(1)
    console.print(f"[green]Scored[/green] {snapshot.id}: {snapshot.density_score:.0f}")


@cli.command("list")
@click.option("--config", "-c", default="hairsnap-config.json", help="Config file path")
def list_snapshots(config: str) -> None:
    """List stored snapshots, oldest first."""
    tracker = _load_tracker(config)
    snapshots = tracker.store.list()
    if not snapshots:
        console.print("[yellow]No snapshots yet[/yellow]")
        return

    table = Table(title="Snapshots")
    table.add_column("ID", style="bold")
    table.add_column("Date")
    table.add_column("Score")
    table.add_column("Image")
    table.add_column("Notes")
    for s in snapshots:
        score = f"{s.density_score:.0f}" if s.is_scored else "[yellow]pending[/yellow]"
        table.add_row(s.id, s.captured_date, score, s.image_uri, s.notes or "")
    console.print(table)


@cli.command()
@click.argument("snapshot_id")
@click.option("--config", "-c", default="hairsnap-config.json", help="Config file path")
def delete(snapshot_id: str, config: str) -> None:
    """Delete a snapshot."""
    tracker = _load_tracker(config)
    if not tracker.remove(snapshot_id):
        console.print(f"[red]Snapshot not found: {snapshot_id}[/red]")
        sys.exit(1)
    console.print(f"[green]Deleted {snapshot_id}[/green]")


@cli.command()
@click.argument("snapshot_id")
@click.option("--config", "-c", default="hairsnap-config.json", help="Config file path")
def show(snapshot_id: str, config: str) -> None:
    """Show one snapshot with its regional scores."""
    tracker = _load_tracker(config)
    snapshot = tracker.store.get(snapshot_id)
    if snapshot is None:
        console.print(f"[red]Snapshot not found: {snapshot_id}[/red]")
        sys.exit(1)

    sub = snapshot.sub_scores
    table = Table(title=f"Snapshot {snapshot.id}")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Captured", f"{snapshot.captured_at:%Y-%m-%d %H:%M} UTC")
    table.add_row("Image", snapshot.image_uri)
    if snapshot.is_scored:
        table.add_row("Overall", _fmt_score(snapshot.density_score))
        table.add_row("Crown", _fmt_score(sub.crown if sub else None))
        table.add_row("Hairline", _fmt_score(sub.hairline if sub else None))
    else:
        table.add_row("Overall", "[yellow]pending review[/yellow]")
    table.add_row("Notes", snapshot.notes or "")
    console.print(table)


@cli.command()
@click.option("--frequency", type=click.Choice(["daily", "twice-daily"]), default=None,
              help="Reminder frequency")
@click.option("--morning", default=None, help="Morning reminder time (HH:MM, empty to clear)")
@click.option("--evening", default=None, help="Evening reminder time (HH:MM, empty to clear)")
@click.option("--username", default=None, help="Name used in reminder messages")
@click.option("--notifications/--no-notifications", default=None,
              help="Turn reminders on or off")
@click.option("--config", "-c", default="hairsnap-config.json", help="Config file path")
def settings(
    frequency: str | None, morning: str | None, evening: str | None,
    username: str | None, notifications: bool | None, config: str,
) -> None:
    """View or change reminder settings."""
    cfg = _load_config(config)
    updates = {
        "frequency": frequency,
        "morning_time": morning,
        "evening_time": evening,
        "username": username,
        "notifications_enabled": notifications,
    }
    updates = {k: v for k, v in updates.items() if v is not None}

    if updates:
        try:
            cfg.reminders = ReminderSettings(**{**cfg.reminders.model_dump(), **updates})
        except ValidationError as e:
            console.print(f"[red]Invalid settings:[/red] {escape(str(e))}")
            sys.exit(1)
        cfg.save(config)
        console.print("[green]Settings saved[/green]")

    r = cfg.reminders
    table = Table(title="Reminder Settings")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("Notifications", "on" if r.notifications_enabled else "off")
    table.add_row("Frequency", r.frequency)
    table.add_row("Morning", r.morning_time or "-")
    table.add_row("Evening", r.evening_time or "-")
    table.add_row("Username", r.username or "-")
    console.print(table)


@cli.command()
@click.option("--json", "json_path", default=None, help="Write a JSON report to this path")
@click.option("--report", is_flag=True, help="Write a JSON report into the configured report directory")
@click.option("--plain", is_flag=True, help="Print a plain-text summary instead of tables")
@click.option("--config", "-c", default="hairsnap-config.json", help="Config file path")
def progress(json_path: str | None, report: bool, plain: bool, config: str) -> None:
    """Show the progression trend and suggestions."""
    tracker = _load_tracker(config)
    record, suggestions = tracker.progress()

    if report and not json_path:
        json_path = str(default_report_path(Path(tracker.config.report_output_dir)))

    if plain:
        click.echo(format_progress_summary(record, suggestions))
        if json_path:
            generate_json_report(record, suggestions, Path(json_path))
            click.echo(f"JSON report: {json_path}")
        return

    style = _TREND_STYLES.get(record.trend, "white")
    table = Table(title="Progress")
    table.add_column("Metric", style="bold")
    table.add_column("Value")
    table.add_row("Trend", f"[{style}]{trend_label(record.trend)}[/{style}]")
    table.add_row("Change", format_percent_change(record.percent_change))
    table.add_row("Snapshots", str(len(record.historical_series)))
    console.print(table)

    if record.historical_series:
        history = Table(title="History")
        history.add_column("Date")
        history.add_column("Score")
        for point in record.historical_series:
            history.add_row(point.date, f"{point.score:.0f}")
        console.print(history)

    console.print("\n[bold]Suggestions[/bold]")
    for i, s in enumerate(suggestions, 1):
        console.print(f"  {i}. {s}")

    if json_path:
        generate_json_report(record, suggestions, Path(json_path))
        console.print(f"  JSON report: [blue]{json_path}[/blue]")


@cli.command()
@click.option("--config", "-c", default="hairsnap-config.json", help="Config file path")
def reminders(config: str) -> None:
    """Show the daily photo reminders implied by the settings."""
    tracker = _load_tracker(config)
    reminder_settings = tracker.config.reminders
    planned = plan_reminders(reminder_settings)
    if not planned:
        console.print("[yellow]Reminders are disabled[/yellow]")
        return
    for r in planned:
        console.print(f"  {r.time_of_day}  [bold]{r.title}[/bold]: {r.body}")
    upcoming = next_reminder(reminder_settings, datetime.now())
    if upcoming:
        console.print(f"Next reminder: [blue]{upcoming:%Y-%m-%d %H:%M}[/blue]")


if __name__ == "__main__":
    cli()
