"""Body progress commands."""

from uuid import uuid4

import click

from ..models.progress import ProgressLog
from ..services.summaries import progress_history
from ..utils import utc_now_iso
from .base import (
    current_user,
    echo_info,
    echo_success,
    ensure_initialized,
    find_record,
    format_optional,
    format_table,
    get_storage,
    storage_command,
)


def parse_measurement(raw: str) -> tuple[str, float]:
    """Parse 'name=value' into a measurement pair."""
    name, sep, value = raw.partition("=")
    if not sep or not name.strip():
        raise click.BadParameter(f"'{raw}' is not of the form name=value", param_hint="--measure")
    try:
        return name.strip(), float(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a number", param_hint="--measure")


@click.group()
@click.pass_context
def progress(ctx):
    """Record body weight, body fat and measurements."""
    ensure_initialized(ctx)


@progress.command(name="log")
@click.option("--weight", "-w", type=float, help="Body weight in kg")
@click.option("--body-fat", type=float, help="Body fat percentage")
@click.option(
    "--measure",
    "measures",
    multiple=True,
    help="Measurement as name=value, e.g. waist=82; repeatable",
)
@click.option("--notes", help="Free-form notes")
@click.pass_context
@storage_command
def log_progress(
    ctx,
    weight: float | None,
    body_fat: float | None,
    measures: tuple[str, ...],
    notes: str | None,
):
    """Record a progress snapshot."""
    measurements = dict(parse_measurement(m) for m in measures) or None
    if weight is None and body_fat is None and not measurements:
        raise click.UsageError("Give at least one of --weight, --body-fat or --measure")

    entry = ProgressLog(
        id=str(uuid4()),
        user_id=current_user(ctx),
        logged_at=utc_now_iso(),
        weight=weight,
        body_fat_percentage=body_fat,
        measurements=measurements,
        notes=notes,
    )
    get_storage().save_progress_log(entry)
    echo_success("Progress recorded")


@progress.command(name="list")
@click.pass_context
@storage_command
def list_progress(ctx):
    """Show progress history, oldest first."""
    logs = progress_history(get_storage().get_progress_logs(current_user(ctx)))

    if not logs:
        echo_info("No progress recorded yet. Add some with 'fitness-tracker progress log'")
        return

    headers = ["ID", "Date", "Weight", "Body fat", "Measurements"]
    rows = [
        [
            log.id[:8],
            log.logged_at[:10],
            format_optional(log.weight, "kg"),
            format_optional(log.body_fat_percentage, "%"),
            ", ".join(f"{k}={v:g}" for k, v in (log.measurements or {}).items()) or "-",
        ]
        for log in logs
    ]

    click.echo()
    click.echo(format_table(headers, rows))

    weights = [log.weight for log in logs if log.weight is not None]
    if len(weights) >= 2:
        click.echo()
        click.echo(f"Weight change: {weights[-1] - weights[0]:+.1f}kg")


@progress.command()
@click.argument("log_id")
@click.pass_context
@storage_command
def delete(ctx, log_id: str):
    """Delete a progress entry."""
    storage = get_storage()
    entry = find_record(ctx, storage.get_progress_logs(current_user(ctx)), log_id, "Progress log")
    storage.delete_progress_log(entry.id)
    echo_success(f"Deleted progress entry from {entry.logged_at[:10]}")
