"""Workout plan commands."""

from uuid import uuid4

import click

from ..models.workout import DAYS_OF_WEEK, WorkoutPlan
from ..services.summaries import ordered_exercises, plans_for_day
from .base import (
    current_user,
    echo_info,
    echo_success,
    ensure_initialized,
    find_record,
    format_table,
    get_storage,
    storage_command,
)


def parse_exercise(raw: str) -> dict:
    """Parse 'name[:sets[:reps[:weight]]]' into exercise fields."""
    parts = raw.split(":")
    if not parts[0].strip() or len(parts) > 4:
        raise click.BadParameter(
            f"'{raw}' is not of the form name[:sets[:reps[:weight]]]", param_hint="--exercise"
        )
    parts += [""] * (4 - len(parts))
    name, sets, reps, weight = (p.strip() for p in parts)
    try:
        return {
            "name": name,
            "sets": int(sets) if sets else None,
            "reps": int(reps) if reps else None,
            "weight": float(weight) if weight else None,
        }
    except ValueError:
        raise click.BadParameter(
            f"'{raw}' has a non-numeric sets, reps or weight", param_hint="--exercise"
        )


@click.group()
@click.pass_context
def workouts(ctx):
    """Manage weekly workout plans."""
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.option("--day", "-d", type=click.Choice(DAYS_OF_WEEK), help="Only show plans for this day")
@click.pass_context
@storage_command
def list_workouts(ctx, day: str | None):
    """List workout plans."""
    plans = get_storage().get_workout_plans(current_user(ctx))
    if day:
        plans = plans_for_day(plans, day)

    if not plans:
        echo_info("No workout plans found. Add one with 'fitness-tracker workouts add'")
        return

    headers = ["ID", "Name", "Day", "Exercises"]
    rows = [
        [plan.id[:8], plan.name, plan.day_of_week, str(len(plan.exercises))]
        for plan in plans
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(plans)} plan(s)")


@workouts.command()
@click.argument("name")
@click.option("--day", "-d", type=click.Choice(DAYS_OF_WEEK), default="Monday", show_default=True)
@click.option("--description", default=None, help="Free-form description")
@click.option(
    "--exercise",
    "-e",
    "exercises",
    multiple=True,
    help="Exercise as name[:sets[:reps[:weight]]]; repeatable",
)
@click.pass_context
@storage_command
def add(ctx, name: str, day: str, description: str | None, exercises: tuple[str, ...]):
    """Add a workout plan."""
    plan = WorkoutPlan(
        id=str(uuid4()),
        user_id=current_user(ctx),
        name=name,
        day_of_week=day,
        description=description,
    )
    for raw in exercises:
        plan.add_exercise(id=str(uuid4()), **parse_exercise(raw))

    get_storage().save_workout_plan(plan)
    echo_success(f"Saved plan '{name}' for {day} (ID: {plan.id})")


def _find_plan(ctx: click.Context, plan_id: str) -> WorkoutPlan:
    plans = get_storage().get_workout_plans(current_user(ctx))
    return find_record(ctx, plans, plan_id, "Workout plan")


@workouts.command()
@click.argument("plan_id")
@click.pass_context
@storage_command
def show(ctx, plan_id: str):
    """Show a workout plan and its exercises."""
    plan = _find_plan(ctx, plan_id)

    click.echo()
    click.echo("=" * 50)
    click.echo(f"{plan.name} ({plan.day_of_week})")
    click.echo("=" * 50)
    if plan.description:
        click.echo(plan.description)
    click.echo()

    if not plan.exercises:
        click.echo("No exercises.")
        return

    for i, exercise in enumerate(ordered_exercises(plan), start=1):
        click.echo(f"  {i}. {exercise.get_display()}")


@workouts.command()
@click.argument("plan_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@storage_command
def delete(ctx, plan_id: str, yes: bool):
    """Delete a workout plan."""
    plan = _find_plan(ctx, plan_id)

    if not yes and not click.confirm(f"Delete plan '{plan.name}'?"):
        echo_info("Cancelled")
        return

    get_storage().delete_workout_plan(plan.id)
    echo_success(f"Deleted plan '{plan.name}'")
