"""Diet tracking commands."""

from uuid import uuid4

import click

from ..models.diet import DietLog, MealType
from ..services.summaries import logs_for_meal, nutrition_totals
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

MEAL_CHOICES = [m.value for m in MealType]


@click.group()
@click.pass_context
def diet(ctx):
    """Log meals and review nutrition totals."""
    ensure_initialized(ctx)


@diet.command(name="log")
@click.argument("food_name")
@click.option("--calories", type=float, help="Energy in kcal")
@click.option("--protein", type=float, help="Protein in grams")
@click.option("--carbs", type=float, help="Carbohydrates in grams")
@click.option("--fats", type=float, help="Fat in grams")
@click.option("--meal", "-m", type=click.Choice(MEAL_CHOICES), default="breakfast", show_default=True)
@click.pass_context
@storage_command
def log_meal(
    ctx,
    food_name: str,
    calories: float | None,
    protein: float | None,
    carbs: float | None,
    fats: float | None,
    meal: str,
):
    """Log a food entry."""
    entry = DietLog(
        id=str(uuid4()),
        user_id=current_user(ctx),
        food_name=food_name,
        logged_at=utc_now_iso(),
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
        meal_type=meal,
    )
    get_storage().save_diet_log(entry)
    echo_success(f"Logged {food_name} ({meal})")


@diet.command(name="list")
@click.option(
    "--meal",
    "-m",
    type=click.Choice(["all"] + MEAL_CHOICES),
    default="all",
    show_default=True,
)
@click.pass_context
@storage_command
def list_meals(ctx, meal: str):
    """List logged food and the nutrition totals."""
    logs = get_storage().get_diet_logs(current_user(ctx))
    logs = logs_for_meal(logs, meal)

    if not logs:
        echo_info("No meals logged yet. Add one with 'fitness-tracker diet log'")
        return

    headers = ["ID", "Food", "Meal", "kcal", "Protein", "Carbs", "Fats", "Logged"]
    rows = [
        [
            log.id[:8],
            log.food_name,
            log.meal_type or "-",
            format_optional(log.calories),
            format_optional(log.protein, "g"),
            format_optional(log.carbs, "g"),
            format_optional(log.fats, "g"),
            log.logged_at[:16].replace("T", " "),
        ]
        for log in logs
    ]

    totals = nutrition_totals(logs)
    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(
        f"Totals: {totals.calories:g} kcal, {totals.protein:g}g protein, "
        f"{totals.carbs:g}g carbs, {totals.fats:g}g fats"
    )


@diet.command()
@click.argument("log_id")
@click.pass_context
@storage_command
def delete(ctx, log_id: str):
    """Delete a food entry."""
    storage = get_storage()
    entry = find_record(ctx, storage.get_diet_logs(current_user(ctx)), log_id, "Diet log")
    storage.delete_diet_log(entry.id)
    echo_success(f"Deleted {entry.food_name}")
