"""User profile commands."""

import click
import questionary

from ..models.user_profile import UserProfile
from .base import current_user, echo_info, echo_success, ensure_initialized, get_storage, storage_command


def _optional_float(text: str) -> float | None:
    text = (text or "").strip()
    return float(text) if text else None


def _is_optional_number(text: str) -> bool | str:
    try:
        _optional_float(text)
    except ValueError:
        return "Please enter a number"
    return True


def _format_default(value) -> str:
    if value is None:
        return ""
    return f"{value:g}" if isinstance(value, float) else str(value)


def prompt_profile(current: UserProfile | None) -> UserProfile | None:
    """Ask for profile fields interactively. Returns None if cancelled."""
    current = current or UserProfile()
    answers = questionary.form(
        username=questionary.text("Username:", default=current.username or ""),
        full_name=questionary.text("Full name:", default=current.full_name or ""),
        height=questionary.text(
            "Height (cm):",
            default=_format_default(current.height),
            validate=_is_optional_number,
        ),
        weight=questionary.text(
            "Weight (kg):",
            default=_format_default(current.weight),
            validate=_is_optional_number,
        ),
        goal=questionary.text("Goal:", default=current.goal or ""),
    ).ask()
    if not answers:
        return None

    return UserProfile(
        username=answers["username"].strip() or None,
        full_name=answers["full_name"].strip() or None,
        height=_optional_float(answers["height"]),
        weight=_optional_float(answers["weight"]),
        goal=answers["goal"].strip() or None,
    )


@click.group()
@click.pass_context
def profile(ctx):
    """View and edit your profile."""
    ensure_initialized(ctx)


@profile.command()
@click.pass_context
@storage_command
def show(ctx):
    """Show your profile."""
    user_profile = get_storage().get_user_profile(current_user(ctx))
    if user_profile is None:
        echo_info("No profile yet. Create one with 'fitness-tracker profile set'")
        return

    click.echo()
    click.echo(user_profile.get_summary())


@profile.command(name="set")
@click.option("--username", help="Display username")
@click.option("--full-name", help="Full name")
@click.option("--height", type=float, help="Height in cm")
@click.option("--weight", type=float, help="Weight in kg")
@click.option("--goal", help="Training goal, e.g. 'Run a 5K'")
@click.pass_context
@storage_command
def set_profile(
    ctx,
    username: str | None,
    full_name: str | None,
    height: float | None,
    weight: float | None,
    goal: str | None,
):
    """Create or update your profile.

    Options override the stored values; fields not given are kept. With no
    options at all, asks for each field interactively.
    """
    storage = get_storage()
    user_id = current_user(ctx)
    existing = storage.get_user_profile(user_id)

    if all(v is None for v in (username, full_name, height, weight, goal)):
        updated = prompt_profile(existing)
        if updated is None:
            echo_info("Cancelled")
            return
    else:
        base = existing or UserProfile()
        updated = UserProfile(
            username=username if username is not None else base.username,
            full_name=full_name if full_name is not None else base.full_name,
            height=height if height is not None else base.height,
            weight=weight if weight is not None else base.weight,
            goal=goal if goal is not None else base.goal,
        )

    storage.save_user_profile(user_id, updated)
    echo_success("Profile saved")
