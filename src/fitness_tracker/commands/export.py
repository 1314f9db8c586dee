"""Export user data command."""

import json

import click

from .base import (
    current_user,
    echo_error,
    echo_success,
    ensure_initialized,
    get_storage,
    storage_command,
)


def collect_user_data(storage, user_id: str) -> dict:
    """Gather every record owned by ``user_id`` in stored form."""
    user_profile = storage.get_user_profile(user_id)
    return {
        "userId": user_id,
        "profile": user_profile.to_dict() if user_profile else None,
        "workoutPlans": [plan.to_dict() for plan in storage.get_workout_plans(user_id)],
        "dietLogs": [log.to_dict() for log in storage.get_diet_logs(user_id)],
        "progressLogs": [log.to_dict() for log in storage.get_progress_logs(user_id)],
        "todos": [todo.to_dict() for todo in storage.get_todos(user_id)],
    }


@click.command()
@click.option(
    "--clipboard",
    "-c",
    is_flag=True,
    help="Copy to clipboard instead of printing",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write to file instead of stdout",
)
@click.pass_context
@storage_command
def export(ctx, clipboard: bool, output: str | None):
    """Export all of your records as JSON.

    Examples:
        # Print to stdout
        fitness-tracker export

        # Save to a file
        fitness-tracker export -o backup.json

        # Copy to clipboard
        fitness-tracker export --clipboard
    """
    ensure_initialized(ctx)

    content = json.dumps(collect_user_data(get_storage(), current_user(ctx)), indent=2)

    if clipboard:
        import pyperclip

        try:
            pyperclip.copy(content)
        except pyperclip.PyperclipException as e:
            echo_error(f"Could not copy to clipboard: {e}")
            ctx.exit(1)
        echo_success("Copied to clipboard!")

    elif output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        echo_success(f"Exported to {output}")

    else:
        click.echo(content)
