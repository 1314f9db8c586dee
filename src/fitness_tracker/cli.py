"""CLI entry point for fitness-tracker."""

import logging

import click

from . import __version__
from .commands import diet, export, init, profile, progress, todos, workouts


@click.group()
@click.version_option(version=__version__, prog_name="fitness-tracker")
@click.option(
    "--user",
    "-u",
    envvar="FITNESS_TRACKER_USER",
    default="local",
    show_default=True,
    help="User id whose records are read and written",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, user: str, verbose: bool):
    """fitness-tracker: log workouts, meals, progress and to-dos locally.

    All records are kept in a local store under the data directory; nothing
    leaves your machine.

    Example usage:

        # Initialize the local store
        fitness-tracker init

        # Plan a workout for Monday
        fitness-tracker workouts add "Push Day" --day Monday -e "Bench Press:3:8:60"

        # Log a meal and view totals
        fitness-tracker diet log "Oatmeal" --calories 350 --meal breakfast
        fitness-tracker diet list
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["user_id"] = user


# Register commands
main.add_command(init)
main.add_command(workouts)
main.add_command(diet)
main.add_command(progress)
main.add_command(todos)
main.add_command(profile)
main.add_command(export)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
