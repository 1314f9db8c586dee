"""Initialize project command."""

import click

from ..db import get_data_dir, get_db_path, init_db
from .base import echo_info, echo_success


@click.command()
def init():
    """Initialize the fitness-tracker data directory and local store.

    The data directory defaults to ./data and can be moved with the
    FITNESS_TRACKER_DATA_DIR environment variable.
    """
    data_dir = get_data_dir()
    echo_info(f"Initializing fitness-tracker in {data_dir}")

    db_path = get_db_path(data_dir)
    init_db(db_path)
    echo_success("Local store initialized")

    click.echo()
    click.echo("fitness-tracker is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Fill in your profile:")
    click.echo("     fitness-tracker profile set")
    click.echo()
    click.echo("  2. Plan a workout:")
    click.echo('     fitness-tracker workouts add "Push Day" --day Monday -e "Bench Press:3:8:60"')
