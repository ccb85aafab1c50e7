"""Initialize project command."""

import click

from ..config import get_data_dir
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the fitspec data directory and database.

    The database only stores assessment history; scoring works without it.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing fitspec in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("fitspec is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Review the level standards for a member:")
    click.echo("     fitspec standards --age 28 --weight 70 --gender male")
    click.echo()
    click.echo("  2. Score a measurement file:")
    click.echo("     fitspec assess measurements.json --save")
