"""
Miscellaneous CLI commands.
"""
import sys

import click

from cursor_recent.cli.common import db_option
from cursor_recent.core.config import TargetOS, get_state_db_path


@click.command()
@db_option
def info(db_path):
    """Show information about the Cursor installation."""
    target_os = TargetOS.current()
    path = db_path or get_state_db_path(target_os)
    click.echo(f"Cursor state database: {path}")
    if path.exists():
        click.secho("  Found", fg='green')
    else:
        click.secho("  Not found", fg='yellow')
    click.echo(f"Target OS: {target_os.value}")
    click.echo(f"Python: {sys.version}")
    click.echo(f"Platform: {sys.platform}")
