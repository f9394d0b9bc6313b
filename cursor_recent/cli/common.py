"""
Common Click decorators and utilities for CLI commands.
"""
import click
from pathlib import Path
from typing import Callable, List

from cursor_recent.core.models import RecentFolderEntry


def db_option(f: Callable) -> Callable:
    """
    Add --db-path option to command.

    Allows users to point at a specific state.vscdb instead of the
    OS-specific default location.

    Args:
        f: Command function to decorate

    Returns:
        Decorated function with --db-path option
    """
    return click.option(
        '--db-path',
        type=click.Path(path_type=Path),
        help='Path to Cursor state.vscdb (default: OS-specific location)'
    )(f)


def format_option(formats: list, default: str = 'json') -> Callable:
    """
    Add --format option with specified choices.

    Args:
        formats: List of valid format strings
        default: Default format (default: 'json')

    Returns:
        Decorator function
    """
    def decorator(f: Callable) -> Callable:
        return click.option(
            '--format',
            type=click.Choice(formats),
            default=default,
            help=f'Output format (default: {default})'
        )(f)
    return decorator


def echo_entries(entries: List[RecentFolderEntry]):
    """Print entries as a numbered list (1-based, most recent first)."""
    width = len(str(len(entries)))
    for index, entry in enumerate(entries, start=1):
        click.echo(f"{index:>{width}}. ", nl=False)
        click.secho(entry.title, bold=True, nl=False)
        click.echo(f"  {entry.description}")
