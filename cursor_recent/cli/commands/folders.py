"""
Recent folder CLI commands (list, search, open, export).

Terminal counterparts of the launcher list: show the folders, filter them
by title, and open one in Cursor.
"""
import json

import click

from cursor_recent.cli.common import db_option, echo_entries, format_option
from cursor_recent.core.models import RecentFolderEntry
from cursor_recent.services.exporter import EXPORT_FORMATS, export_entries
from cursor_recent.services.recent_folders import RecentFoldersService


def _service(ctx) -> RecentFoldersService:
    return RecentFoldersService(
        list_folders=ctx.obj.list_folders,
        launcher=ctx.obj.get_launcher(),
    )


@click.command('list')
@db_option
@click.option('--json', 'as_json', is_flag=True, help='Print entries as JSON')
@click.pass_context
def list_folders(ctx, db_path, as_json):
    """List folders recently opened in Cursor."""
    if db_path:
        ctx.obj.db_path = db_path

    entries = _service(ctx).enter()

    if as_json:
        click.echo(json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False))
        return

    if not entries:
        click.echo("No recent folders found")
        return

    echo_entries(entries)


@click.command()
@click.argument('search_word')
@db_option
@click.pass_context
def search(ctx, search_word, db_path):
    """Search recent folders by name (case-sensitive)."""
    if db_path:
        ctx.obj.db_path = db_path

    results = _service(ctx).search(search_word)

    if not results:
        click.echo(f"No recent folders matching '{search_word}'")
        raise click.Abort()

    click.secho(f"Found {len(results)} folders matching '{search_word}':", fg='green')
    echo_entries(results)


@click.command('open')
@click.argument('target')
@db_option
@click.option(
    '--command',
    help='Executable used to open the folder (default: cursor)'
)
@click.pass_context
def open_folder(ctx, target, db_path, command):
    """
    Open a folder in Cursor.

    TARGET is either the number shown by `list` or a folder path.
    """
    if db_path:
        ctx.obj.db_path = db_path
    if command:
        ctx.obj.command = command

    service = _service(ctx)

    if target.isdigit():
        entries = service.enter()
        index = int(target)
        if not 1 <= index <= len(entries):
            click.secho(
                f"No recent folder #{index} ({len(entries)} available)",
                fg='red',
                err=True
            )
            raise click.Abort()
        entry = entries[index - 1]
    else:
        entry = RecentFolderEntry(title=target, description=target)

    click.echo(f"Opening {entry.description} ...")
    service.select(entry)


@click.command()
@db_option
@format_option(EXPORT_FORMATS, default='json')
@click.option(
    '--output', '-o',
    type=click.Path(),
    help='Output file path (default: recent_folders.{format})'
)
@click.pass_context
def export(ctx, db_path, format, output):
    """Export recent folders to a JSON or CSV file."""
    if db_path:
        ctx.obj.db_path = db_path

    entries = _service(ctx).enter()
    output = output or f"recent_folders.{format}"

    try:
        output_path = export_entries(entries, output, format)
    except OSError as e:
        click.secho(f"Error exporting folders: {e}", fg='red', err=True)
        raise click.Abort()

    click.secho(f"Exported {len(entries)} folders to {output_path}", fg='green')
