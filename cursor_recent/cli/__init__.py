"""
Click-based CLI for Cursor Recent.

This module provides the main Click group and entry point.
Commands are organized in the commands/ subpackage.
"""
import click
import logging
import sys

from .context import CLIContext

# Configure logging format
logging.basicConfig(
    level=logging.INFO,
    format='%(message)s'
)


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, verbose):
    """
    Cursor Recent - search and reopen folders recently opened in Cursor.

    Reads Cursor's recently opened list from its state database and opens
    the selected folder with the `cursor` command.
    """
    ctx.obj = CLIContext(verbose=verbose)

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.result_callback()
@click.pass_context
def cleanup(ctx, result, **kwargs):
    """
    Clean up resources after command execution.

    Waits for pending folder launches so their outcome is logged.
    """
    if ctx.obj:
        ctx.obj.close()


from .commands.misc import info

cli.add_command(info)

from .commands.folders import list_folders, search, open_folder, export

cli.add_command(list_folders)
cli.add_command(search)
cli.add_command(open_folder)
cli.add_command(export)


def main():
    """
    Main entry point for the CLI.

    Used by the console script and __main__.py.
    """
    try:
        cli()
    except Exception as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
