"""Main CLI entry point for Yo."""

import click
from colorama import init

from yo import __version__
from yo.cli.output import BANNER
from yo.cli.state import CliState
from yo.cli.commands import (init_cmd, add_cmd, commit_cmd, log_cmd, status_cmd,
                             cat_file_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class YoGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=YoGroup)
@click.version_option(version=__version__)
@click.option('-C', '--repo', 'root', default='.', type=click.Path(file_okay=False),
              help='Repository root (default: current directory)')
@click.option('-i', '--interactive', is_flag=True,
              help="Show the result full-screen until 'q' is pressed")
@click.option('--color/--no-color', default=True, help='Colorize output (default: on)')
@click.pass_context
def cli(ctx, root, interactive, color):
    """Yo - a minimal local version control system."""
    ctx.obj = CliState(root, interactive=interactive, color=color)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(log_cmd)
cli.add_command(status_cmd)
cli.add_command(cat_file_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
