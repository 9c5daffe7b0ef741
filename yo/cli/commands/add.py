"""Add command - stage files for commit."""

import click
from yo.cli.output import success, error
from yo.cli.state import pass_state
from yo.exceptions import YoError


@click.command('add')
@click.argument('files', nargs=-1, required=True)
@pass_state
def add_cmd(state, files):
    """
    Add file contents to the staging area.

    Each file is stored in the object database and appended to the
    staging area, in the order given. Adding the same file twice stages
    it twice. Relative paths are read from the repository root.

    Examples:
        yo add file.txt
        yo add a.txt b.txt
    """
    lines = []
    for file in files:
        try:
            state.repo.stage(file)
        except YoError as e:
            # Files added before the failure stay staged
            lines.append(error(f"Error adding file: {e}"))
            state.show('\n'.join(lines))
            raise click.Abort()
        lines.append(success(f"Added {file} to staging area."))

    state.show('\n'.join(lines))
