"""Cat-file command - show raw object content."""

import click
from yo.cli.state import pass_state
from yo.exceptions import YoError


@click.command('cat-file')
@click.option('-s', 'show_size', is_flag=True, help='Show object size')
@click.argument('digest')
@pass_state
def cat_file_cmd(state, show_size, digest):
    """
    Show the content of a stored object.

    For a commit digest this is the staging record that was committed.

    Examples:
        yo cat-file aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d
        yo cat-file -s aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d
    """
    try:
        data = state.repo.read_object(digest)
    except YoError as e:
        state.fail(f"Error reading object: {e}")

    if show_size:
        state.show(str(len(data)))
        return

    state.show(data.decode('utf-8', errors='replace').rstrip('\n'))
