"""Log command - show commit history."""

import click
from yo.cli.state import pass_state
from yo.exceptions import YoError


@click.command('log')
@pass_state
def log_cmd(state):
    """
    Show commit history, oldest first.

    Examples:
        yo log
    """
    try:
        text = state.repo.history()
    except YoError as e:
        state.fail(f"Error displaying log: {e}")

    state.show(text.rstrip('\n'))
