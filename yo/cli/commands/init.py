"""Initialize a new Yo repository."""

import click
from yo.cli.output import success
from yo.cli.state import pass_state
from yo.exceptions import YoError


@click.command('init')
@pass_state
def init_cmd(state):
    """
    Initialize a new Yo repository.

    Creates a .yo directory holding the object store and the commit log.

    Examples:
        yo init                 # Initialize in current directory
        yo -C my-project init   # Initialize in my-project
    """
    try:
        state.repo.init()
    except YoError as e:
        state.fail(f"Error initializing repository: {e}")

    state.show(success("Initialized empty Yo repository successfully!"))
