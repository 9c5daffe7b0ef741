"""Commit command - create a commit from staged changes."""

import click
from yo.cli.output import success, info, warning
from yo.cli.state import pass_state
from yo.exceptions import CommitFailure, YoError


def describe_partial_commit(err: CommitFailure) -> str:
    """Explain what a failed commit left behind."""
    done = ', '.join(step.name.lower() for step in err.completed)
    return warning(f"Commit stopped at {err.step.name.lower()} after: {done}")


@click.command('commit')
@click.argument('message', nargs=-1, required=True)
@pass_state
def commit_cmd(state, message):
    """
    Record staged changes to the repository.

    All remaining words form the commit message, joined with single
    spaces.

    Examples:
        yo commit Initial commit
        yo commit "Fix typo in README"
    """
    text = ' '.join(message)

    try:
        record = state.repo.commit(text)
    except CommitFailure as e:
        state.show(describe_partial_commit(e))
        state.fail(f"Error committing changes: {e}")
    except YoError as e:
        state.fail(f"Error committing changes: {e}")

    state.show('\n'.join([
        success("Changes committed successfully!"),
        info(f"Commit: {record.digest}"),
    ]))
