"""Status command - list staged files."""

import click
from colorama import Fore, Style
from yo.cli.output import info
from yo.cli.state import pass_state
from yo.exceptions import YoError


@click.command('status')
@pass_state
def status_cmd(state):
    """
    Show the files staged for the next commit, in the order added.

    Examples:
        yo status
    """
    try:
        entries = state.repo.staging.entries()
    except YoError as e:
        state.fail(f"Error reading staging area: {e}")

    if not entries:
        state.show(info("Nothing staged"))
        return

    lines = [info(f"Staged for commit ({len(entries)}):")]
    for entry in entries:
        lines.append(f"  {Fore.YELLOW}{entry.digest[:7]}{Style.RESET_ALL} {entry.path}")
    state.show('\n'.join(lines))
