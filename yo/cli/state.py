"""Per-invocation CLI state shared by all commands."""

import click

from yo.core.repository import Repository
from yo.cli.output import Reporter


class CliState:
    """
    The repository a command works on and how it reports back.

    Everything comes from global command-line options: the repository
    root from -C (default: the current directory), and presentation
    from -i and --no-color.
    """

    def __init__(self, root: str = '.', interactive: bool = False, color: bool = True):
        self.repo = Repository(root)
        self.reporter = Reporter(interactive=interactive, color=color)

    def show(self, message: str = '') -> None:
        self.reporter.show(message)

    def fail(self, message: str) -> None:
        self.reporter.fail(message)


pass_state = click.make_pass_decorator(CliState, ensure=True)
