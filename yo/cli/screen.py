"""Full-screen message display."""

import click

QUIT_KEYS = ('q', 'Q', '\x03')


class MessageScreen:
    """
    Shows one message on a cleared terminal until the user quits.

    The screen only receives the text to display; it never calls back
    into the repository.
    """

    def __init__(self, message: str):
        self.message = message

    def render(self) -> str:
        return f"\n{self.message}\n\nPress 'q' to quit.\n"

    def run(self) -> None:
        click.clear()
        click.echo(self.render())
        while True:
            try:
                key = click.getchar()
            except (KeyboardInterrupt, EOFError):
                break
            if not key or key in QUIT_KEYS:
                break
