"""CLI output utilities and formatting."""

import click
from colorama import Fore, Style

from yo.cli.screen import MessageScreen

BANNER = f"""
{Fore.YELLOW}╔══════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}██╗   ██╗ ██████╗ {Style.RESET_ALL}                 {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}╚██╗ ██╔╝██╔═══██╗{Style.RESET_ALL}                 {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT} ╚████╔╝ ██║   ██║{Style.RESET_ALL}                 {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}  ╚██╔╝  ██║   ██║{Style.RESET_ALL}                 {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}   ██║   ╚██████╔╝{Style.RESET_ALL}                 {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}   ╚═╝    ╚═════╝ {Style.RESET_ALL}                 {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.WHITE}{Style.BRIGHT}Minimal local version control{Style.RESET_ALL}      {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚══════════════════════════════════════╝{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


class Reporter:
    """
    Delivers command results to the user.

    Results are plain strings. They are echoed to the terminal, or,
    in interactive mode, shown on a MessageScreen that the user
    dismisses. ``color=False`` strips ANSI styling.
    """

    def __init__(self, interactive: bool = False, color: bool = True):
        self.interactive = interactive
        self.color = color

    def show(self, message: str = '') -> None:
        if not self.color:
            message = click.unstyle(message)
        if self.interactive:
            MessageScreen(message).run()
        else:
            click.echo(message, color=None if self.color else False)

    def fail(self, message: str) -> None:
        """Show an error line and abort the command."""
        self.show(error(message))
        raise click.Abort()
