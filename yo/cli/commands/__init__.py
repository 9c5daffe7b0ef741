"""CLI commands for Yo."""

from yo.cli.commands.init import init_cmd
from yo.cli.commands.add import add_cmd
from yo.cli.commands.commit import commit_cmd
from yo.cli.commands.log import log_cmd
from yo.cli.commands.status import status_cmd
from yo.cli.commands.cat_file import cat_file_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd', 'status_cmd',
           'cat_file_cmd']
