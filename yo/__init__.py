"""Yo - a minimal local version control system."""

__version__ = '0.1.0'

from yo.core.repository import Repository, initialize, stage, commit, history
from yo.exceptions import YoError

__all__ = [
    'Repository',
    'initialize',
    'stage',
    'commit',
    'history',
    'YoError',
]
