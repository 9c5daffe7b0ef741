"""Core functionality for Yo.

This module contains the core data structures:
- Content-addressable object store
- Staging area
- Commit history log
- Repository management
- Hashing utilities

For the commit lifecycle, see yo.operations
"""

from yo.core.objects import ObjectStore
from yo.core.staging import StagingArea, StagingEntry
from yo.core.log import HistoryLog
from yo.core.repository import Repository
from yo.core.hash import hash_object, hash_parts

__all__ = [
    'ObjectStore',
    'StagingArea',
    'StagingEntry',
    'HistoryLog',
    'Repository',
    'hash_object',
    'hash_parts',
]
