"""Operations module for high-level Yo operations.

This module contains the business logic for:
- Commit creation (staging area -> commit object + log record)
"""

from yo.operations.commit import CommitEngine, CommitRecord, CommitStep

__all__ = [
    'CommitEngine', 'CommitRecord', 'CommitStep',
]
