"""Errors raised by the Yo core.

Every operation either returns its result or raises exactly one
``YoError``. ``str(err)`` is a single line naming what failed and,
where there is one, the underlying cause.
"""

from typing import Optional, Sequence


class YoError(Exception):
    """Base class for all Yo errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class AlreadyInitialized(YoError):
    """A repository already exists at the requested root."""


class IOFailure(YoError):
    """Generic storage read/write failure."""


class UnreadableSource(YoError):
    """A file to be staged does not exist or cannot be read."""


class ObjectNotFound(YoError):
    """No object is stored under the requested digest."""


class StagingUnreadable(YoError):
    """The staging record exists but could not be read."""


class NoStagedChanges(StagingUnreadable):
    """There is nothing staged to commit."""


class LogUnavailable(YoError):
    """The history log does not exist yet (no commit has been made)."""


class CommitFailure(YoError):
    """
    A commit stopped part way through.

    ``step`` is the step that failed and ``completed`` the steps that
    finished before it. Their effects are left on disk as they are.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        step=None,
        completed: Sequence = (),
    ):
        super().__init__(message, cause)
        self.step = step
        self.completed = tuple(completed)


class CommitWriteFailure(CommitFailure):
    """The commit object could not be written."""


class LogAppendFailure(CommitFailure):
    """The log record could not be appended."""


class StagingClearFailure(CommitFailure):
    """The staging record could not be removed after committing."""
