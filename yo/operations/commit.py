"""Commit engine - turn the staging area into a commit.

A commit runs as a fixed sequence of steps:

1. READ_STAGING   read the whole staging record
2. WRITE_COMMIT   store the record as an object under the commit digest
3. APPEND_LOG     append a record to the history log
4. CLEAR_STAGING  delete the staging record

There is no rollback. If step N fails, the effects of steps 1..N-1 stay
on disk and the raised CommitFailure lists them in ``completed``. In
particular, a failure at CLEAR_STAGING leaves a commit object and a log
record behind while the same content remains staged, so the next commit
will include it again.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from yo.core.hash import hash_parts
from yo.exceptions import (
    CommitWriteFailure,
    IOFailure,
    LogAppendFailure,
    StagingClearFailure,
)

RFC1123_FORMAT = '%a, %d %b %Y %H:%M:%S %Z'


def local_now() -> datetime:
    """Current time as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


def format_timestamp(moment: datetime) -> str:
    """Format a datetime for the Time: line of a log record."""
    return moment.strftime(RFC1123_FORMAT).rstrip()


def format_log_record(digest: str, message: str, moment: datetime) -> str:
    """Render one history log record, including its blank separator line."""
    return f"Commit: {digest}\nMessage: {message}\nTime: {format_timestamp(moment)}\n\n"


class CommitStep(Enum):
    """Steps of a commit, in execution order."""
    READ_STAGING = 1
    WRITE_COMMIT = 2
    APPEND_LOG = 3
    CLEAR_STAGING = 4


@dataclass(frozen=True)
class CommitRecord:
    """
    Result of a successful commit.

    ``storage_key`` is where the commit object was written and
    ``display_digest`` is what the log shows. They are equal by
    construction. ``payload`` is what was written: the raw staging
    record, which is not what either digest was computed over.
    """
    storage_key: str
    display_digest: str
    payload: bytes
    message: str
    hashed_timestamp: str
    logged_at: datetime

    @property
    def digest(self) -> str:
        return self.display_digest

    @property
    def log_record(self) -> str:
        return format_log_record(self.display_digest, self.message, self.logged_at)

    def __repr__(self) -> str:
        msg_preview = self.message.split('\n')[0][:50]
        return f"CommitRecord(digest={self.display_digest[:7]}, msg='{msg_preview}')"


class CommitEngine:
    """
    Creates commits from the staging area of a repository.

    Args:
        repo: Repository instance
        clock: Callable returning the current time; called once for the
            hashed timestamp and again for the logged one
    """

    def __init__(self, repo, clock: Optional[Callable[[], datetime]] = None):
        self.repo = repo
        self.clock = clock or local_now

    def commit(self, message: str) -> CommitRecord:
        """
        Commit everything currently staged.

        Args:
            message: Commit message

        Returns:
            CommitRecord: Description of the new commit

        Raises:
            NoStagedChanges: If nothing is staged
            StagingUnreadable: If the staging record cannot be read
            CommitWriteFailure: If the commit object cannot be written
            LogAppendFailure: If the log record cannot be appended
            StagingClearFailure: If the staging record cannot be removed
        """
        completed: List[CommitStep] = []

        payload = self.repo.staging.read_bytes()
        completed.append(CommitStep.READ_STAGING)

        hashed_timestamp = str(self.clock())
        digest = hash_parts(payload, message, hashed_timestamp)
        storage_key = digest
        try:
            self.repo.objects.write(storage_key, payload)
        except IOFailure as e:
            raise CommitWriteFailure(
                "failed to write commit object", e.cause,
                step=CommitStep.WRITE_COMMIT, completed=completed,
            ) from e
        completed.append(CommitStep.WRITE_COMMIT)

        record = CommitRecord(
            storage_key=storage_key,
            display_digest=digest,
            payload=payload,
            message=message,
            hashed_timestamp=hashed_timestamp,
            logged_at=self.clock(),
        )
        try:
            self.repo.log.append(record.log_record)
        except IOFailure as e:
            raise LogAppendFailure(
                "failed to write log entry", e.cause,
                step=CommitStep.APPEND_LOG, completed=completed,
            ) from e
        completed.append(CommitStep.APPEND_LOG)

        try:
            self.repo.staging.clear()
        except IOFailure as e:
            raise StagingClearFailure(
                "failed to clear staging area", e.cause,
                step=CommitStep.CLEAR_STAGING, completed=completed,
            ) from e

        return record
