"""Repository management for Yo."""

import shutil
from pathlib import Path
from typing import Union

from yo.core.log import HistoryLog
from yo.core.objects import ObjectStore
from yo.core.staging import StagingArea, StagingEntry
from yo.exceptions import AlreadyInitialized, IOFailure


class Repository:
    """
    Represents a Yo repository.

    The repository root is always passed in explicitly. Relative file
    paths given to stage() are resolved against it, not against the
    process working directory.
    """

    def __init__(self, path: Union[str, Path] = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root
        """
        self.work_tree = Path(path).resolve()
        self.yo_dir = self.work_tree / '.yo'
        self.objects_dir = self.yo_dir / 'objects'
        self.logs_dir = self.yo_dir / 'logs'
        self.staging_file = self.yo_dir / 'staging'
        self.log_file = self.logs_dir / 'commits'

        self._objects = None
        self._staging = None
        self._log = None

    @property
    def objects(self) -> ObjectStore:
        """Get ObjectStore instance."""
        if self._objects is None:
            self._objects = ObjectStore(self.objects_dir)
        return self._objects

    @property
    def staging(self) -> StagingArea:
        """Get StagingArea instance."""
        if self._staging is None:
            self._staging = StagingArea(self.staging_file, self.objects, base_dir=self.work_tree)
        return self._staging

    @property
    def log(self) -> HistoryLog:
        """Get HistoryLog instance."""
        if self._log is None:
            self._log = HistoryLog(self.log_file)
        return self._log

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .yo directory structure:
        .yo/
        ├── objects/       # Object database
        └── logs/          # Commit history (logs/commits)

        The staging record and the commit log are created on first use.
        If creation fails part way, the partial .yo directory is removed.

        Returns:
            Repository: self for method chaining

        Raises:
            AlreadyInitialized: If a .yo directory already exists
            IOFailure: If the structure cannot be created
        """
        if self.yo_dir.exists():
            raise AlreadyInitialized(f".yo directory already exists at {self.yo_dir}")

        try:
            self.objects_dir.mkdir(parents=True)
            self.logs_dir.mkdir()
        except OSError as e:
            shutil.rmtree(self.yo_dir, ignore_errors=True)
            raise IOFailure("failed to create .yo directory", e) from e

        return self

    def stage(self, filepath: Union[str, Path]) -> StagingEntry:
        """Stage a file; see StagingArea.add()."""
        return self.staging.add(filepath)

    def commit(self, message: str, clock=None):
        """
        Commit everything staged; see CommitEngine.commit().

        Args:
            message: Commit message
            clock: Optional callable returning the current datetime

        Returns:
            CommitRecord: The new commit
        """
        from yo.operations.commit import CommitEngine
        return CommitEngine(self, clock=clock).commit(message)

    def history(self) -> str:
        """Return the full commit log text, oldest first."""
        return self.log.read()

    def read_object(self, key: str) -> bytes:
        """Read raw object content by key."""
        return self.objects.get(key)

    def object_exists(self, key: str) -> bool:
        return self.objects.exists(key)

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"


def initialize(root: Union[str, Path]) -> Repository:
    """Create a new repository at root."""
    return Repository(root).init()


def stage(root: Union[str, Path], path: Union[str, Path]) -> StagingEntry:
    """Stage the file at path in the repository at root."""
    return Repository(root).stage(path)


def commit(root: Union[str, Path], message: str, clock=None):
    """Commit everything staged in the repository at root."""
    return Repository(root).commit(message, clock=clock)


def history(root: Union[str, Path]) -> str:
    """Return the commit log of the repository at root."""
    return Repository(root).history()

