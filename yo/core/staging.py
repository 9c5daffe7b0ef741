"""Staging area implementation."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from yo.core.objects import ObjectStore
from yo.exceptions import IOFailure, NoStagedChanges, StagingUnreadable, UnreadableSource


@dataclass(frozen=True)
class StagingEntry:
    """
    A single staged file.

    Stores the digest of the content as it was when staged and the
    path exactly as it was given.
    """
    digest: str
    path: str

    def to_line(self) -> bytes:
        """
        Render the entry as one staging record line.

        The path is written with the filesystem encoding, so names that
        are not valid UTF-8 keep their raw bytes.
        """
        return self.digest.encode('ascii') + b' ' + os.fsencode(self.path) + b'\n'

    @classmethod
    def from_line(cls, line: bytes) -> 'StagingEntry':
        """Parse one staging record line (paths may contain spaces)."""
        digest, _, path = line.rstrip(b'\n').partition(b' ')
        return cls(digest=digest.decode('ascii', errors='replace'), path=os.fsdecode(path))

    def __repr__(self) -> str:
        return f"StagingEntry({self.digest[:7]} {self.path})"


class StagingArea:
    """
    Yo staging area.

    An append-only text record with one ``"<digest> <path>"`` line per
    added file, in the order the files were added. The same path may
    appear more than once. The record only exists between the first
    add after a commit and the next commit.
    """

    def __init__(self, staging_file: Path, objects: ObjectStore, base_dir: Optional[Path] = None):
        """
        Initialize staging area.

        Args:
            staging_file: Path to the staging record
            objects: Store receiving the staged content
            base_dir: Directory relative paths are read from (defaults
                to the process working directory)
        """
        self.staging_file = Path(staging_file)
        self.objects = objects
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def add(self, filepath: Union[str, Path]) -> StagingEntry:
        """
        Stage a file for commit.

        The file content is written to the object store, then one line is
        appended to the staging record. Existing lines are never read.

        Args:
            filepath: Path to file, recorded as given (relative paths
                are read from base_dir)

        Returns:
            StagingEntry: The appended entry

        Raises:
            UnreadableSource: If the file does not exist or cannot be read
            IOFailure: If the object or the staging line cannot be written
        """
        source = Path(filepath)
        if self.base_dir is not None and not source.is_absolute():
            source = self.base_dir / source

        try:
            with open(source, 'rb') as f:
                content = f.read()
        except OSError as e:
            raise UnreadableSource(f"failed to read file {filepath}", e) from e

        digest = self.objects.put(content)
        entry = StagingEntry(digest=digest, path=str(filepath))

        try:
            with open(self.staging_file, 'ab') as f:
                f.write(entry.to_line())
        except OSError as e:
            raise IOFailure("failed to write to staging area", e) from e

        return entry

    def read_bytes(self) -> bytes:
        """
        Read the whole staging record.

        Raises:
            NoStagedChanges: If the record is missing or empty
            StagingUnreadable: If the record cannot be read
        """
        try:
            data = self.staging_file.read_bytes()
        except FileNotFoundError as e:
            raise NoStagedChanges("nothing staged to commit", e) from e
        except OSError as e:
            raise StagingUnreadable("failed to read staging area", e) from e

        if not data:
            raise NoStagedChanges("nothing staged to commit")
        return data

    def entries(self) -> List[StagingEntry]:
        """Get staged entries in insertion order (empty if nothing staged)."""
        if not self.staging_file.exists():
            return []
        try:
            data = self.staging_file.read_bytes()
        except OSError as e:
            raise StagingUnreadable("failed to read staging area", e) from e
        return [StagingEntry.from_line(line) for line in data.split(b'\n') if line]

    def clear(self) -> None:
        """
        Delete the staging record.

        Raises:
            IOFailure: If the record cannot be removed
        """
        try:
            self.staging_file.unlink()
        except OSError as e:
            raise IOFailure("failed to clear staging area", e) from e

    def __len__(self) -> int:
        return len(self.entries())

    def __repr__(self) -> str:
        return f"StagingArea(entries={len(self)})"
