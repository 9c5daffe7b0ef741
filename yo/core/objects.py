"""Content-addressable object store for Yo."""

from pathlib import Path
from typing import Iterator

from yo.core.hash import hash_object, is_digest
from yo.exceptions import IOFailure, ObjectNotFound


class ObjectStore:
    """
    Flat content-addressable byte storage.

    Every object lives in a single file named by its key directly under
    the objects directory::

        .yo/objects/
        ├── aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d
        └── ...

    Content is stored verbatim, without headers or compression.
    """

    def __init__(self, objects_dir: Path):
        """
        Initialize store.

        Args:
            objects_dir: Directory holding the object files
        """
        self.objects_dir = Path(objects_dir)

    def path(self, key: str) -> Path:
        """
        Get filesystem path for an object.

        Args:
            key: 40-character object key

        Returns:
            Path: Full path to object file
        """
        return self.objects_dir / key

    def put(self, data: bytes) -> str:
        """
        Store content under its own digest.

        Writing content that is already present rewrites the same bytes,
        so repeated calls leave exactly one object.

        Args:
            data: Raw content

        Returns:
            str: SHA-1 digest of data

        Raises:
            IOFailure: If the object file cannot be written
        """
        digest = hash_object(data)
        self.write(digest, data)
        return digest

    def write(self, key: str, data: bytes) -> None:
        """
        Store content under an explicit key.

        Unlike put(), the key is not derived from data. Commit objects
        use this: their key covers message and time as well as content.

        Raises:
            IOFailure: If the object file cannot be written
        """
        try:
            with open(self.path(key), 'wb') as f:
                f.write(data)
        except OSError as e:
            raise IOFailure(f"failed to write object {key}", e) from e

    def get(self, key: str) -> bytes:
        """
        Read stored content back.

        Raises:
            ObjectNotFound: If no object is stored under key
            IOFailure: If the object file exists but cannot be read
        """
        path = self.path(key)
        if not is_digest(key) or not path.is_file():
            raise ObjectNotFound(f"object {key} not found")
        try:
            return path.read_bytes()
        except OSError as e:
            raise IOFailure(f"failed to read object {key}", e) from e

    def exists(self, key: str) -> bool:
        """Check if an object is stored under key."""
        return is_digest(key) and self.path(key).is_file()

    def __iter__(self) -> Iterator[str]:
        """Iterate over stored keys in sorted order."""
        if not self.objects_dir.is_dir():
            return iter(())
        keys = (p.name for p in self.objects_dir.iterdir() if p.is_file())
        return iter(sorted(k for k in keys if is_digest(k)))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"
