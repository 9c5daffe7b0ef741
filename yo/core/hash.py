"""Digest helpers shared by the object store and the commit engine."""

import hashlib
from typing import Union

Chunk = Union[bytes, str]

DIGEST_LENGTH = 40


def hash_object(data: bytes) -> str:
    """
    Compute the SHA-1 digest of raw content.

    Args:
        data: Bytes to hash

    Returns:
        40-character lowercase hex string
    """
    return hashlib.sha1(data).hexdigest()


def hash_parts(*parts: Chunk) -> str:
    """
    Compute the SHA-1 digest of several chunks as if concatenated.

    Text chunks are encoded as UTF-8, so
    ``hash_parts(b'a', 'b') == hash_object(b'ab')``. Undecodable bytes
    that arrived as surrogates (e.g. from argv) are restored as-is.

    Returns:
        40-character lowercase hex string
    """
    hasher = hashlib.sha1()
    for part in parts:
        if isinstance(part, str):
            part = part.encode('utf-8', errors='surrogateescape')
        hasher.update(part)
    return hasher.hexdigest()


def is_digest(value: str) -> bool:
    """Check whether value looks like a full hex digest."""
    if len(value) != DIGEST_LENGTH:
        return False
    return all(c in '0123456789abcdef' for c in value)
