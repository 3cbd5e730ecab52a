"""SHA-256 digest function for hashed columns"""

import hashlib

from hashfield.core.errors import HashError


DIGEST_SIZE = 32


def sha256_bytes(data: bytes) -> bytes:
    """Return the raw 32-byte SHA-256 digest of data."""
    return hashlib.sha256(data).digest()


def sha256_digest(text: str, encoding: str = "utf-8") -> bytes:
    """Return the raw 32-byte SHA-256 digest of text encoded with encoding."""
    if not isinstance(text, str):
        raise HashError(f"Expected text, got {type(text).__name__}")
    try:
        data = text.encode(encoding)
    except UnicodeEncodeError as e:
        raise HashError(f"Text has no {encoding} encoding: {e}") from e
    return sha256_bytes(data)
