"""Hashed field contract: cast, dump, load and digest-aware equality

Stores a deterministic SHA-256 digest of a value so that an encrypted column
can be queried for equality through its hash. Hashing is unsalted on purpose:
identical values share a digest, which makes the column usable as a lookup
key and also reveals which rows hold the same value.

Pipeline stages, as called by the host mapping layer:

    cast(value)   -> canonical text, bytes or None  before persistence
    dump(text)    -> 32-byte digest (or None)       immediately before a write
    load(digest)  -> digest, unchanged              immediately after a read
    equal(a, b)   -> bool                           plaintext or digest on either side
"""

import logging
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Protocol, Union
from uuid import UUID

from hashfield.core.errors import CastError, HashError
from hashfield.core.utils.hashing import sha256_bytes, sha256_digest


logger = logging.getLogger(__name__)

STORAGE_KIND = "binary"


class Digest(bytes):
    """Marks bytes as an already-computed digest so they are never re-hashed."""

    def __repr__(self) -> str:
        return f"Digest({self.hex()!r})"


class HashedField(Protocol):
    """The five operations a hashed column type exposes to the mapping layer."""

    def storage_kind(self) -> str: ...

    def cast(self, value: Any) -> Union[str, bytes, None]: ...

    def dump(self, value: Union[str, bytes, None]) -> Optional[bytes]: ...

    def load(self, value: Any) -> Any: ...

    def equal(self, a: Any, b: Any) -> bool: ...


class SHA256Field:
    """Stateless SHA-256 implementation of HashedField."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"SHA256Field(encoding={self.encoding!r})"

    def storage_kind(self) -> str:
        return STORAGE_KIND

    def cast(self, value: Any) -> Union[str, bytes, None]:
        """Coerce value to canonical text, or raw bytes for binary input.

        None passes through; raises CastError for values with no text form.
        """
        if value is None:
            return None
        try:
            return self._to_text(value)
        except CastError as e:
            logger.warning("Rejected value for hashing: %s", e)
            raise

    def _to_text(self, value: Any) -> Union[str, bytes]:
        if isinstance(value, Digest):
            raise CastError(value, "value is already a digest")
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return self._to_text(value.value)
        if isinstance(value, (int, float, Decimal, UUID)):
            return str(value)
        if isinstance(value, (date, time)):
            return value.isoformat()
        raise CastError(value)

    def dump(self, value: Union[str, bytes, None]) -> Optional[bytes]:
        """Return the digest of validated text or bytes, or None for None."""
        if value is None:
            return None
        return self.hash(value)

    def load(self, value: Any) -> Any:
        """Stored bytes are already the final digest."""
        return value

    def hash(self, value: Union[str, bytes]) -> bytes:
        if isinstance(value, (bytes, bytearray)):
            return sha256_bytes(bytes(value))
        return sha256_digest(value, self.encoding)

    def equal(self, a: Any, b: Any) -> bool:
        """Compare two values that may each be plaintext or a digest.

        Text and scalars are hashed the way dump would hash them; other values
        are compared as-is. Untagged bytes count as plaintext when they are
        valid UTF-8, whatever the field encoding, so a stored digest that
        happens to be valid UTF-8 is re-hashed and the comparison comes out
        wrong. Wrap known digests in Digest to avoid it.
        """
        return self._normalize(a) == self._normalize(b)

    def _normalize(self, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, Digest):
            return bytes(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
            try:
                raw.decode("utf-8")
            except UnicodeDecodeError:
                return raw
            return sha256_bytes(raw)
        try:
            return self.hash(self._to_text(value))
        except (CastError, HashError):
            return value
