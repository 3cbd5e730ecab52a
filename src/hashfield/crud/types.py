"""SQLAlchemy column type that stores the SHA-256 digest of a value.

Declare the hash next to the column it stands in for and keep the two in
sync with hash_from:

    class Account(SQLModel, table=True):
        email: str = Field(sa_column=Column(EncryptedString, nullable=False))
        email_hash: Optional[bytes] = Field(
            default=None, sa_column=Column(SHA256Hash(), index=True)
        )

    hash_from(Account.email, Account.email_hash)

Plaintext used in query criteria is hashed the same way it is on write, so
select(Account).where(Account.email_hash == "user@example.com") matches.
"""

from typing import Any

from sqlalchemy import LargeBinary, TypeDecorator

from hashfield.config import Settings
from hashfield.core.field import Digest, SHA256Field
from hashfield.core.utils.hashing import DIGEST_SIZE


class SHA256Hash(TypeDecorator):
    """A binary column holding the SHA-256 digest of whatever is bound to it."""

    impl = LargeBinary(DIGEST_SIZE)
    cache_ok = True

    def __init__(self, encoding: str = "utf-8"):
        super().__init__()
        self.encoding = encoding
        self.field = SHA256Field(encoding)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SHA256Hash":
        return cls(encoding=settings.encoding)

    def process_bind_param(self, value: Any, dialect) -> bytes | None:
        """Hash before writing or comparing in SQL; tagged digests pass through."""
        if value is None:
            return None
        if isinstance(value, Digest):
            return bytes(value)
        return self.field.dump(self.field.cast(value))

    def process_result_value(self, value: Any, dialect) -> Any:
        return self.field.load(value)

    def compare_values(self, x: Any, y: Any) -> bool:
        return self.field.equal(x, y)
