"""Unit tests for core/utils/hashing.py"""

import pytest

from hashfield.core.errors import HashError
from hashfield.core.utils.hashing import DIGEST_SIZE, sha256_digest


HELLO_HEX = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
EMPTY_HEX = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.mark.parametrize("text,expected", [
    ("hello", HELLO_HEX),
    ("", EMPTY_HEX),
])
def test_sha256_digest_known_values(text, expected):
    """sha256_digest matches published SHA-256 vectors."""
    assert sha256_digest(text).hex() == expected


@pytest.mark.parametrize("text", ["", "a", "x" * 10_000, "héllo wörld ✓"])
def test_sha256_digest_fixed_length(text):
    """Digest length is 32 bytes regardless of input length."""
    assert len(sha256_digest(text)) == DIGEST_SIZE == 32


def test_sha256_digest_deterministic():
    """Repeated calls on the same text produce identical bytes."""
    assert sha256_digest("same") == sha256_digest("same")


def test_sha256_digest_encoding_changes_bytes():
    """Non-ASCII text hashes differently under different encodings."""
    assert sha256_digest("é", "utf-8") != sha256_digest("é", "latin-1")


def test_sha256_digest_rejects_unencodable():
    """A lone surrogate has no UTF-8 encoding and raises HashError."""
    with pytest.raises(HashError):
        sha256_digest("\ud800")


def test_sha256_digest_rejects_non_text():
    """Bytes are not text and raise HashError."""
    with pytest.raises(HashError):
        sha256_digest(b"hello")
