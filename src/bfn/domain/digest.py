"""MD5 fingerprints and random tokens.

MD5 is used here as a compact, stable fingerprint for matching rows across
systems, not as a security primitive.
"""

from __future__ import annotations

import base64
import hashlib
import os
import uuid

DEFAULT_RANDOM_BYTES = 36


def _md5(value: str) -> bytes:
    return hashlib.md5(value.encode("utf-8"), usedforsecurity=False).digest()


def md5_as_base64(value: str) -> str:
    """MD5 digest of *value* (UTF-8), standard base64 encoded."""
    return base64.b64encode(_md5(value)).decode("ascii")


def md5_as_uuid(value: str) -> uuid.UUID:
    """MD5 digest of *value* reinterpreted as a UUID (bytes kept verbatim)."""
    return uuid.UUID(bytes=_md5(value))


def md5_verify_base64(value: str, expected: str) -> bool:
    return md5_as_base64(value) == expected


def md5_verify_uuid(value: str, expected: uuid.UUID) -> bool:
    return md5_as_uuid(value) == expected


def random_base64(size: int = DEFAULT_RANDOM_BYTES) -> str:
    """Base64 encoding of *size* random bytes."""
    if size < 0:
        msg = f"size must be non-negative, got {size}"
        raise ValueError(msg)
    return base64.b64encode(os.urandom(size)).decode("ascii")
