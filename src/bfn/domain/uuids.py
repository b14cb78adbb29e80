"""Time-ordered identifier codec (UUID version 7).

Layout of the 16-byte big-endian buffer:
- bytes 0..5   48-bit Unix epoch milliseconds
- byte 6       high nibble = version (7), low nibble = random
- byte 7       random
- byte 8       top two bits = RFC 4122 variant (0b10), rest random
- bytes 9..15  random

INVARIANT: decoding never raises. Wrong version, out-of-range instant, and
calendar construction failure all yield ``None``.
"""

from __future__ import annotations

import logging
import os
import time
import uuid
from datetime import UTC, datetime, timedelta

logger = logging.getLogger(__name__)

UUID_VERSION = 7

# Calendar years 0001..9999 (the range a datetime can represent).
MIN_EPOCH_SECONDS = -62_135_596_800
MAX_EPOCH_SECONDS = 253_402_300_799

_MAX_UNIX_MS = (1 << 48) - 1
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _as_bytes(value: uuid.UUID | bytes) -> bytes:
    if isinstance(value, uuid.UUID):
        return value.bytes
    return bytes(value)


def uuid_version(value: uuid.UUID | bytes) -> int:
    """Return the version nibble (high 4 bits of byte 6)."""
    return (_as_bytes(value)[6] >> 4) & 0x0F


def generate_time_ordered_id(unix_ms: int | None = None) -> uuid.UUID:
    """Generate a version-7 identifier for *unix_ms* (default: now).

    Every non-timestamp bit except the version and variant markers comes
    from ``os.urandom``, which is safe to call from concurrent threads.
    """
    if unix_ms is None:
        unix_ms = time.time_ns() // 1_000_000
    if not 0 <= unix_ms <= _MAX_UNIX_MS:
        msg = f"unix_ms must fit in 48 bits, got {unix_ms}"
        raise ValueError(msg)

    buf = bytearray(os.urandom(16))
    for i in range(6):
        buf[i] = (unix_ms >> (40 - 8 * i)) & 0xFF
    buf[6] = (UUID_VERSION << 4) | (buf[6] & 0x0F)
    buf[8] = 0x80 | (buf[8] & 0x3F)
    return uuid.UUID(bytes=bytes(buf))


def decode_timestamp(value: uuid.UUID | bytes) -> datetime | None:
    """Extract the embedded UTC timestamp from a version-7 identifier.

    Returns ``None`` when the identifier is not version 7, when the encoded
    instant lies outside years 0001..9999, or when the calendar conversion
    fails. Byte input of the wrong length carries no timestamp either.
    """
    raw = _as_bytes(value)
    if len(raw) != 16:
        return None
    if (raw[6] >> 4) & 0x0F != UUID_VERSION:
        return None

    timestamp_ms = (
        (raw[0] << 40)
        | (raw[1] << 32)
        | (raw[2] << 24)
        | (raw[3] << 16)
        | (raw[4] << 8)
        | raw[5]
    )
    seconds = timestamp_ms // 1000
    nanos = (timestamp_ms % 1000) * 1_000_000
    if seconds < MIN_EPOCH_SECONDS or seconds > MAX_EPOCH_SECONDS:
        return None

    try:
        return _EPOCH + timedelta(seconds=seconds, microseconds=nanos // 1000)
    except (OverflowError, ValueError):
        logger.debug("Calendar conversion failed for %d ms", timestamp_ms, exc_info=True)
        return None


def parse_uuid(text: str) -> uuid.UUID | None:
    """Parse user-supplied UUID text; malformed input yields ``None``."""
    try:
        return uuid.UUID(text.strip())
    except (ValueError, AttributeError):
        return None
