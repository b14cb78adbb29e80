"""DigestService — MD5 fingerprints and random base64 tokens."""

from __future__ import annotations

from bfn.domain.digest import (
    md5_as_base64,
    md5_as_uuid,
    md5_verify_base64,
    md5_verify_uuid,
    random_base64,
)
from bfn.domain.uuids import parse_uuid
from bfn.services.base import BaseService
from bfn.services.result import ServiceResult
from bfn.services.telemetry import traced


class DigestService(BaseService):
    @traced
    def md5(self, value: str, *, as_uuid: bool = False) -> ServiceResult:
        """Fingerprint *value* as base64 (default) or UUID text."""
        digest = str(md5_as_uuid(value)) if as_uuid else md5_as_base64(value)
        return ServiceResult.success("md5", format="uuid" if as_uuid else "base64", value=digest)

    @traced
    def verify(self, value: str, expected: str) -> ServiceResult:
        """Check *value* against an expected fingerprint.

        *expected* is compared as a UUID when it parses as one, otherwise as
        base64 text.
        """
        expected_uuid = parse_uuid(expected)
        if expected_uuid is not None:
            matches, fmt = md5_verify_uuid(value, expected_uuid), "uuid"
        else:
            matches, fmt = md5_verify_base64(value, expected), "base64"
        return ServiceResult.success("md5_verify", format=fmt, matches=matches)

    @traced
    def random(self, size: int | None = None) -> ServiceResult:
        """Random base64 token of *size* bytes (default from ``[digest]``)."""
        op = "random_base64"
        nbytes = self._settings.digest.random_bytes if size is None else size
        if nbytes < 1 or nbytes > 1024:
            return ServiceResult.failure(
                op, "INVALID_SIZE", f"Size must be between 1 and 1024 bytes, got {nbytes}"
            )
        return ServiceResult.success(op, bytes=nbytes, value=random_base64(nbytes))
