"""IdentifierService — time-ordered UUID generation and timestamp decoding."""

from __future__ import annotations

import logging

from bfn.domain.uuids import decode_timestamp, generate_time_ordered_id, parse_uuid, uuid_version
from bfn.services._helpers import iso_or_none
from bfn.services.base import BaseService
from bfn.services.result import ServiceResult
from bfn.services.telemetry import traced

logger = logging.getLogger(__name__)


class IdentifierService(BaseService):
    """Generates UUIDv7 identifiers and reads their embedded timestamps."""

    @traced
    def new(self, count: int = 1) -> ServiceResult:
        """Generate *count* fresh version-7 identifiers."""
        op = "new_uuid"
        limit = self._settings.uuid.max_batch
        if count < 1 or count > limit:
            return ServiceResult.failure(
                op,
                "INVALID_COUNT",
                f"Count must be between 1 and {limit}, got {count}",
                count=count,
                max_batch=limit,
            )

        items = []
        for _ in range(count):
            value = generate_time_ordered_id()
            items.append({"id": str(value), "timestamp": iso_or_none(decode_timestamp(value))})
        logger.debug("Generated %d time-ordered id(s)", count)
        return ServiceResult.success(op, count=count, items=items)

    @traced
    def timestamp(self, text: str) -> ServiceResult:
        """Decode the timestamp embedded in the UUID given as *text*.

        A well-formed UUID that carries no timestamp (not version 7, or an
        unrepresentable instant) is a successful result with a null
        timestamp.
        """
        op = "uuid_to_ts"
        value = parse_uuid(text)
        if value is None:
            return ServiceResult.failure(op, "INVALID_UUID", f"Not a UUID: {text!r}", input=text)

        decoded = decode_timestamp(value)
        if decoded is None:
            logger.debug("No timestamp in %s (version %d)", value, uuid_version(value))
        return ServiceResult.success(
            op, id=str(value), version=uuid_version(value), timestamp=iso_or_none(decoded)
        )
