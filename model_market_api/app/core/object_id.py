"""
Document identifier parsing.

Every route that addresses a single model receives its identifier as a
path string.  ``parse_object_id`` is the one place that turns such a
string into a BSON ``ObjectId``; handlers catch ``InvalidObjectId`` to
log malformed identifiers separately from store failures.
"""

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId


class InvalidObjectId(ValueError):
    """Raised when a string is not a valid 24‑character hex ObjectId."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Malformed document identifier: {value!r}")
        self.value = value


def parse_object_id(value: Any) -> ObjectId:
    """Return ``value`` as an ``ObjectId`` or raise ``InvalidObjectId``.

    Existing ``ObjectId`` instances are returned unchanged.  Only
    24‑character hex strings are accepted; the 12‑byte form that
    ``bson`` also understands is refused because path parameters are
    always text.
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or len(value) != 24:
        raise InvalidObjectId(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidObjectId(value) from exc
