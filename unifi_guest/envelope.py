"""
Response-envelope parsing.

Every controller endpoint answers with the same JSON wrapper::

    {"meta": {"rc": "ok"}, "data": [...]}

``meta.rc`` is the logical result and is independent of the HTTP status: a
request can return 200 and still have been rejected.  The session operations
only check the HTTP status, so callers decode the body with
:func:`parse_response_envelope` to learn whether the command took effect.
"""

import json
from typing import Any

from .errors import DecodeError, SchemaError

RC_OK = "ok"


def parse_response_envelope(body: bytes | str) -> tuple[dict[str, Any], bool]:
    """
    Decode a controller response body.

    Args:
        body: Raw response bytes (or text) as returned by the controller.

    Returns:
        ``(envelope, ok)`` where *envelope* is the decoded JSON object and
        *ok* is True iff ``meta.rc == "ok"``.

    Raises:
        DecodeError: the body is not valid JSON or not a JSON object.
        SchemaError: ``meta`` is missing or not an object, or ``meta.rc`` is
            missing or not a string.
    """
    try:
        envelope = json.loads(body)
    except (ValueError, TypeError) as exc:
        raise DecodeError(f"Cannot decode response body: {exc}") from exc

    if not isinstance(envelope, dict):
        raise DecodeError(
            f"Response body is a JSON {type(envelope).__name__}, expected an object"
        )

    if "meta" not in envelope:
        raise SchemaError("'meta' does not exist in returned JSON")
    meta = envelope["meta"]
    if not isinstance(meta, dict):
        raise SchemaError(f"meta type: {type(meta).__name__}, expected an object")

    rc = meta.get("rc")
    if not isinstance(rc, str):
        raise SchemaError(f"rc type: {type(rc).__name__}, expected a string")

    return envelope, rc == RC_OK


def envelope_message(envelope: dict[str, Any]) -> str:
    """Return ``meta.msg`` (the controller's error key) or an empty string."""
    meta = envelope.get("meta")
    if isinstance(meta, dict):
        msg = meta.get("msg")
        if isinstance(msg, str):
            return msg
    return ""
