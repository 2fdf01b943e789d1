"""Response Envelope: the uniform {success, ...} JSON shape returned by every endpoint.

Invariants:
    - Success envelopes always carry success=True plus the caller's payload keys
    - Failure envelopes carry exactly success=False and a human-readable message
    - Payload keys can never override the success flag
"""

from typing import Any


def success_envelope(**payload: Any) -> dict:
    """Build `{success: true, ...payload}`."""
    payload.pop("success", None)
    return {"success": True, **payload}


def failure_envelope(message: str) -> dict:
    """Build `{success: false, message}`."""
    return {"success": False, "message": message}
