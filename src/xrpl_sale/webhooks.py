"""
Webhook signature verification and event parsing.

Both functions are pure: no I/O and no shared state, so they can be called
concurrently from any number of tasks or threads.
"""

import hashlib
import hmac
import json
from typing import Optional, Union

from .constants import SIGNATURE_PREFIX
from .models.webhook import WebhookEvent

Payload = Union[str, bytes]


class WebhookError(Exception):
    """Base exception for webhook errors."""
    pass


class WebhookVerificationError(WebhookError):
    """Raised when a webhook signature does not match the payload."""
    pass


class WebhookParseError(WebhookError, ValueError):
    """Raised when a webhook payload cannot be decoded into an event."""
    pass


def _to_bytes(payload: Payload) -> bytes:
    if isinstance(payload, bytes):
        return payload
    return payload.encode("utf-8")


def sign_payload(payload: Payload, secret: str) -> str:
    """Return the ``sha256=<hexdigest>`` signature header value for a payload."""
    digest = hmac.new(secret.encode("utf-8"), _to_bytes(payload), hashlib.sha256)
    return f"{SIGNATURE_PREFIX}{digest.hexdigest()}"


def verify_signature(
    payload: Payload,
    signature: Optional[str],
    secret: Optional[str],
) -> bool:
    """
    Verify a webhook signature.

    Args:
        payload: The raw webhook payload
        signature: Value of the X-XRPL-Sale-Signature header
        secret: The webhook secret

    Returns:
        True only if the signature matches. An empty or missing secret
        never validates.
    """
    if not secret or not signature:
        return False

    expected = sign_payload(payload, secret)
    # Constant-time comparison to prevent timing attacks
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


def parse_event(payload: Payload) -> WebhookEvent:
    """
    Parse a webhook payload into an event.

    This does not verify the signature; call verify_signature first when
    the payload comes from an untrusted source.

    Raises:
        WebhookParseError: If the payload is not a JSON object
    """
    try:
        raw = payload.decode("utf-8") if isinstance(payload, bytes) else payload
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise WebhookParseError(f"Invalid JSON payload: {e}") from e

    if not isinstance(data, dict):
        raise WebhookParseError(
            f"Webhook payload must be a JSON object, got {type(data).__name__}"
        )

    kind = data.get("type") or data.get("event")
    if not isinstance(kind, str) or not kind:
        raise WebhookParseError("Webhook payload has no event type")

    event_id = data.get("id")
    return WebhookEvent(
        type=kind,
        data=data.get("data", {}),
        raw=raw,
        id=str(event_id) if event_id is not None else None,
        timestamp=data.get("timestamp"),
    )
