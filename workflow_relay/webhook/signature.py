"""
Webhook signature computation and verification (X-Hub-Signature-256).
"""
import hashlib
import hmac
from typing import Optional

from ..logger import logger


SIGNATURE_PREFIX = "sha256="


def compute_signature(payload_body: bytes, secret: str) -> str:
    """
    Compute the signature token GitHub sends for a payload.

    Args:
        payload_body: Raw request body as bytes
        secret: Shared webhook secret

    Returns:
        Token of the form ``sha256=<lowercase hex digest>``
    """
    digest = hmac.new(
        secret.encode("utf-8"),
        payload_body,
        hashlib.sha256
    ).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_signature(payload_body: bytes, signature: Optional[str], secret: str) -> bool:
    """
    Verify a webhook signature against the raw body.

    Args:
        payload_body: Raw request body exactly as received
        signature: X-Hub-Signature-256 header value, if any
        secret: Shared webhook secret

    Returns:
        True if the signature is present and identical to the expected token
    """
    if not signature:
        logger.warning("No signature header provided")
        return False

    expected = compute_signature(payload_body, secret)

    # Constant-time; same outcome as plain equality. Flagged for security
    # review in DESIGN.md ("Constant-time comparison")
    is_valid = hmac.compare_digest(
        expected.encode("utf-8"),
        signature.encode("utf-8", errors="replace"),
    )

    if not is_valid:
        logger.warning("Webhook signature verification failed")

    return is_valid
