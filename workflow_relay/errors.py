"""
Relay error types.

Every failure the relay can report is one of the classes below. Each carries
the HTTP status it maps to plus structured fields, so callers branch on the
type instead of parsing the message.
"""
import json
from typing import Any, Optional


class RelayError(Exception):
    """Base exception for all relay errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInput(RelayError):
    """Raised when the request body is not valid JSON or lacks content."""

    status_code = 400
    code = "INVALID_INPUT"


class MethodNotAllowed(RelayError):
    """Raised when an endpoint is called with an unsupported method."""

    status_code = 405
    code = "METHOD_NOT_ALLOWED"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__("Method not allowed")


class Unauthorized(RelayError):
    """Raised when a webhook signature does not verify."""

    status_code = 401
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Invalid signature") -> None:
        super().__init__(message)


class PreconditionFailed(RelayError):
    """Raised when the remote read returned no version token."""

    code = "PRECONDITION_FAILED"

    def __init__(self, message: str = "File not found or no permission") -> None:
        super().__init__(message)


class RemoteAPIError(RelayError):
    """Raised when GitHub answers with a non-success status."""

    code = "REMOTE_API_ERROR"

    def __init__(self, remote_status: int, remote_body: Any) -> None:
        self.remote_status = remote_status
        self.remote_body = remote_body
        super().__init__(
            f"GitHub API error {remote_status}:\n"
            f"{json.dumps(remote_body, indent=2, ensure_ascii=False)}"
        )


class NonJSONResponse(RelayError):
    """Raised when GitHub answers with a body that is not JSON."""

    code = "NON_JSON_RESPONSE"

    def __init__(self, raw_text: str, remote_status: Optional[int] = None) -> None:
        self.raw_text = raw_text
        self.remote_status = remote_status
        super().__init__(f"GitHub returned a non-JSON response:\n{raw_text}")


class RemoteUnavailable(RelayError):
    """Raised when GitHub could not be reached at all."""

    code = "REMOTE_UNAVAILABLE"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"GitHub request failed: {reason}")


class MalformedPayload(RelayError):
    """Raised when a verified webhook body is not JSON."""

    code = "MALFORMED_PAYLOAD"

    def __init__(self, message: str = "Malformed webhook payload") -> None:
        super().__init__(message)
