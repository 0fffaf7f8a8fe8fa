"""Workers API client exceptions."""

from __future__ import annotations

from typing import Any, Optional


class WorkersError(Exception):
    """Base class for workers client errors."""


class AccountIdRequiredError(WorkersError):
    """Raised when a multi-script request is made without an account ID."""

    def __init__(self, message: str = "account ID required for multi-script request") -> None:
        super().__init__(message)


class BindingSerializationError(WorkersError):
    """Raised when a binding cannot be encoded into upload metadata."""


class RequestFailedError(WorkersError):
    """Raised when the transport could not complete a request."""


class UnmarshalFailedError(WorkersError):
    """Raised when a response body does not decode into the expected envelope."""


class TransportError(WorkersError):
    """Raised by a transport when the HTTP exchange itself fails."""


class APIRequestError(TransportError):
    """Raised by a transport when the API answers with an error status."""

    def __init__(
        self,
        status: int,
        errors: Optional[list[dict[str, Any]]] = None,
        body: bytes = b"",
    ) -> None:
        self.status = status
        self.errors = errors or []
        self.body = body
        detail = "; ".join(
            f"{item.get('code', '?')}: {item.get('message', '')}" for item in self.errors
        )
        super().__init__(f"HTTP {status}" + (f" ({detail})" if detail else ""))
