"""
Error taxonomy for the gateway.

InvalidInput is surfaced to the HTTP caller as a 400. Every RemoteError is
caught at the orchestration boundary and turned into a fallback reply, so
provider failures never reach the client as an HTTP error status.
"""

from typing import Any, Optional


class GatewayError(Exception):
    """Base class for all errors raised by the gateway."""


class InvalidInput(GatewayError):
    pass


class RemoteError(GatewayError):
    """A call to the generative-language provider did not produce a reply."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def payload(self) -> Any:
        """Diagnostic value attached to fallback replies."""
        if self.detail is not None:
            return self.detail
        return self.message


class TransportError(RemoteError):
    """Network failure, timeout, or a response body that is not JSON."""


class RateLimited(RemoteError):
    """Provider kept answering 429 until the retry budget ran out."""


class ProviderError(RemoteError):
    """Non-retryable provider status, or a success response with no candidates."""
