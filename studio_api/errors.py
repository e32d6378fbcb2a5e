"""Domain-level exceptions for the studio proxy.

Every exception here is rendered by the app as ``{"error": message}`` with
``status_code`` as the HTTP status.
"""


class ProxyError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ProxyError, ValueError):
    """Raised for client-side invalid requests, before any upstream call."""

    status_code = 400


class UnknownProviderError(BadRequestError):
    def __init__(self, provider_id: object) -> None:
        super().__init__(f"Unknown provider: {provider_id}")
        self.provider_id = provider_id


class UnsupportedProviderError(BadRequestError):
    """A configured provider that this deployment refuses to call."""


class UpstreamError(ProxyError):
    """Upstream answered with a non-success status and an error message."""

    detail_provided = True

    def __init__(self, message: str, status_code: int, upstream: str) -> None:
        super().__init__(message, status_code=status_code)
        self.upstream = upstream


class UpstreamNoDetailError(UpstreamError):
    """Upstream failed without an error message; ``message`` is the generic fallback."""

    detail_provided = False


class UnexpectedResponseShapeError(ProxyError):
    """A success body did not match the upstream's documented response schema."""

    status_code = 500


class TransportError(ProxyError):
    """Network failure, unreadable body, or any other unexpected error during a call."""

    status_code = 500
