"""Exception types for the UniFi guest-authorization client."""


class UnifiError(Exception):
    """Base exception for all client errors."""


class AddressError(UnifiError):
    """The controller base address is malformed."""


class TransportError(UnifiError):
    """The HTTP request failed before a response was received."""


class CancellationError(UnifiError):
    """The call context was cancelled or its deadline expired."""


class _StatusError(UnifiError):
    """An endpoint answered with a non-200 HTTP status."""

    def __init__(self, operation: str, status_code: int, body: str | None = None) -> None:
        self.operation = operation
        self.status_code = status_code
        self.body = body
        msg = f"{operation}: response status code {status_code}"
        if body:
            msg = f"{msg}: {body}"
        super().__init__(msg)


class AuthenticationError(_StatusError):
    """Login or logout was refused (non-200 status)."""


class CommandError(_StatusError):
    """A controller command was refused (non-200 status)."""


class DecodeError(UnifiError):
    """A response body is not a JSON object."""


class SchemaError(UnifiError):
    """A response envelope lacks a well-formed ``meta`` / ``meta.rc``."""
