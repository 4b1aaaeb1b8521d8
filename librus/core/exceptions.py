"""
Custom exceptions for Librus operations.

Every failure the client can surface has its own class so callers can
tell "could not reach the service" (TransportError) from "reached it but
it rejected the request" (ApiError, AuthenticationError) and "reached it
but the response shape was unexpected" (DecodeError).
"""
from typing import Optional


class LibrusError(Exception):
    """Base exception for all Librus-related errors."""
    pass


class CredentialsError(LibrusError):
    """Exception raised when credentials cannot be resolved."""
    pass


class MissingEnvVarError(CredentialsError):
    """A required environment variable is not set."""

    def __init__(self, name: str) -> None:
        """
        Initialize the exception.

        Args:
            name: Name of the missing environment variable
        """
        self.name = name
        super().__init__(f"environment variable `{name}` is not set")


class MissingCredentialError(CredentialsError):
    """A required credential field was never provided."""

    def __init__(self, field: str) -> None:
        """
        Initialize the exception.

        Args:
            field: Name of the missing field ('username' or 'password')
        """
        self.field = field
        super().__init__(f"missing required credential: {field}")


class AuthenticationError(LibrusError):
    """The login handshake completed but the token check was rejected."""

    def __init__(self, status: Optional[int] = None) -> None:
        self.status = status
        message = "authentication failed: invalid credentials or server error"
        if status is not None:
            message += f" (token info status {status})"
        super().__init__(message)


class TransportError(LibrusError):
    """Network, TLS, timeout or connection failure."""

    def __init__(self, cause: BaseException, url: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            cause: Underlying transport exception
            url: URL of the request that failed (if known)
        """
        self.cause = cause
        self.url = url
        detail = str(cause) or type(cause).__name__
        if url:
            super().__init__(f"request to {url} failed: {detail}")
        else:
            super().__init__(f"request failed: {detail}")


class ApiError(LibrusError):
    """The API answered with a non-2xx status."""

    def __init__(
        self,
        status: int,
        body: bytes,
        url: Optional[str] = None,
        message: Optional[str] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            status: HTTP status code returned by the API
            body: Raw response body, kept verbatim
            url: URL of the failed request
            message: Text used in the error message (defaults to the body)
        """
        self.status = status
        self.body = body
        self.url = url
        if message is None:
            message = self.text
        super().__init__(f"API error (status {status}): {message}")

    @property
    def text(self) -> str:
        """Body decoded for display; undecodable bytes are replaced."""
        return self.body.decode('utf-8', errors='replace')


class DecodeError(LibrusError):
    """A response body did not match the expected shape."""

    def __init__(self, cause: Exception, body: bytes) -> None:
        """
        Initialize the exception.

        Args:
            cause: The underlying validation/parse error
            body: The exact raw body that failed to decode
        """
        self.cause = cause
        self.body = body
        super().__init__(f"failed to parse response: {cause}")

    @property
    def text(self) -> str:
        """Body decoded for display; undecodable bytes are replaced."""
        return self.body.decode('utf-8', errors='replace')
