r"""Exceptions raised when an authentication request fails.

Every failure reported by a server, and every transport failure, is a
``RequestError``. Precondition violations (a missing proxy or URI) are
plain ``ValueError`` and are raised before any network I/O.

Example:
    ```pycon
    >>> from authrequest.exceptions import InvalidCredentialsError, UserMigratedError
    >>> exc = UserMigratedError("Account migrated", error="ForbiddenOperationException")
    >>> isinstance(exc, InvalidCredentialsError)
    True
    >>> str(exc)
    'Account migrated'

    ```
"""

from __future__ import annotations

__all__ = [
    "AuthPendingError",
    "InvalidCredentialsError",
    "RequestError",
    "ServiceUnavailableError",
    "UserMigratedError",
]


class RequestError(Exception):
    r"""Base exception for failed authentication requests.

    Raised directly when the server reports an error code that has no
    more specific exception class.

    Args:
        message: The message supplied by the server, or a description
            of the failure. It is the sole payload of ``str(exc)``.
        url: The URL that was requested, if known.
        status_code: The HTTP status code of the response, if a
            response was received.
        error: The server error code (the ``error`` field), if any.
        cause: The server error cause (the ``cause`` field), if any.

    Example:
        ```pycon
        >>> from authrequest.exceptions import RequestError
        >>> exc = RequestError("Bad request", status_code=400, error="invalid_grant")
        >>> exc.status_code, exc.error
        (400, 'invalid_grant')

        ```
    """

    def __init__(
        self,
        message: str = "",
        *,
        url: str | None = None,
        status_code: int | None = None,
        error: str | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code
        self.error = error
        self.cause = cause

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(message={self.message!r}, url={self.url!r}, "
            f"status_code={self.status_code!r}, error={self.error!r})"
        )


class ServiceUnavailableError(RequestError):
    r"""Raised when the server cannot be reached.

    Covers connection failures, DNS failures, proxy failures and
    timeouts. The underlying ``httpx`` exception is chained as
    ``__cause__``.
    """


class InvalidCredentialsError(RequestError):
    r"""Raised when the server rejects the operation as forbidden."""


class UserMigratedError(InvalidCredentialsError):
    r"""Raised when the server reports that the account was migrated."""


class AuthPendingError(RequestError):
    r"""Raised while a device-code authorization is still pending.

    This is an expected, transient condition: the caller should wait
    and poll again.
    """
