r"""authrequest - HTTP request helper for authentication clients.

This package sends the GET, JSON POST and form POST requests of an
authentication flow through a caller-supplied proxy, parses the JSON
responses and raises typed exceptions for the errors reported by the
server. It is built on top of httpx and pydantic.

Key Features:
    - GET, JSON POST and URL-encoded form POST requests
    - Mandatory, explicit proxy (``NO_PROXY`` for direct connections)
    - Fixed 15 second connect and read timeouts
    - Typed responses (dataclasses, pydantic models, TypedDict...)
    - UUIDs written and read in their canonical hyphenated form
    - Typed exceptions for server errors (invalid credentials, migrated
      account, pending device authorization...)
    - Sync and async clients

Example:
    ```pycon
    >>> from authrequest import NO_PROXY, make_request_form
    >>> from authrequest.exceptions import AuthPendingError
    >>> try:  # doctest: +SKIP
    ...     token = make_request_form(
    ...         NO_PROXY,
    ...         "https://login.example.com/oauth2/token",
    ...         {"grant_type": "device_code", "device_code": "abc"},
    ...         dict,
    ...     )
    ... except AuthPendingError:
    ...     pass  # poll again later
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CODEC",
    "NO_PROXY",
    "AsyncRequestClient",
    "AuthPendingError",
    "InvalidCredentialsError",
    "JsonCodec",
    "Proxy",
    "RequestClient",
    "RequestError",
    "ServiceUnavailableError",
    "UserMigratedError",
    "__version__",
    "make_request",
    "make_request_async",
    "make_request_form",
    "make_request_form_async",
]

from importlib.metadata import PackageNotFoundError, version

from authrequest.client import RequestClient, make_request, make_request_form
from authrequest.client_async import (
    AsyncRequestClient,
    make_request_async,
    make_request_form_async,
)
from authrequest.codec import DEFAULT_CODEC, JsonCodec
from authrequest.exceptions import (
    AuthPendingError,
    InvalidCredentialsError,
    RequestError,
    ServiceUnavailableError,
    UserMigratedError,
)
from authrequest.proxy import NO_PROXY, Proxy

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
