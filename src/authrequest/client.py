r"""Synchronous client for authentication HTTP requests.

This module provides ``RequestClient`` and the module-level shortcuts
``make_request`` and ``make_request_form`` that use a default client.
Every call is blocking and uses its own connection: the client keeps no
connection, session or cache between calls, so one instance can be
shared by several threads.
"""

from __future__ import annotations

__all__ = ["RequestClient", "make_request", "make_request_form"]

from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from authrequest.codec import DEFAULT_CODEC
from authrequest.config import DEFAULT_TIMEOUT
from authrequest.core.http_logic import (
    build_form_request,
    build_get_request,
    build_json_request,
    handle_response,
    send_request,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from authrequest.codec import JsonCodec
    from authrequest.core.http_logic import PreparedRequest
    from authrequest.proxy import ProxyLike

T = TypeVar("T")


class RequestClient:
    r"""Client for the JSON and form requests of an authentication flow.

    Args:
        codec: The JSON codec used for request bodies and responses.
        headers: Default headers sent with every request (e.g.
            ``User-Agent``). Per-call headers take precedence.

    Example:
        ```pycon
        >>> from dataclasses import dataclass
        >>> from authrequest import NO_PROXY, RequestClient
        >>> @dataclass
        ... class Session:
        ...     accessToken: str
        ...
        >>> client = RequestClient(headers={"User-Agent": "launcher/1.0"})
        >>> session = client.make_request(  # doctest: +SKIP
        ...     NO_PROXY,
        ...     "https://authserver.example.com/authenticate",
        ...     {"username": "steve", "password": "secret"},
        ...     Session,
        ... )

        ```
    """

    def __init__(
        self,
        codec: JsonCodec = DEFAULT_CODEC,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._codec = codec
        self._headers = dict(headers or {})
        self._timeout: httpx.Timeout = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(codec={self._codec!r}, headers={self._headers!r})"

    @property
    def codec(self) -> JsonCodec:
        return self._codec

    def make_request(
        self,
        proxy: ProxyLike,
        uri: str | httpx.URL,
        input: Any = None,  # noqa: A002
        response_type: type[T] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> T | None:
        r"""Send a GET request, or a JSON POST request if ``input`` is
        given.

        Args:
            proxy: The proxy to send the request through. Use
                ``NO_PROXY`` for a direct connection.
            uri: The absolute URI to send the request to.
            input: The value serialized as the JSON body. If ``None``,
                a GET request without body is sent.
            response_type: The type to convert the JSON response to.
                If ``None``, the response body is discarded once checked
                for errors.
            headers: Additional headers for this request only.

        Returns:
            The converted response, or ``None`` if ``response_type`` is
            ``None`` or the response has no JSON body.

        Raises:
            ValueError: If ``proxy`` or ``uri`` is ``None`` or ``uri``
                is not a valid absolute URL. Nothing is sent.
            ServiceUnavailableError: If the server cannot be reached.
            UserMigratedError: If the server reports a migrated account.
            InvalidCredentialsError: If the server reports a forbidden
                operation.
            AuthPendingError: If the server reports a pending
                authorization.
            RequestError: If the server reports any other error.
        """
        merged = self._merge_headers(headers)
        if input is None:
            request = build_get_request(proxy, uri, headers=merged)
        else:
            request = build_json_request(proxy, uri, input, codec=self._codec, headers=merged)
        return self._execute(request, response_type)

    def make_request_form(
        self,
        proxy: ProxyLike,
        uri: str | httpx.URL,
        input: Mapping[str, str],  # noqa: A002
        response_type: type[T] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> T | None:
        r"""Send a POST request with an URL-encoded form body.

        The fields are encoded in the iteration order of ``input``.

        Args:
            proxy: The proxy to send the request through. Use
                ``NO_PROXY`` for a direct connection.
            uri: The absolute URI to send the request to.
            input: The form fields.
            response_type: The type to convert the JSON response to.
            headers: Additional headers for this request only.

        Returns:
            The converted response, or ``None``.

        Raises:
            ValueError: If ``proxy`` or ``uri`` is ``None`` or ``uri``
                is not a valid absolute URL, or if a field cannot be
                encoded as UTF-8. Nothing is sent.
            TypeError: If a field key or value is not a ``str``. Nothing
                is sent.
            RequestError: See ``make_request``.
        """
        request = build_form_request(proxy, uri, input, headers=self._merge_headers(headers))
        return self._execute(request, response_type)

    def _merge_headers(self, headers: Mapping[str, str] | None) -> httpx.Headers:
        merged = httpx.Headers(self._headers)
        merged.update(headers or {})
        return merged

    def _execute(self, request: PreparedRequest, response_type: type[T] | None) -> T | None:
        response = send_request(request, timeout=self._timeout)
        return handle_response(
            response, url=str(request.url), codec=self._codec, response_type=response_type
        )


_default_client = RequestClient()


def make_request(
    proxy: ProxyLike,
    uri: str | httpx.URL,
    input: Any = None,  # noqa: A002
    response_type: type[T] | None = None,
    *,
    headers: Mapping[str, str] | None = None,
) -> T | None:
    r"""Send a GET or JSON POST request with the default client.

    See ``RequestClient.make_request``.

    Example:
        ```pycon
        >>> from authrequest import NO_PROXY, make_request
        >>> make_request(  # doctest: +SKIP
        ...     NO_PROXY,
        ...     "https://authserver.example.com/invalidate",
        ...     {"accessToken": "abc", "clientToken": "def"},
        ... )

        ```
    """
    return _default_client.make_request(proxy, uri, input, response_type, headers=headers)


def make_request_form(
    proxy: ProxyLike,
    uri: str | httpx.URL,
    input: Mapping[str, str],  # noqa: A002
    response_type: type[T] | None = None,
    *,
    headers: Mapping[str, str] | None = None,
) -> T | None:
    r"""Send a form POST request with the default client.

    See ``RequestClient.make_request_form``.
    """
    return _default_client.make_request_form(proxy, uri, input, response_type, headers=headers)
