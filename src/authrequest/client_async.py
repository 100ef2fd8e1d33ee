r"""Asynchronous client for authentication HTTP requests.

``AsyncRequestClient`` has the same contract as ``RequestClient`` but
sends requests with ``httpx.AsyncClient``. Each call still opens and
closes its own connection.
"""

from __future__ import annotations

__all__ = ["AsyncRequestClient", "make_request_async", "make_request_form_async"]

from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from authrequest.codec import DEFAULT_CODEC
from authrequest.config import DEFAULT_TIMEOUT
from authrequest.core.http_logic import (
    build_form_request,
    build_get_request,
    build_json_request,
    handle_response,
    send_request_async,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from authrequest.codec import JsonCodec
    from authrequest.core.http_logic import PreparedRequest
    from authrequest.proxy import ProxyLike

T = TypeVar("T")


class AsyncRequestClient:
    r"""Asynchronous client for the JSON and form requests of an
    authentication flow.

    Args:
        codec: The JSON codec used for request bodies and responses.
        headers: Default headers sent with every request. Per-call
            headers take precedence.

    Example:
        ```pycon
        >>> import asyncio
        >>> from authrequest import NO_PROXY, AsyncRequestClient
        >>> from authrequest.exceptions import AuthPendingError
        >>> async def poll(client, fields):
        ...     while True:
        ...         try:
        ...             return await client.make_request_form(
        ...                 NO_PROXY, "https://login.example.com/oauth2/token", fields, dict
        ...             )
        ...         except AuthPendingError:
        ...             await asyncio.sleep(5)
        ...
        >>> token = asyncio.run(poll(AsyncRequestClient(), {"device_code": "abc"}))  # doctest: +SKIP

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

    async def make_request(
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

        See ``RequestClient.make_request`` for arguments, return value
        and exceptions.
        """
        merged = self._merge_headers(headers)
        if input is None:
            request = build_get_request(proxy, uri, headers=merged)
        else:
            request = build_json_request(proxy, uri, input, codec=self._codec, headers=merged)
        return await self._execute(request, response_type)

    async def make_request_form(
        self,
        proxy: ProxyLike,
        uri: str | httpx.URL,
        input: Mapping[str, str],  # noqa: A002
        response_type: type[T] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> T | None:
        r"""Send a POST request with an URL-encoded form body.

        See ``RequestClient.make_request_form`` for arguments, return
        value and exceptions.
        """
        request = build_form_request(proxy, uri, input, headers=self._merge_headers(headers))
        return await self._execute(request, response_type)

    def _merge_headers(self, headers: Mapping[str, str] | None) -> httpx.Headers:
        merged = httpx.Headers(self._headers)
        merged.update(headers or {})
        return merged

    async def _execute(self, request: PreparedRequest, response_type: type[T] | None) -> T | None:
        response = await send_request_async(request, timeout=self._timeout)
        return handle_response(
            response, url=str(request.url), codec=self._codec, response_type=response_type
        )


_default_client = AsyncRequestClient()


async def make_request_async(
    proxy: ProxyLike,
    uri: str | httpx.URL,
    input: Any = None,  # noqa: A002
    response_type: type[T] | None = None,
    *,
    headers: Mapping[str, str] | None = None,
) -> T | None:
    r"""Send a GET or JSON POST request with the default async client.

    See ``RequestClient.make_request``.
    """
    return await _default_client.make_request(proxy, uri, input, response_type, headers=headers)


async def make_request_form_async(
    proxy: ProxyLike,
    uri: str | httpx.URL,
    input: Mapping[str, str],  # noqa: A002
    response_type: type[T] | None = None,
    *,
    headers: Mapping[str, str] | None = None,
) -> T | None:
    r"""Send a form POST request with the default async client.

    See ``RequestClient.make_request_form``.
    """
    return await _default_client.make_request_form(
        proxy, uri, input, response_type, headers=headers
    )
