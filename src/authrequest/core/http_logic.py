r"""Request building, sending and response handling shared by the sync
and async clients.

Each request opens its own ``httpx`` client, sends a single request,
reads the whole body and closes the client before returning. Nothing
is pooled or cached between calls.

Redirects are followed only while they keep the scheme of the request:
a redirect from ``https`` to ``http`` (or the other way round) is not
followed and the redirect response itself is handled instead.
"""

from __future__ import annotations

__all__ = [
    "PreparedRequest",
    "build_form_request",
    "build_get_request",
    "build_json_request",
    "handle_response",
    "send_request",
    "send_request_async",
]

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from authrequest.config import (
    DEFAULT_TIMEOUT,
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    MAX_REDIRECTS,
)
from authrequest.core.errors import check_for_error
from authrequest.core.validation import validate_target
from authrequest.exceptions import ServiceUnavailableError
from authrequest.proxy import resolve_proxy
from authrequest.utils.form import encode_form
from authrequest.utils.response import parse_response_body

if TYPE_CHECKING:
    from collections.abc import Mapping

    from authrequest.codec import JsonCodec
    from authrequest.proxy import ProxyLike

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedRequest:
    r"""A fully built request, ready to be sent.

    Args:
        method: The HTTP method, ``"GET"`` or ``"POST"``.
        url: The absolute target URL.
        proxy: The ``httpx`` proxy, or ``None`` for a direct connection.
        content: The encoded body, or ``None`` for a request without body.
        content_type: The ``Content-Type`` of ``content``.
        headers: Additional request headers.
    """

    method: str
    url: httpx.URL
    proxy: httpx.Proxy | None
    content: bytes | None = None
    content_type: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def build_headers(self) -> httpx.Headers:
        r"""Return the headers to send.

        ``Content-Type`` and ``Content-Length`` describe the body and
        always replace caller-supplied values.
        """
        headers = httpx.Headers(self.headers)
        if self.content is not None:
            if self.content_type is not None:
                headers["Content-Type"] = self.content_type
            headers["Content-Length"] = str(len(self.content))
        return headers


def build_get_request(
    proxy: ProxyLike | None,
    uri: str | httpx.URL | None,
    *,
    headers: Mapping[str, str] | None = None,
) -> PreparedRequest:
    r"""Build a GET request without body.

    Raises:
        ValueError: If ``proxy`` or ``uri`` is ``None`` or ``uri`` is
            not a valid absolute URL.
    """
    url = validate_target(proxy, uri)
    return PreparedRequest(
        method="GET", url=url, proxy=resolve_proxy(proxy), headers=dict(headers or {})
    )


def build_json_request(
    proxy: ProxyLike | None,
    uri: str | httpx.URL | None,
    payload: Any,
    *,
    codec: JsonCodec,
    headers: Mapping[str, str] | None = None,
) -> PreparedRequest:
    r"""Build a POST request with a JSON body.

    Raises:
        ValueError: If ``proxy`` or ``uri`` is ``None`` or ``uri`` is
            not a valid absolute URL.
    """
    url = validate_target(proxy, uri)
    return PreparedRequest(
        method="POST",
        url=url,
        proxy=resolve_proxy(proxy),
        content=codec.encode(payload),
        content_type=JSON_CONTENT_TYPE,
        headers=dict(headers or {}),
    )


def build_form_request(
    proxy: ProxyLike | None,
    uri: str | httpx.URL | None,
    fields: Mapping[str, str],
    *,
    headers: Mapping[str, str] | None = None,
) -> PreparedRequest:
    r"""Build a POST request with an URL-encoded form body.

    Raises:
        ValueError: If ``proxy`` or ``uri`` is ``None`` or ``uri`` is
            not a valid absolute URL.
        UnicodeEncodeError: If a field cannot be encoded as UTF-8.
        TypeError: If a field key or value is not a ``str``.
    """
    url = validate_target(proxy, uri)
    return PreparedRequest(
        method="POST",
        url=url,
        proxy=resolve_proxy(proxy),
        content=encode_form(fields).encode("utf-8"),
        content_type=FORM_CONTENT_TYPE,
        headers=dict(headers or {}),
    )


def _service_unavailable(
    request: PreparedRequest, exc: httpx.RequestError
) -> ServiceUnavailableError:
    logger.debug(
        f"{request.method} request to {request.url} encountered {type(exc).__name__}: {exc}"
    )
    return ServiceUnavailableError(
        f"Could not make request to '{request.url}'.", url=str(request.url)
    )


def _next_redirect(response: httpx.Response, redirects: int) -> httpx.Request | None:
    next_request = response.next_request
    if next_request is None:
        return None
    if next_request.url.scheme != response.request.url.scheme:
        logger.debug(
            f"Not following redirect from {response.request.url} to {next_request.url}: "
            "the scheme changes"
        )
        return None
    if redirects >= MAX_REDIRECTS:
        msg = f"Exceeded maximum allowed redirects ({MAX_REDIRECTS})."
        raise httpx.TooManyRedirects(msg, request=next_request)
    return next_request


def send_request(
    request: PreparedRequest, *, timeout: httpx.Timeout = DEFAULT_TIMEOUT
) -> httpx.Response:
    r"""Send a request over a dedicated connection and read the whole
    response.

    Args:
        request: The request to send.
        timeout: The connect and read timeouts.

    Returns:
        The response, with its body already read. Non-2xx status codes
        are returned, not raised. A redirect that changes the scheme
        is returned as is.

    Raises:
        ServiceUnavailableError: If the request fails at the transport
            level (connection, DNS, proxy, timeout, more than
            ``MAX_REDIRECTS`` redirects...). The ``httpx`` exception is
            chained as the cause.
    """
    logger.debug(f"Sending {request.method} request to {request.url}")
    try:
        with httpx.Client(
            proxy=request.proxy, timeout=timeout, trust_env=False, follow_redirects=False
        ) as client:
            response = client.request(
                request.method,
                request.url,
                content=request.content,
                headers=request.build_headers(),
            )
            redirects = 0
            next_request = _next_redirect(response, redirects)
            while next_request is not None:
                response = client.send(next_request)
                redirects += 1
                next_request = _next_redirect(response, redirects)
    except httpx.RequestError as exc:
        raise _service_unavailable(request, exc) from exc
    logger.debug(
        f"{request.method} request to {request.url} returned status {response.status_code}"
    )
    return response


async def send_request_async(
    request: PreparedRequest, *, timeout: httpx.Timeout = DEFAULT_TIMEOUT
) -> httpx.Response:
    r"""Send a request asynchronously over a dedicated connection.

    See ``send_request`` for the contract.
    """
    logger.debug(f"Sending {request.method} request to {request.url}")
    try:
        async with httpx.AsyncClient(
            proxy=request.proxy, timeout=timeout, trust_env=False, follow_redirects=False
        ) as client:
            response = await client.request(
                request.method,
                request.url,
                content=request.content,
                headers=request.build_headers(),
            )
            redirects = 0
            next_request = _next_redirect(response, redirects)
            while next_request is not None:
                response = await client.send(next_request)
                redirects += 1
                next_request = _next_redirect(response, redirects)
    except httpx.RequestError as exc:
        raise _service_unavailable(request, exc) from exc
    logger.debug(
        f"{request.method} request to {request.url} returned status {response.status_code}"
    )
    return response


def handle_response(
    response: httpx.Response,
    *,
    url: str,
    codec: JsonCodec,
    response_type: type[T] | None = None,
) -> T | None:
    r"""Turn a response into a typed value or a classified error.

    The body is read whatever the status code. A body that is absent or
    not JSON yields ``None``. Otherwise reported errors are raised
    before the body is converted to ``response_type``.

    Args:
        response: The response, with its body already read.
        url: The requested URL, attached to raised errors.
        codec: The codec used to parse and convert the body.
        response_type: The type to convert the body to, or ``None`` to
            discard it.

    Returns:
        The converted body, or ``None``.

    Raises:
        RequestError: If the body reports an error (see
            ``check_for_error``).
        pydantic.ValidationError: If the body does not match
            ``response_type``.
    """
    payload = parse_response_body(response.content, codec)
    if payload is None:
        return None
    check_for_error(payload, url=url, status_code=response.status_code)
    if response_type is None:
        return None
    return codec.convert(payload, response_type)
