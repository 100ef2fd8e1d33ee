r"""Precondition checks for authentication requests.

These checks run before any network I/O, so a failing check never
opens a connection.
"""

from __future__ import annotations

__all__ = ["validate_target"]

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from authrequest.proxy import ProxyLike


def validate_target(proxy: ProxyLike | None, uri: str | httpx.URL | None) -> httpx.URL:
    r"""Validate the proxy and URI of a request.

    Args:
        proxy: The proxy to send the request through.
        uri: The absolute URI to send the request to.

    Returns:
        The parsed URI.

    Raises:
        ValueError: If ``proxy`` or ``uri`` is ``None``, or if ``uri``
            is malformed or relative.

    Example:
        ```pycon
        >>> from authrequest.core.validation import validate_target
        >>> from authrequest.proxy import NO_PROXY
        >>> validate_target(NO_PROXY, "https://authserver.example.com/authenticate")
        URL('https://authserver.example.com/authenticate')
        >>> validate_target(None, "https://authserver.example.com")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: proxy cannot be None

        ```
    """
    if proxy is None:
        msg = "proxy cannot be None"
        raise ValueError(msg)
    if uri is None:
        msg = "uri cannot be None"
        raise ValueError(msg)
    try:
        url = httpx.URL(uri)
    except httpx.InvalidURL as exc:
        msg = f"uri is malformed: {uri!r}"
        raise ValueError(msg) from exc
    if not url.is_absolute_url:
        msg = f"uri must be absolute, got {uri!r}"
        raise ValueError(msg)
    return url
