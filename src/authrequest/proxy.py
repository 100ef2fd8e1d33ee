r"""Proxy descriptions for authentication requests.

A proxy argument is mandatory on every request. ``NO_PROXY`` states
explicitly that the request goes out directly. Proxy environment
variables (``HTTP_PROXY``, ``ALL_PROXY``...) are never consulted.

Example:
    ```pycon
    >>> from authrequest.proxy import NO_PROXY, Proxy, resolve_proxy
    >>> resolve_proxy(NO_PROXY) is None
    True
    >>> resolve_proxy(Proxy("http://localhost:3128")).url
    URL('http://localhost:3128')

    ```
"""

from __future__ import annotations

__all__ = ["NO_PROXY", "Proxy", "ProxyLike", "resolve_proxy"]

from dataclasses import dataclass
from typing import Union

import httpx


@dataclass(frozen=True)
class Proxy:
    r"""Immutable description of the proxy to route a request through.

    Args:
        url: The proxy URL (``http://``, ``https://`` or ``socks5://``),
            or ``None`` for a direct connection.
        auth: Optional ``(username, password)`` pair sent to the proxy.

    Example:
        ```pycon
        >>> from authrequest.proxy import Proxy
        >>> Proxy().is_direct
        True
        >>> Proxy("socks5://127.0.0.1:1080").is_direct
        False

        ```
    """

    url: str | None = None
    auth: tuple[str, str] | None = None

    @property
    def is_direct(self) -> bool:
        return self.url is None

    def to_httpx(self) -> httpx.Proxy | None:
        """Convert to the ``httpx`` proxy object, or ``None`` when
        direct."""
        if self.url is None:
            return None
        return httpx.Proxy(self.url, auth=self.auth)


NO_PROXY = Proxy()

ProxyLike = Union[Proxy, httpx.Proxy, str]


def resolve_proxy(proxy: ProxyLike) -> httpx.Proxy | None:
    r"""Normalize a proxy argument into what ``httpx`` expects.

    Args:
        proxy: A ``Proxy``, an ``httpx.Proxy`` or a proxy URL string.

    Returns:
        The ``httpx.Proxy`` to use, or ``None`` for a direct connection.

    Raises:
        TypeError: If ``proxy`` is not one of the supported types.
    """
    if isinstance(proxy, Proxy):
        return proxy.to_httpx()
    if isinstance(proxy, httpx.Proxy):
        return proxy
    if isinstance(proxy, str):
        return httpx.Proxy(proxy)
    msg = f"Unsupported proxy type: {type(proxy).__qualname__}"
    raise TypeError(msg)
