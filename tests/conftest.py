from __future__ import annotations

import pytest

from authrequest.proxy import NO_PROXY, Proxy

PROXY_URL = "http://proxy.example.com:3128"


@pytest.fixture(params=["direct", "proxied"])
def proxy(request: pytest.FixtureRequest) -> Proxy:
    """Return a direct and a proxied connection in turn."""
    if request.param == "direct":
        return NO_PROXY
    return Proxy(PROXY_URL)


@pytest.fixture(autouse=True)
def clear_proxy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove proxy environment variables so they cannot leak into
    tests."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "NO_PROXY"):
        monkeypatch.delenv(name.lower(), raising=False)
        monkeypatch.delenv(name, raising=False)
