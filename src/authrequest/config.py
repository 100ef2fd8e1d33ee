r"""Fixed configuration constants for authentication HTTP requests.

The timeouts are deliberately not configurable per call: every request
waits at most ``CONNECT_TIMEOUT`` seconds to connect and
``READ_TIMEOUT`` seconds between reads before failing with
``ServiceUnavailableError``.
"""

from __future__ import annotations

__all__ = [
    "CONNECT_TIMEOUT",
    "DEFAULT_TIMEOUT",
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "MAX_REDIRECTS",
    "READ_TIMEOUT",
]

import httpx

# Seconds to wait while establishing the connection (through the proxy if any)
CONNECT_TIMEOUT = 15.0

# Seconds to wait for each chunk of the response
READ_TIMEOUT = 15.0

# Write and pool phases share the read budget
DEFAULT_TIMEOUT = httpx.Timeout(READ_TIMEOUT, connect=CONNECT_TIMEOUT, read=READ_TIMEOUT)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"

# Same-scheme redirects followed before giving up
MAX_REDIRECTS = 20
