r"""Core shared logic for sync and async authentication requests.

This package contains the precondition checks, the error
classification and the request/response pipeline used by both
``RequestClient`` and ``AsyncRequestClient``.
"""

from __future__ import annotations

__all__ = [
    "PreparedRequest",
    "build_form_request",
    "build_get_request",
    "build_json_request",
    "check_for_error",
    "handle_response",
    "send_request",
    "send_request_async",
    "validate_target",
]

from authrequest.core.errors import check_for_error
from authrequest.core.http_logic import (
    PreparedRequest,
    build_form_request,
    build_get_request,
    build_json_request,
    handle_response,
    send_request,
    send_request_async,
)
from authrequest.core.validation import validate_target
