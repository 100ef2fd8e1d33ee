r"""Classification of errors reported in JSON response bodies.

Authentication servers report failures as a JSON object with an
``error`` code, an optional ``cause`` and a human readable message in
``errorMessage`` or, for OAuth style endpoints, ``error_description``.
"""

from __future__ import annotations

__all__ = [
    "AUTHORIZATION_PENDING",
    "FORBIDDEN_OPERATION",
    "USER_MIGRATED",
    "check_for_error",
]

import json
from typing import Any

from authrequest.exceptions import (
    AuthPendingError,
    InvalidCredentialsError,
    RequestError,
    UserMigratedError,
)

FORBIDDEN_OPERATION = "ForbiddenOperationException"
USER_MIGRATED = "UserMigratedException"
AUTHORIZATION_PENDING = "authorization_pending"


def _get_string(payload: dict[str, Any], key: str) -> str | None:
    """Read a field as text, or ``None`` when absent or ``null``."""
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value)


def check_for_error(
    payload: Any,
    *,
    url: str | None = None,
    status_code: int | None = None,
) -> None:
    r"""Raise the exception matching the error reported in a response.

    Only JSON objects are inspected. An object without an ``error``
    field, or whose ``error`` is empty, is a normal payload. The
    message is taken from ``error_description`` when present, otherwise
    from ``errorMessage``, otherwise it is empty.

    Args:
        payload: The parsed JSON response body.
        url: The requested URL, attached to the raised exception.
        status_code: The HTTP status code, attached to the raised
            exception.

    Raises:
        UserMigratedError: If ``error`` is ``ForbiddenOperationException``
            and ``cause`` is ``UserMigratedException``.
        InvalidCredentialsError: If ``error`` is
            ``ForbiddenOperationException`` with any other cause.
        AuthPendingError: If ``error`` is ``authorization_pending``.
        RequestError: For any other non-empty ``error``.

    Example:
        ```pycon
        >>> from authrequest.core.errors import check_for_error
        >>> check_for_error({"accessToken": "abc"})
        >>> check_for_error(["ForbiddenOperationException"])
        >>> check_for_error({"error": "ForbiddenOperationException", "errorMessage": "Invalid"})
        Traceback (most recent call last):
        ...
        authrequest.exceptions.InvalidCredentialsError: Invalid

        ```
    """
    if not isinstance(payload, dict):
        return
    error = _get_string(payload, "error")
    if not error:
        return

    cause = _get_string(payload, "cause") or ""
    message = _get_string(payload, "errorMessage") or ""
    if "error_description" in payload:
        message = _get_string(payload, "error_description") or ""

    details = {"url": url, "status_code": status_code, "error": error, "cause": cause}
    if error == FORBIDDEN_OPERATION:
        if cause == USER_MIGRATED:
            raise UserMigratedError(message, **details)
        raise InvalidCredentialsError(message, **details)
    if error == AUTHORIZATION_PENDING:
        raise AuthPendingError(message, **details)
    raise RequestError(message, **details)
