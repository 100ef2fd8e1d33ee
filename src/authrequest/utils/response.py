r"""HTTP response body parsing utilities.

A body that is missing, empty, not UTF-8, or not JSON is treated as
absent: it is neither checked for errors nor converted.
"""

from __future__ import annotations

__all__ = ["parse_response_body"]

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from authrequest.codec import JsonCodec

logger: logging.Logger = logging.getLogger(__name__)


def parse_response_body(content: bytes | None, codec: JsonCodec) -> Any | None:
    r"""Parse a raw response body into a generic JSON value.

    Args:
        content: The raw response body, or ``None`` if the server sent
            no body.
        codec: The codec used to parse the JSON text.

    Returns:
        The parsed JSON value, or ``None`` if the body is absent or is
        not a JSON document. A JSON ``null`` also yields ``None``.

    Example:
        ```pycon
        >>> from authrequest.codec import DEFAULT_CODEC
        >>> from authrequest.utils.response import parse_response_body
        >>> parse_response_body(b'{"accessToken": "abc"}', DEFAULT_CODEC)
        {'accessToken': 'abc'}
        >>> parse_response_body(b"", DEFAULT_CODEC) is None
        True
        >>> parse_response_body(b"<html></html>", DEFAULT_CODEC) is None
        True

        ```
    """
    if not content:
        return None
    try:
        return codec.decode(content.decode("utf-8"))
    except ValueError as exc:
        logger.debug(f"Ignoring response body that is not JSON: {exc}")
        return None
