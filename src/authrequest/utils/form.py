r"""Form body encoding."""

from __future__ import annotations

__all__ = ["encode_form"]

from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

if TYPE_CHECKING:
    from collections.abc import Mapping


def encode_form(fields: Mapping[str, str]) -> str:
    r"""Encode fields as an ``application/x-www-form-urlencoded`` body.

    Keys and values are percent-encoded as UTF-8 (a space becomes
    ``%20``) and the ``key=value`` pairs are joined with ``&`` in the
    iteration order of ``fields``.

    Args:
        fields: The form fields.

    Returns:
        The encoded body.

    Raises:
        TypeError: If a key or value is not a ``str``.
        UnicodeEncodeError: If a key or value cannot be encoded as
            UTF-8 (e.g. it contains a lone surrogate).

    Example:
        ```pycon
        >>> from authrequest.utils.form import encode_form
        >>> encode_form({"a": "1 2", "b": "x&y"})
        'a=1%202&b=x%26y'

        ```
    """
    for key, value in fields.items():
        if not isinstance(key, str) or not isinstance(value, str):
            msg = (
                "Form field keys and values must be str, "
                f"got {type(key).__qualname__}: {type(value).__qualname__}"
            )
            raise TypeError(msg)
    return urlencode(list(fields.items()), safe="", encoding="utf-8", quote_via=quote)
