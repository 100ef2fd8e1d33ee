r"""Utility functions for building request bodies and reading
responses."""

from __future__ import annotations

__all__ = ["encode_form", "parse_response_body"]

from authrequest.utils.form import encode_form
from authrequest.utils.response import parse_response_body
