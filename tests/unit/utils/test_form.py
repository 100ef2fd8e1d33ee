from __future__ import annotations

import pytest

from authrequest.utils import encode_form

#################################
#     Tests for encode_form     #
#################################


def test_encode_form_escapes_space_and_ampersand() -> None:
    """Test that spaces and ampersands are percent-encoded."""
    assert encode_form({"a": "1 2", "b": "x&y"}) == "a=1%202&b=x%26y"


def test_encode_form_keeps_insertion_order() -> None:
    """Test that fields follow the mapping iteration order."""
    assert encode_form({"z": "1", "a": "2", "m": "3"}) == "z=1&a=2&m=3"


def test_encode_form_empty() -> None:
    """Test that an empty mapping gives an empty body."""
    assert encode_form({}) == ""


def test_encode_form_single_field() -> None:
    """Test that a single field has no separator."""
    assert encode_form({"grant_type": "refresh_token"}) == "grant_type=refresh_token"


def test_encode_form_escapes_keys() -> None:
    """Test that keys are encoded like values."""
    assert encode_form({"a key=": "v"}) == "a%20key%3D=v"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("a+b", "a%2Bb"),
        ("a=b", "a%3Db"),
        ("a/b", "a%2Fb"),
        (
            "https://login.live.com/oauth20_desktop.srf",
            "https%3A%2F%2Flogin.live.com%2Foauth20_desktop.srf",
        ),
        ("é", "%C3%A9"),
        (
            "service::user.auth.xboxlive.com::MBI_SSL",
            "service%3A%3Auser.auth.xboxlive.com%3A%3AMBI_SSL",
        ),
    ],
)
def test_encode_form_utf8_percent_encoding(value: str, expected: str) -> None:
    """Test UTF-8 percent-encoding of reserved and non ASCII
    characters."""
    assert encode_form({"v": value}) == f"v={expected}"


def test_encode_form_unencodable_value() -> None:
    """Test that a value that is not valid UTF-8 is reported instead of
    dropped."""
    with pytest.raises(UnicodeEncodeError):
        encode_form({"a": "\ud800"})


@pytest.mark.parametrize(
    "fields",
    [
        {"a": None},
        {"a": 1},
        {1: "a"},
        {"a": b"bytes"},
    ],
)
def test_encode_form_rejects_non_str_fields(fields: dict) -> None:
    """Test that keys and values that are not strings are rejected
    instead of converted with ``str()``."""
    with pytest.raises(TypeError, match=r"Form field keys and values must be str"):
        encode_form(fields)
