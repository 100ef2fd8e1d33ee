from __future__ import annotations

from typing import Any

import pytest

from authrequest.core import check_for_error
from authrequest.exceptions import (
    AuthPendingError,
    InvalidCredentialsError,
    RequestError,
    UserMigratedError,
)

TEST_URL = "https://authserver.example.com/authenticate"


#####################################
#     Tests for check_for_error     #
#####################################


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"accessToken": "abc", "clientToken": "def"},
        {"error": ""},
        {"error": "", "errorMessage": "ignored", "cause": "UserMigratedException"},
        {"error": None},
        {"errorMessage": "no error code"},
    ],
)
def test_check_for_error_normal_object(payload: dict[str, Any]) -> None:
    """Test that objects without an error code never raise."""
    check_for_error(payload)


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        [{"error": "ForbiddenOperationException"}],
        "ForbiddenOperationException",
        1,
        True,
    ],
)
def test_check_for_error_ignores_non_objects(payload: Any) -> None:
    """Test that only JSON objects are checked."""
    check_for_error(payload)


def test_check_for_error_user_migrated() -> None:
    """Test that a migrated account raises UserMigratedError."""
    with pytest.raises(UserMigratedError) as exc_info:
        check_for_error(
            {
                "error": "ForbiddenOperationException",
                "cause": "UserMigratedException",
                "errorMessage": "m1",
            }
        )
    assert str(exc_info.value) == "m1"
    assert exc_info.value.cause == "UserMigratedException"


def test_check_for_error_invalid_credentials_without_cause() -> None:
    """Test that a forbidden operation without cause raises
    InvalidCredentialsError."""
    with pytest.raises(InvalidCredentialsError) as exc_info:
        check_for_error({"error": "ForbiddenOperationException", "errorMessage": "m2"})
    assert type(exc_info.value) is InvalidCredentialsError
    assert str(exc_info.value) == "m2"
    assert exc_info.value.cause == ""


def test_check_for_error_invalid_credentials_other_cause() -> None:
    """Test that a forbidden operation with another cause raises
    InvalidCredentialsError."""
    with pytest.raises(InvalidCredentialsError) as exc_info:
        check_for_error(
            {
                "error": "ForbiddenOperationException",
                "cause": "UserBannedException",
                "errorMessage": "Banned",
            }
        )
    assert type(exc_info.value) is InvalidCredentialsError


def test_check_for_error_auth_pending_empty_message() -> None:
    """Test that a pending authorization raises AuthPendingError with an
    empty message."""
    with pytest.raises(AuthPendingError) as exc_info:
        check_for_error({"error": "authorization_pending"})
    assert str(exc_info.value) == ""


def test_check_for_error_auth_pending_description() -> None:
    """Test that OAuth error descriptions are used as message."""
    with pytest.raises(AuthPendingError, match=r"^User has not yet authenticated\.$"):
        check_for_error(
            {
                "error": "authorization_pending",
                "error_description": "User has not yet authenticated.",
            }
        )


def test_check_for_error_generic() -> None:
    """Test that unknown error codes raise a plain RequestError."""
    with pytest.raises(RequestError) as exc_info:
        check_for_error({"error": "invalid_grant", "errorMessage": "Expired"})
    assert type(exc_info.value) is RequestError
    assert str(exc_info.value) == "Expired"
    assert exc_info.value.error == "invalid_grant"


def test_check_for_error_description_overrides_message() -> None:
    """Test that error_description takes precedence over
    errorMessage."""
    with pytest.raises(RequestError, match=r"^b$"):
        check_for_error({"error": "e", "errorMessage": "a", "error_description": "b"})


def test_check_for_error_description_without_message() -> None:
    """Test that error_description is used when errorMessage is
    absent."""
    with pytest.raises(InvalidCredentialsError, match=r"^b$"):
        check_for_error({"error": "ForbiddenOperationException", "error_description": "b"})


def test_check_for_error_null_description_clears_message() -> None:
    """Test that a present but null error_description still overrides
    errorMessage."""
    with pytest.raises(RequestError) as exc_info:
        check_for_error({"error": "e", "errorMessage": "a", "error_description": None})
    assert str(exc_info.value) == ""


def test_check_for_error_non_string_fields() -> None:
    """Test that scalar fields are read as their JSON text."""
    with pytest.raises(RequestError) as exc_info:
        check_for_error({"error": 400, "errorMessage": True})
    assert exc_info.value.error == "400"
    assert str(exc_info.value) == "true"


def test_check_for_error_attaches_details() -> None:
    """Test that the URL and status code are attached to the error."""
    with pytest.raises(InvalidCredentialsError) as exc_info:
        check_for_error(
            {"error": "ForbiddenOperationException", "errorMessage": "Invalid"},
            url=TEST_URL,
            status_code=403,
        )
    assert exc_info.value.url == TEST_URL
    assert exc_info.value.status_code == 403
    assert exc_info.value.error == "ForbiddenOperationException"
