import json

import pytest

from bookmore.core.errors import (
    ChallengeNotFoundError,
    DuplicatedEmailError,
    DuplicatedNicknameError,
    ErrorCode,
    InvalidPasswordError,
    InvalidPermissionError,
    InvalidTokenError,
    ReviewNotFoundError,
    UserNotFoundError,
)
from bookmore.utils.responses import error_response, paginated_result, success_response


@pytest.mark.parametrize(
    "error_code, status_code",
    [
        (ErrorCode.USER_NOT_FOUND, 404),
        (ErrorCode.REVIEW_NOT_FOUND, 404),
        (ErrorCode.CHALLENGE_NOT_FOUND, 404),
        (ErrorCode.DUPLICATED_EMAIL, 409),
        (ErrorCode.DUPLICATED_NICKNAME, 409),
        (ErrorCode.INVALID_PASSWORD, 401),
        (ErrorCode.INVALID_TOKEN, 401),
        (ErrorCode.INVALID_PERMISSION, 401),
        (ErrorCode.INVALID_EMAIL_FORMAT, 400),
        (ErrorCode.DATABASE_ERROR, 500),
    ],
)
def test_error_code_status(error_code, status_code):
    assert error_code.status_code == status_code
    assert error_code.code == error_code.name
    assert error_code.message


def test_error_codes_are_distinct_members():
    assert len(list(ErrorCode)) == 10


@pytest.mark.parametrize(
    "exc_class, error_code",
    [
        (UserNotFoundError, ErrorCode.USER_NOT_FOUND),
        (ReviewNotFoundError, ErrorCode.REVIEW_NOT_FOUND),
        (ChallengeNotFoundError, ErrorCode.CHALLENGE_NOT_FOUND),
        (DuplicatedEmailError, ErrorCode.DUPLICATED_EMAIL),
        (DuplicatedNicknameError, ErrorCode.DUPLICATED_NICKNAME),
        (InvalidPasswordError, ErrorCode.INVALID_PASSWORD),
        (InvalidTokenError, ErrorCode.INVALID_TOKEN),
        (InvalidPermissionError, ErrorCode.INVALID_PERMISSION),
    ],
)
def test_exception_uses_default_message(exc_class, error_code):
    exc = exc_class()
    assert exc.error_code is error_code
    assert exc.message == error_code.message
    assert str(exc) == error_code.message


def test_exception_custom_message():
    exc = InvalidTokenError("Authorization token is missing.")
    assert exc.message == "Authorization token is missing."
    assert exc.error_code is ErrorCode.INVALID_TOKEN


def test_error_response_envelope():
    response = error_response(ErrorCode.DUPLICATED_EMAIL)

    assert response.status_code == 409
    assert json.loads(response.body) == {
        "resultCode": "ERROR",
        "result": {"errorCode": "DUPLICATED_EMAIL", "message": "Email is already in use."},
    }


def test_success_response_envelope():
    assert success_response({"id": 1}) == {"resultCode": "SUCCESS", "result": {"id": 1}}


def test_paginated_result_meta():
    result = paginated_result(["a", "b"], page=2, per_page=2, total=5)

    assert result["content"] == ["a", "b"]
    assert result["meta"] == {
        "current_page": 2,
        "per_page": 2,
        "total": 5,
        "total_pages": 3,
        "has_next": True,
        "has_prev": True,
    }
