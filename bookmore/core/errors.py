"""
Domain error taxonomy

Every failure a service can report is one member of ErrorCode. The
exception handlers in bookmore.main turn them into the error envelope.
"""
from enum import Enum
from typing import Optional

from fastapi import status


class ErrorCode(Enum):
    """Error kinds, each bound to one HTTP status and a default message"""

    USER_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "User not found.")
    REVIEW_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Review not found.")
    CHALLENGE_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Challenge not found.")
    DUPLICATED_EMAIL = (status.HTTP_409_CONFLICT, "Email is already in use.")
    DUPLICATED_NICKNAME = (status.HTTP_409_CONFLICT, "Nickname is already in use.")
    INVALID_PASSWORD = (status.HTTP_401_UNAUTHORIZED, "Invalid password.")
    INVALID_TOKEN = (status.HTTP_401_UNAUTHORIZED, "Invalid token.")
    INVALID_PERMISSION = (status.HTTP_401_UNAUTHORIZED, "You do not have permission.")
    INVALID_EMAIL_FORMAT = (status.HTTP_400_BAD_REQUEST, "Invalid email format.")
    DATABASE_ERROR = (status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error.")

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message

    @property
    def code(self) -> str:
        return self.name


class BookmoreError(Exception):
    """Base class for all domain errors"""

    error_code: ErrorCode

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.error_code.message
        super().__init__(self.message)


class UserNotFoundError(BookmoreError):
    error_code = ErrorCode.USER_NOT_FOUND


class ReviewNotFoundError(BookmoreError):
    error_code = ErrorCode.REVIEW_NOT_FOUND


class ChallengeNotFoundError(BookmoreError):
    error_code = ErrorCode.CHALLENGE_NOT_FOUND


class DuplicatedEmailError(BookmoreError):
    error_code = ErrorCode.DUPLICATED_EMAIL


class DuplicatedNicknameError(BookmoreError):
    error_code = ErrorCode.DUPLICATED_NICKNAME


class InvalidPasswordError(BookmoreError):
    error_code = ErrorCode.INVALID_PASSWORD


class InvalidTokenError(BookmoreError):
    error_code = ErrorCode.INVALID_TOKEN


class InvalidPermissionError(BookmoreError):
    error_code = ErrorCode.INVALID_PERMISSION

