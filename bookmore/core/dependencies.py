"""
FastAPI dependencies for authentication and service wiring
"""
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional

from bookmore.core.database import get_db
from bookmore.core.errors import InvalidTokenError
from bookmore.core.security import (
    PasswordHasher,
    TokenProvider,
    get_password_hasher,
    get_token_provider,
)
from bookmore.services.challenge_service import ChallengeService
from bookmore.services.likes_service import LikesService
from bookmore.services.review_service import ReviewService
from bookmore.services.user_service import UserService

# HTTP Bearer token scheme; missing credentials are reported as INVALID_TOKEN
security = HTTPBearer(auto_error=False)


async def get_current_user_email(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_provider: TokenProvider = Depends(get_token_provider)
) -> str:
    """
    Dependency to get the caller identity (email) from the JWT token

    The account itself is resolved by the service, so a token issued for
    a deleted account is still rejected there.

    Raises:
        InvalidTokenError: If token is missing, malformed or expired
    """
    if not credentials:
        raise InvalidTokenError("Authorization token is missing.")

    return token_provider.get_email(credentials.credentials)


def get_user_service(
    db: Session = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_provider: TokenProvider = Depends(get_token_provider)
) -> UserService:
    return UserService(db, password_hasher, token_provider)


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


def get_likes_service(db: Session = Depends(get_db)) -> LikesService:
    return LikesService(db)


def get_challenge_service(db: Session = Depends(get_db)) -> ChallengeService:
    return ChallengeService(db)
