"""
User Service
Handles registration, login, profile updates, account deletion and identity checks
"""
from sqlalchemy.orm import Session
import logging

from bookmore.core.errors import (
    DuplicatedEmailError,
    DuplicatedNicknameError,
    InvalidPasswordError,
    InvalidTokenError,
    UserNotFoundError,
)
from bookmore.core.security import PasswordHasher, TokenProvider
from bookmore.models.user import User
from bookmore.repositories import LikesRepository, ReviewRepository, UserRepository
from bookmore.schemas.common import MessageResponse
from bookmore.schemas.user import (
    UserJoinRequest,
    UserJoinResponse,
    UserLoginRequest,
    UserLoginResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)


class UserService:
    """Service for account operations"""

    def __init__(
        self,
        db: Session,
        password_hasher: PasswordHasher,
        token_provider: TokenProvider
    ):
        self.db = db
        self.password_hasher = password_hasher
        self.token_provider = token_provider
        self.users = UserRepository(db)
        self.reviews = ReviewRepository(db)
        self.likes = LikesRepository(db)

    def join(self, request: UserJoinRequest) -> UserJoinResponse:
        """
        Create new user account

        Raises:
            DuplicatedEmailError: email already registered
            DuplicatedNicknameError: nickname already registered
        """
        if self.users.find_by_email(request.email):
            raise DuplicatedEmailError()

        if self.users.find_by_nickname(request.nickname):
            raise DuplicatedNicknameError()

        user = self.users.add(User(
            email=request.email,
            nickname=request.nickname,
            password=self.password_hasher.hash(request.password),
            birth=request.birth,
        ))
        self.db.commit()

        logger.info(f"User joined: id={user.id}")
        return UserJoinResponse.model_validate(user)

    def login(self, request: UserLoginRequest) -> UserLoginResponse:
        """
        Authenticate by email and password

        Raises:
            UserNotFoundError: no account for this email
            InvalidPasswordError: password does not match
        """
        user = self.users.find_by_email(request.email)
        if user is None:
            raise UserNotFoundError()

        if not self.password_hasher.verify(request.password, user.password):
            raise InvalidPasswordError()

        return UserLoginResponse(jwt=self.token_provider.create_token(user.email))

    def info_update(self, email: str, user_id: int, request: UserUpdateRequest) -> MessageResponse:
        """
        Partially update the caller's own profile

        Only fields present in the request are written.
        """
        user = self._get_owner(email, user_id)

        if request.nickname is not None:
            existing = self.users.find_by_nickname(request.nickname)
            if existing and existing.id != user.id:
                raise DuplicatedNicknameError()
            user.nickname = request.nickname

        if request.password is not None:
            user.password = self.password_hasher.hash(request.password)

        if request.birth is not None:
            user.birth = request.birth

        self.db.commit()
        return MessageResponse(id=user.id, message="Profile updated.")

    def delete(self, email: str, user_id: int) -> MessageResponse:
        """Delete the caller's own account"""
        user = self._get_owner(email, user_id)

        # Reviews lose this user's likes along with the likes rows
        for likes in self.likes.find_liked_by_user(user.id):
            review = self.reviews.get_by_id(likes.review_id)
            likes.toggle(review)
        self.db.flush()

        self.users.delete(user)
        self.db.commit()

        logger.info(f"User deleted: id={user_id}")
        return MessageResponse(id=user_id, message="Account deleted.")

    def verify(self, email: str) -> UserJoinResponse:
        """Check that a token's identity still maps to an account"""
        user = self.users.get_by_email(email)
        return UserJoinResponse.model_validate(user)

    def _get_owner(self, email: str, user_id: int) -> User:
        # A token whose account is gone cannot own anything either
        user = self.users.find_by_email(email)
        if user is None or user.id != user_id:
            raise InvalidTokenError()
        return user
