"""User repository for authentication and profile lookups."""
from typing import Optional

from bookmore.core.errors import UserNotFoundError
from bookmore.models.user import User

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    model = User

    def find_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email).first()

    def find_by_nickname(self, nickname: str) -> Optional[User]:
        return self.session.query(User).filter(User.nickname == nickname).first()

    def get_by_email(self, email: str) -> User:
        """
        Resolve a caller identity to its account.

        Raises:
            UserNotFoundError: no account has this email (e.g. deleted
                after the token was issued)
        """
        user = self.find_by_email(email)
        if user is None:
            raise UserNotFoundError()
        return user
