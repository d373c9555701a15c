"""Challenge repository."""
from typing import Optional, Tuple

from sqlalchemy.orm import Query

from bookmore.models.challenge import Challenge
from bookmore.models.user import User

from .base import BaseRepository


class ChallengeRepository(BaseRepository[Challenge]):
    """Repository for Challenge operations."""

    model = Challenge

    def find_with_author(self, challenge_id: int) -> Optional[Tuple[Challenge, User]]:
        return self.session.query(Challenge, User).join(
            User, Challenge.user_id == User.id
        ).filter(Challenge.id == challenge_id).first()

    def find_by_owner(self, user_id: int, completed: Optional[bool] = None) -> Query:
        """(Challenge, User) rows owned by user_id, ready for pagination"""
        query = self.session.query(Challenge, User).join(
            User, Challenge.user_id == User.id
        ).filter(Challenge.user_id == user_id)
        if completed is not None:
            query = query.filter(Challenge.completed.is_(completed))
        return self.newest_first(query)
