"""Likes repository."""
from typing import Optional

from bookmore.models.likes import Likes

from .base import BaseRepository


class LikesRepository(BaseRepository[Likes]):
    """Repository for Likes operations."""

    model = Likes

    def find_by_user_and_review(self, user_id: int, review_id: int) -> Optional[Likes]:
        return self.session.query(Likes).filter(
            Likes.user_id == user_id,
            Likes.review_id == review_id
        ).first()

    def get_or_create(self, user_id: int, review_id: int) -> Likes:
        """Reuse the (user, review) row, creating it on first like"""
        likes = self.find_by_user_and_review(user_id, review_id)
        if likes is None:
            likes = self.add(Likes(user_id=user_id, review_id=review_id, liked=False))
        return likes

    def find_liked_by_user(self, user_id: int) -> list[Likes]:
        return self.session.query(Likes).filter(
            Likes.user_id == user_id,
            Likes.liked.is_(True)
        ).all()
