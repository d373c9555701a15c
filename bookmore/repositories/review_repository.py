"""Review repository."""
from typing import Optional, Tuple

from sqlalchemy.orm import Query

from bookmore.models.review import Review
from bookmore.models.user import User

from .base import BaseRepository


class ReviewRepository(BaseRepository[Review]):
    """Repository for Review operations."""

    model = Review

    def find_with_author(self, review_id: int) -> Optional[Tuple[Review, User]]:
        """Review joined with its author's row"""
        return self.session.query(Review, User).join(
            User, Review.user_id == User.id
        ).filter(Review.id == review_id).first()

    def list_query(self, isbn: Optional[str] = None) -> Query:
        """(Review, User) rows ready for pagination"""
        query = self.session.query(Review, User).join(User, Review.user_id == User.id)
        if isbn:
            query = query.filter(Review.isbn == isbn)
        return self.newest_first(query)
