"""
Likes Service
Toggles a user's like on a review and keeps the review counter in step
"""
from sqlalchemy.orm import Session
import logging

from bookmore.core.errors import ReviewNotFoundError
from bookmore.models.review import Review
from bookmore.repositories import LikesRepository, ReviewRepository, UserRepository
from bookmore.schemas.review import LikesResponse

logger = logging.getLogger(__name__)


class LikesService:
    """Service for review likes"""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.reviews = ReviewRepository(db)
        self.likes = LikesRepository(db)

    def toggle(self, email: str, review_id: int) -> LikesResponse:
        """
        Like the review if not liked yet, otherwise unlike it

        The flag flip and the counter update are committed together.
        Repeated toggles reuse the same likes row.

        Raises:
            UserNotFoundError: caller account is gone
            ReviewNotFoundError: no review with this id
        """
        user = self.users.get_by_email(email)
        review = self._get_review(review_id)

        likes = self.likes.get_or_create(user.id, review.id)
        liked = likes.toggle(review)
        self.db.commit()

        self.db.refresh(review)
        logger.info(f"User {user.id} {'liked' if liked else 'unliked'} review {review_id}")
        return LikesResponse(liked=liked, likes_count=review.likes_count)

    def status(self, email: str, review_id: int) -> LikesResponse:
        """Whether the caller currently likes the review, with its total"""
        user = self.users.get_by_email(email)
        review = self._get_review(review_id)

        likes = self.likes.find_by_user_and_review(user.id, review.id)
        return LikesResponse(liked=bool(likes and likes.liked), likes_count=review.likes_count)

    def _get_review(self, review_id: int) -> Review:
        review = self.reviews.get_by_id(review_id)
        if review is None:
            raise ReviewNotFoundError()
        return review
