"""
Review Service
Business rules for writing, editing and browsing book reviews
"""
from sqlalchemy.orm import Session
from typing import Dict, Optional
import logging

from bookmore.core.errors import InvalidPermissionError, ReviewNotFoundError
from bookmore.models.review import Review
from bookmore.models.user import User
from bookmore.repositories import LikesRepository, ReviewRepository, UserRepository
from bookmore.schemas.common import MessageResponse
from bookmore.schemas.review import (
    ReviewDetailResponse,
    ReviewRequest,
    ReviewResponse,
    ReviewUpdateRequest,
)
from bookmore.utils.pagination import paginate, get_pagination_params
from bookmore.utils.responses import paginated_result

logger = logging.getLogger(__name__)


def to_review_response(review: Review, author: User) -> ReviewResponse:
    return ReviewResponse(
        id=review.id,
        user_id=review.user_id,
        nickname=author.nickname,
        isbn=review.isbn,
        content=review.content,
        spoiler=review.spoiler,
        likes_count=review.likes_count,
        created_at=review.created_at,
        updated_at=review.updated_at,
    )


class ReviewService:
    """Service for review operations"""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.reviews = ReviewRepository(db)
        self.likes = LikesRepository(db)

    def add(self, email: str, request: ReviewRequest) -> MessageResponse:
        user = self.users.get_by_email(email)

        review = self.reviews.add(Review(
            user_id=user.id,
            isbn=request.isbn,
            content=request.content,
            spoiler=request.spoiler,
            likes_count=0,
        ))
        self.db.commit()

        return MessageResponse(id=review.id, message="Review created.")

    def modify(self, email: str, review_id: int, request: ReviewUpdateRequest) -> MessageResponse:
        review = self._get_owned(email, review_id)

        if request.content is not None:
            review.content = request.content
        if request.spoiler is not None:
            review.spoiler = request.spoiler

        self.db.commit()
        return MessageResponse(id=review_id, message="Review updated.")

    def delete(self, email: str, review_id: int) -> MessageResponse:
        review = self._get_owned(email, review_id)

        self.reviews.delete(review)
        self.db.commit()

        return MessageResponse(id=review_id, message="Review deleted.")

    def get(self, email: str, review_id: int) -> ReviewDetailResponse:
        """Any authenticated user may read any review"""
        user = self.users.get_by_email(email)

        row = self.reviews.find_with_author(review_id)
        if row is None:
            raise ReviewNotFoundError()
        review, author = row

        likes = self.likes.find_by_user_and_review(user.id, review_id)
        return ReviewDetailResponse(
            **to_review_response(review, author).model_dump(),
            liked=bool(likes and likes.liked),
        )

    def list(
        self,
        email: str,
        page: int = 1,
        per_page: Optional[int] = None,
        isbn: Optional[str] = None
    ) -> Dict:
        """Newest reviews first, optionally for a single book"""
        self.users.get_by_email(email)

        page, per_page = get_pagination_params(page, per_page)
        items, total = paginate(self.reviews.list_query(isbn), page, per_page)

        content = [to_review_response(review, author) for review, author in items]
        return paginated_result(content, page, per_page, total)

    def _get_owned(self, email: str, review_id: int) -> Review:
        """Existence is checked before ownership"""
        user = self.users.get_by_email(email)

        review = self.reviews.get_by_id(review_id)
        if review is None:
            raise ReviewNotFoundError()

        if review.user_id != user.id:
            logger.warning(f"User {user.id} tried to change review {review_id} owned by {review.user_id}")
            raise InvalidPermissionError()

        return review
