"""
Likes model for review likes
"""
from sqlalchemy import Column, Integer, Boolean, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.sql import func

from bookmore.core.database import Base


class Likes(Base):
    """One row per (user, review) pair; the liked flag is toggled in place"""
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, index=True)
    liked = Column(Boolean, default=False, nullable=False)
    review_id = Column(Integer, ForeignKey("reviews.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Unique constraint - a user has a single likes row per review
    __table_args__ = (
        UniqueConstraint('user_id', 'review_id', name='unique_likes'),
    )

    def toggle(self, review) -> bool:
        """
        Flip the liked flag and move the review's counter with it

        Returns:
            The new liked value
        """
        if self.liked:
            review.unlike()
        else:
            review.like()

        self.liked = not self.liked
        return self.liked
