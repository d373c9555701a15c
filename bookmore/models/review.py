"""
Review model for book reviews
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from bookmore.core.database import Base


class Review(Base):
    """Review written by a user about a book"""

    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    isbn = Column(String, nullable=False, index=True)

    content = Column(Text, nullable=False)
    spoiler = Column(Boolean, default=False, nullable=False)

    # Statistics
    likes_count = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def like(self):
        # SQL-side increment so concurrent toggles never lose an update
        self.likes_count = Review.likes_count + 1

    def unlike(self):
        self.likes_count = Review.likes_count - 1

    def __repr__(self):
        return f"<Review(id={self.id}, isbn={self.isbn}, user_id={self.user_id})>"
