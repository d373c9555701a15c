"""
Challenge model - reading goals
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from bookmore.core.database import Base

MAX_PROGRESS = 100


class Challenge(Base):
    """Reading challenge with a deadline and progress percentage"""

    __tablename__ = "challenges"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    deadline = Column(Date, nullable=True)

    progress = Column(Integer, default=0, nullable=False)
    completed = Column(Boolean, default=False, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def update_progress(self, progress: int):
        """completed is only ever derived here"""
        self.progress = progress
        self.completed = progress >= MAX_PROGRESS

    def __repr__(self):
        return f"<Challenge(id={self.id}, title={self.title}, progress={self.progress})>"
