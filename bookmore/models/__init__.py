"""
Models package - Import all models here for easy access
"""
from bookmore.models.user import User
from bookmore.models.review import Review
from bookmore.models.likes import Likes
from bookmore.models.challenge import Challenge

__all__ = [
    "User",
    "Review",
    "Likes",
    "Challenge",
]
