"""Repositories package."""
from .base import BaseRepository
from .challenge_repository import ChallengeRepository
from .likes_repository import LikesRepository
from .review_repository import ReviewRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "ChallengeRepository",
    "LikesRepository",
    "ReviewRepository",
    "UserRepository",
]
