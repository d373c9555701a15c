"""
Challenge Service
Reading goals: create, track progress, browse
"""
from sqlalchemy.orm import Session
from typing import Dict, Optional
import logging

from bookmore.core.errors import ChallengeNotFoundError, InvalidPermissionError
from bookmore.models.challenge import Challenge
from bookmore.models.user import User
from bookmore.repositories import ChallengeRepository, UserRepository
from bookmore.schemas.challenge import (
    ChallengeDetailResponse,
    ChallengeRequest,
    ChallengeUpdateRequest,
)
from bookmore.schemas.common import MessageResponse
from bookmore.utils.pagination import paginate, get_pagination_params
from bookmore.utils.responses import paginated_result

logger = logging.getLogger(__name__)


def to_challenge_detail(challenge: Challenge, author: User) -> ChallengeDetailResponse:
    return ChallengeDetailResponse(
        id=challenge.id,
        user_id=challenge.user_id,
        nickname=author.nickname,
        title=challenge.title,
        description=challenge.description,
        deadline=challenge.deadline,
        progress=challenge.progress,
        completed=challenge.completed,
        created_at=challenge.created_at,
        updated_at=challenge.updated_at,
    )


class ChallengeService:
    """Service for challenge operations"""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.challenges = ChallengeRepository(db)

    def add(self, email: str, request: ChallengeRequest) -> MessageResponse:
        user = self.users.get_by_email(email)

        challenge = Challenge(
            user_id=user.id,
            title=request.title,
            description=request.description,
            deadline=request.deadline,
        )
        challenge.update_progress(request.progress)
        self.challenges.add(challenge)
        self.db.commit()

        return MessageResponse(id=challenge.id, message="Challenge created.")

    def modify(self, email: str, challenge_id: int, request: ChallengeUpdateRequest) -> MessageResponse:
        """
        Apply the fields present in the request

        Raises:
            ChallengeNotFoundError: no challenge with this id
            InvalidPermissionError: caller does not own the challenge
        """
        challenge = self._get_owned(email, challenge_id)

        if request.title is not None:
            challenge.title = request.title
        if request.description is not None:
            challenge.description = request.description
        if request.deadline is not None:
            challenge.deadline = request.deadline
        if request.progress is not None:
            challenge.update_progress(request.progress)

        self.db.commit()
        return MessageResponse(id=challenge_id, message="Challenge updated.")

    def delete(self, email: str, challenge_id: int) -> MessageResponse:
        challenge = self._get_owned(email, challenge_id)

        self.challenges.delete(challenge)
        self.db.commit()

        return MessageResponse(id=challenge_id, message="Challenge deleted.")

    def get(self, email: str, challenge_id: int) -> ChallengeDetailResponse:
        self.users.get_by_email(email)

        row = self.challenges.find_with_author(challenge_id)
        if row is None:
            raise ChallengeNotFoundError()

        return to_challenge_detail(*row)

    def list(
        self,
        email: str,
        page: int = 1,
        per_page: Optional[int] = None,
        completed: Optional[bool] = None
    ) -> Dict:
        """The caller's own challenges, newest first"""
        user = self.users.get_by_email(email)

        page, per_page = get_pagination_params(page, per_page)
        items, total = paginate(self.challenges.find_by_owner(user.id, completed), page, per_page)

        content = [to_challenge_detail(challenge, author) for challenge, author in items]
        return paginated_result(content, page, per_page, total)

    def _get_owned(self, email: str, challenge_id: int) -> Challenge:
        user = self.users.get_by_email(email)

        challenge = self.challenges.get_by_id(challenge_id)
        if challenge is None:
            raise ChallengeNotFoundError()

        if challenge.user_id != user.id:
            logger.warning(f"User {user.id} tried to change challenge {challenge_id} owned by {challenge.user_id}")
            raise InvalidPermissionError()

        return challenge
