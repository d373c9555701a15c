"""
Challenges API endpoints
Reading goals with deadline and progress
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional

from bookmore.core.dependencies import get_current_user_email, get_challenge_service
from bookmore.schemas.challenge import ChallengeRequest, ChallengeUpdateRequest
from bookmore.services.challenge_service import ChallengeService
from bookmore.utils.responses import success_response

router = APIRouter()


@router.post("/challenges", response_model=dict)
def create_challenge(
    request: ChallengeRequest,
    email: str = Depends(get_current_user_email),
    challenge_service: ChallengeService = Depends(get_challenge_service)
):
    """
    Create a challenge

    - **title**: Title (required)
    - **description**: Description
    - **deadline**: Deadline date
    - **progress**: Progress percentage (0-100)
    """
    return success_response(challenge_service.add(email, request))


@router.api_route("/challenges/{challenge_id}", methods=["PATCH", "PUT"], response_model=dict)
def modify_challenge(
    challenge_id: int,
    request: ChallengeUpdateRequest,
    email: str = Depends(get_current_user_email),
    challenge_service: ChallengeService = Depends(get_challenge_service)
):
    """
    Modify a challenge (owner only)

    Reaching progress 100 marks the challenge completed.
    """
    return success_response(challenge_service.modify(email, challenge_id, request))


@router.delete("/challenges/{challenge_id}", response_model=dict)
def delete_challenge(
    challenge_id: int,
    email: str = Depends(get_current_user_email),
    challenge_service: ChallengeService = Depends(get_challenge_service)
):
    """
    Delete a challenge (owner only)
    """
    return success_response(challenge_service.delete(email, challenge_id))


@router.get("/challenges/{challenge_id}", response_model=dict)
def get_challenge(
    challenge_id: int,
    email: str = Depends(get_current_user_email),
    challenge_service: ChallengeService = Depends(get_challenge_service)
):
    """
    Get challenge detail
    """
    return success_response(challenge_service.get(email, challenge_id))


@router.get("/challenges", response_model=dict)
def list_challenges(
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=1),
    completed: Optional[bool] = None,
    email: str = Depends(get_current_user_email),
    challenge_service: ChallengeService = Depends(get_challenge_service)
):
    """
    List own challenges

    - **page**: Page number
    - **per_page**: Items per page (defaults to DEFAULT_PAGE_SIZE, capped at MAX_PAGE_SIZE)
    - **completed**: Only completed (true) or ongoing (false) challenges
    """
    return success_response(challenge_service.list(email, page, per_page, completed))
