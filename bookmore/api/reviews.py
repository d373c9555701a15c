"""
Reviews API endpoints
Book reviews and review likes
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional

from bookmore.core.dependencies import (
    get_current_user_email,
    get_likes_service,
    get_review_service,
)
from bookmore.schemas.review import ReviewRequest, ReviewUpdateRequest
from bookmore.services.likes_service import LikesService
from bookmore.services.review_service import ReviewService
from bookmore.utils.responses import success_response

router = APIRouter()


@router.post("/reviews", response_model=dict)
def create_review(
    request: ReviewRequest,
    email: str = Depends(get_current_user_email),
    review_service: ReviewService = Depends(get_review_service)
):
    """
    Write a review

    - **isbn**: ISBN of the reviewed book
    - **content**: Review text
    - **spoiler**: Whether the review contains spoilers
    """
    return success_response(review_service.add(email, request))


@router.api_route("/reviews/{review_id}", methods=["PATCH", "PUT"], response_model=dict)
def modify_review(
    review_id: int,
    request: ReviewUpdateRequest,
    email: str = Depends(get_current_user_email),
    review_service: ReviewService = Depends(get_review_service)
):
    """
    Modify a review (author only)
    """
    return success_response(review_service.modify(email, review_id, request))


@router.delete("/reviews/{review_id}", response_model=dict)
def delete_review(
    review_id: int,
    email: str = Depends(get_current_user_email),
    review_service: ReviewService = Depends(get_review_service)
):
    """
    Delete a review (author only)
    """
    return success_response(review_service.delete(email, review_id))


@router.get("/reviews/{review_id}", response_model=dict)
def get_review(
    review_id: int,
    email: str = Depends(get_current_user_email),
    review_service: ReviewService = Depends(get_review_service)
):
    """
    Get review detail, including whether the caller likes it
    """
    return success_response(review_service.get(email, review_id))


@router.get("/reviews", response_model=dict)
def list_reviews(
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=1),
    isbn: Optional[str] = None,
    email: str = Depends(get_current_user_email),
    review_service: ReviewService = Depends(get_review_service)
):
    """
    List reviews, newest first

    - **page**: Page number
    - **per_page**: Items per page (defaults to DEFAULT_PAGE_SIZE, capped at MAX_PAGE_SIZE)
    - **isbn**: Only reviews of this book
    """
    return success_response(review_service.list(email, page, per_page, isbn))


@router.post("/reviews/{review_id}/likes", response_model=dict)
def toggle_likes(
    review_id: int,
    email: str = Depends(get_current_user_email),
    likes_service: LikesService = Depends(get_likes_service)
):
    """
    Like or unlike a review

    Returns the new like state and the review's total likes
    """
    return success_response(likes_service.toggle(email, review_id))


@router.get("/reviews/{review_id}/likes", response_model=dict)
def get_likes_status(
    review_id: int,
    email: str = Depends(get_current_user_email),
    likes_service: LikesService = Depends(get_likes_service)
):
    """
    Check if current user has liked a review
    """
    return success_response(likes_service.status(email, review_id))
