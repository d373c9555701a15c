"""
User API endpoints
Registration, login, token verification, profile update and account deletion
"""
from fastapi import APIRouter, Depends

from bookmore.core.dependencies import get_current_user_email, get_user_service
from bookmore.schemas.user import UserJoinRequest, UserLoginRequest, UserUpdateRequest
from bookmore.services.user_service import UserService
from bookmore.utils.responses import success_response

router = APIRouter()


@router.post("/users/join", response_model=dict)
def join(
    request: UserJoinRequest,
    user_service: UserService = Depends(get_user_service)
):
    """
    Register new user account

    - **email**: Email address (unique)
    - **password**: Password
    - **nickname**: Nickname (unique)
    - **birth**: Optional birth date (YYYY-MM-DD)
    """
    return success_response(user_service.join(request))


@router.post("/users/login", response_model=dict)
def login(
    request: UserLoginRequest,
    user_service: UserService = Depends(get_user_service)
):
    """
    Login with email and password

    Returns a JWT access token as **jwt**
    """
    return success_response(user_service.login(request))


@router.post("/users/verify", response_model=dict)
def verify(
    email: str = Depends(get_current_user_email),
    user_service: UserService = Depends(get_user_service)
):
    """
    Check that the bearer token still belongs to an existing account
    """
    return success_response(user_service.verify(email))


@router.post("/users/{user_id}", response_model=dict)
def info_update(
    user_id: int,
    request: UserUpdateRequest,
    email: str = Depends(get_current_user_email),
    user_service: UserService = Depends(get_user_service)
):
    """
    Update own profile (only the fields sent are changed)

    - **password**: New password (optional)
    - **nickname**: New nickname (optional, must be unique)
    - **birth**: New birth date (optional)
    """
    return success_response(user_service.info_update(email, user_id, request))


@router.delete("/users/{user_id}", response_model=dict)
def delete_user(
    user_id: int,
    email: str = Depends(get_current_user_email),
    user_service: UserService = Depends(get_user_service)
):
    """
    Delete own account
    """
    return success_response(user_service.delete(email, user_id))
