"""
User Pydantic schemas for request/response validation
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import date
from bookmore.schemas.common import ORMConfig, not_blank


# ============ Request Schemas ============

class UserJoinRequest(BaseModel):
    """Schema for user registration"""
    email: EmailStr
    password: str = Field(..., min_length=1)
    nickname: str = Field(..., max_length=30)
    birth: Optional[date] = None

    @field_validator('nickname')
    @classmethod
    def nickname_not_blank(cls, v):
        return not_blank(v)


class UserLoginRequest(BaseModel):
    """Schema for user login"""
    email: str
    password: str


class UserUpdateRequest(BaseModel):
    """
    Partial profile update

    Every field is optional; None means "leave unchanged".
    """
    password: Optional[str] = Field(None, min_length=1)
    nickname: Optional[str] = Field(None, max_length=30)
    birth: Optional[date] = None

    @field_validator('nickname')
    @classmethod
    def nickname_not_blank(cls, v):
        return not_blank(v)


# ============ Response Schemas ============

class UserJoinResponse(BaseModel):
    """Public identity of an account"""
    id: int
    email: str
    nickname: str

    model_config = ORMConfig


class UserLoginResponse(BaseModel):
    """Issued access token"""
    jwt: str
