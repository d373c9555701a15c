"""
Review and likes Pydantic schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from bookmore.schemas.common import ORMConfig, not_blank


class ReviewRequest(BaseModel):
    """Schema for writing a review"""
    isbn: str = Field(..., max_length=20)
    content: str = Field(..., max_length=5000)
    spoiler: bool = False

    @field_validator('isbn', 'content')
    @classmethod
    def text_not_blank(cls, v):
        return not_blank(v)


class ReviewUpdateRequest(BaseModel):
    """Schema for modifying a review; absent fields are kept"""
    content: Optional[str] = Field(None, max_length=5000)
    spoiler: Optional[bool] = None

    @field_validator('content')
    @classmethod
    def content_not_blank(cls, v):
        return not_blank(v)


class ReviewResponse(BaseModel):
    """Schema for review list items"""
    id: int
    user_id: int
    nickname: str
    isbn: str
    content: str
    spoiler: bool
    likes_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ORMConfig


class ReviewDetailResponse(ReviewResponse):
    """Review detail, including whether the caller likes it"""
    liked: bool = False


class LikesResponse(BaseModel):
    """Like state of a review for the caller"""
    liked: bool
    likes_count: int
