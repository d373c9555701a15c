"""
Challenge Pydantic schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date, datetime
from bookmore.schemas.common import ORMConfig, not_blank


class ChallengeRequest(BaseModel):
    """Schema for creating a challenge"""
    title: str = Field(..., max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    deadline: Optional[date] = None
    progress: int = Field(0, ge=0, le=100)

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, v):
        return not_blank(v)


class ChallengeUpdateRequest(BaseModel):
    """Schema for modifying a challenge; absent fields are kept"""
    title: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    deadline: Optional[date] = None
    progress: Optional[int] = Field(None, ge=0, le=100)

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, v):
        return not_blank(v)


class ChallengeDetailResponse(BaseModel):
    """Schema for challenge detail and list items"""
    id: int
    user_id: int
    nickname: str
    title: str
    description: Optional[str]
    deadline: Optional[date]
    progress: int
    completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = ORMConfig
