"""
Common/Shared Pydantic schemas
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class PaginationMeta(BaseModel):
    """Pagination metadata"""
    current_page: int
    per_page: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class MessageResponse(BaseModel):
    """Id of the affected record plus a human-readable message"""
    id: int
    message: str


class ErrorBody(BaseModel):
    """Error envelope payload"""
    errorCode: str
    message: Optional[str] = None


def not_blank(value: Optional[str]) -> Optional[str]:
    """Shared validator body for required text fields"""
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


# Config for all schemas
ORMConfig = ConfigDict(from_attributes=True)
