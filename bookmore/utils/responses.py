"""
Utility functions for API responses

Every endpoint answers with the same envelope:
    {"resultCode": "SUCCESS" | "ERROR", "result": <payload>}
"""
from typing import Any, List, Optional, Dict
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from bookmore.core.errors import ErrorCode
from bookmore.schemas.common import ErrorBody, PaginationMeta

SUCCESS = "SUCCESS"
ERROR = "ERROR"


def success_response(result: Any = None) -> Dict:
    """
    Wrap a payload in the success envelope

    Args:
        result: Response payload (dict, list or pydantic model)

    Returns:
        Envelope dict, serialized by FastAPI
    """
    return {"resultCode": SUCCESS, "result": jsonable_encoder(result)}


def error_response(
    error_code: ErrorCode,
    message: Optional[str] = None
) -> JSONResponse:
    """
    Map an error kind to its HTTP response

    Args:
        error_code: Member of the error taxonomy
        message: Overrides the default message of the error kind

    Returns:
        JSONResponse with the kind's declared status
    """
    body = ErrorBody(errorCode=error_code.code, message=message or error_code.message)
    return JSONResponse(
        status_code=error_code.status_code,
        content={"resultCode": ERROR, "result": body.model_dump()},
    )


def failure_response(result: Any, status_code: int) -> JSONResponse:
    """Error envelope for failures outside the taxonomy (validation, routing)"""
    return JSONResponse(
        status_code=status_code,
        content={"resultCode": ERROR, "result": jsonable_encoder(result)},
    )


def paginated_result(
    content: List[Any],
    page: int,
    per_page: int,
    total: int
) -> Dict:
    """
    Create paginated payload

    Args:
        content: List of items
        page: Current page number
        per_page: Items per page
        total: Total number of items

    Returns:
        Dict with content and pagination meta
    """
    total_pages = (total + per_page - 1) // per_page  # Ceiling division

    meta = PaginationMeta(
        current_page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1
    )

    return {
        "content": content,
        "meta": meta.model_dump()
    }
