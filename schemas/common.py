"""
schemas/common.py

- Shared schemas used across the project
- Pydantic v2
- Contents:
  1) Error envelope: ErrorDetail, ErrorResponse
  2) Pagination meta: Pagination, MetaInfo, make_meta()
  3) Term / academic year scoping shared by scores, attendance and comments
"""

from __future__ import annotations

from datetime import datetime, timezone
from math import ceil
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from services.grading.types import Term


# =========================================================
# 1) Error envelope
# =========================================================

class ErrorDetail(BaseModel):
    """Smallest unit of an error: code + message"""
    code: str = Field(..., description="Error code (e.g. INTERNAL_ERROR, INVALID_ARGUMENT)")
    message: str = Field(..., description="Human readable error message")

class ErrorResponse(BaseModel):
    """
    Standard error body returned by the global error handlers
    - middlewares/error_handler.py renders every error with this schema
    """
    success: bool = False
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Response generation time (UTC)"
    )
    latency_ms: Optional[int] = Field(
        default=None, ge=0, description="Request processing time (ms), when known"
    )

    model_config = ConfigDict(extra="ignore")


# =========================================================
# 2) Pagination request / meta
# =========================================================

class Pagination(BaseModel):
    """
    Paging parameters for list endpoints
    - page: starts at 1
    - size: 1~200
    """
    page: int = Field(1, ge=1, description="Current page (starts at 1)")
    size: int = Field(50, ge=1, le=200, description="Items per page")

    model_config = ConfigDict(extra="ignore")


class MetaInfo(BaseModel):
    """
    Meta information attached to list responses
    - total: total number of items
    - page/size: current page and size
    - pages: number of pages
    """
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    size: int = Field(..., ge=1)
    pages: int = Field(..., ge=1)

    model_config = ConfigDict(extra="ignore")


def make_meta(total: int, page: int, size: int) -> MetaInfo:
    """
    Build paging meta
    - pages is at least 1 even when total is 0
    """
    pages = max(1, ceil(total / max(1, size)))
    return MetaInfo(total=total, page=page, size=size, pages=pages)


# =========================================================
# 3) Term scoping
# =========================================================

ACADEMIC_YEAR_PATTERN = r"^\d{4}/\d{4}$"

class TermScope(BaseModel):
    """Term + academic year that scope scores, attendance and comments"""
    term: Term = Field(..., description="First Term | Second Term | Third Term")
    academic_year: str = Field(..., pattern=ACADEMIC_YEAR_PATTERN, description="e.g. 2024/2025")
