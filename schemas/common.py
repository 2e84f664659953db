"""
schemas/common.py

- Shared response schemas (Pydantic v2)
  1) error response: ErrorDetail, ErrorResponse
  2) list metadata: MetaInfo, make_meta()
"""

from __future__ import annotations

from datetime import datetime, timezone
from math import ceil
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


# =========================================================
# 1) error response
# =========================================================

class ErrorDetail(BaseModel):
    """Error code and message"""
    code: str = Field(..., description="Error code (e.g. INTERNAL_ERROR)")
    message: str = Field(..., description="Human readable message")

class ErrorResponse(BaseModel):
    """
    Body returned by the global error handler (middlewares/error_handler.py)
    """
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Response time (UTC)"
    )
    latency_ms: Optional[int] = Field(default=None, ge=0)
    trace_id: Optional[str] = Field(
        default=None, description="X-Request-ID of the failed request, when sent"
    )

    model_config = ConfigDict(extra="ignore")


# =========================================================
# 2) list metadata
# =========================================================

class MetaInfo(BaseModel):
    """
    Metadata attached to list responses
    - total: number of rows before limit
    - page/size: current page and page size
    - pages: number of pages (at least 1)
    """
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    size: int = Field(..., ge=1)
    pages: int = Field(..., ge=1)

    model_config = ConfigDict(extra="ignore")


def make_meta(total: int, page: int, size: int) -> MetaInfo:
    pages = max(1, ceil(total / max(1, size)))
    return MetaInfo(total=total, page=page, size=size, pages=pages)
