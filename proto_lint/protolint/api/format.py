"""POST /api/format endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from protolint.api.content import check_content_size, read_json_content
from protolint.deps import get_max_content_bytes
from protolint.formatter import format_proto

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["format"])


class FormatResponse(BaseModel):
    """Response body for POST /api/format."""

    formatted: str = Field(..., description="Source text in canonical layout")


@router.post("/format", response_model=FormatResponse)
async def format_endpoint(
    request: Request,
    max_bytes: int = Depends(get_max_content_bytes),
) -> FormatResponse:
    """Re-indent and normalize .proto text sent as JSON {"content": ...}."""
    content = await read_json_content(request)
    check_content_size(content, max_bytes)

    formatted = format_proto(content)
    logger.info("Formatted %d chars into %d chars", len(content), len(formatted))
    return FormatResponse(formatted=formatted)
