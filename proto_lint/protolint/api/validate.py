"""POST /api/validate endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from protolint.api.content import check_content_size, read_json_content, read_uploaded_file
from protolint.deps import get_max_content_bytes
from protolint.validator import ValidationReport, validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["validate"])


@router.post("/validate", response_model=ValidationReport)
async def validate_proto(
    request: Request,
    max_bytes: int = Depends(get_max_content_bytes),
) -> ValidationReport:
    """Validate .proto text sent as JSON {"content": ...} or as a 'file' upload."""
    content_type = request.headers.get("content-type", "")
    if "multipart/form-data" in content_type:
        content = await read_uploaded_file(request, max_bytes)
    else:
        content = await read_json_content(request)
    check_content_size(content, max_bytes)

    report = validate(content)
    logger.info(
        "Validated %d chars: %d errors, %d warnings",
        len(content),
        len(report.errors),
        len(report.warnings),
    )
    return report
