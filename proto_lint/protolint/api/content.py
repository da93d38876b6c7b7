"""Request body helpers shared by the validate and format endpoints."""

from __future__ import annotations

from fastapi import HTTPException, Request


async def read_json_content(request: Request) -> str:
    """Return the 'content' string of a JSON body, or raise a 400."""
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid request body")

    if not isinstance(body, dict) or not isinstance(body.get("content"), str):
        raise HTTPException(status_code=400, detail="Missing 'content' field")
    return body["content"]


async def read_uploaded_file(request: Request, max_bytes: int) -> str:
    """Return the text of the multipart 'file' part, or raise a 400/413."""
    form = await request.form()
    upload = form.get("file")
    if upload is None or isinstance(upload, str):
        raise HTTPException(status_code=400, detail="No file provided")

    data = await upload.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise HTTPException(status_code=413, detail=f"Content exceeds {max_bytes} bytes")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Invalid request body")


def check_content_size(content: str, max_bytes: int) -> None:
    """Reject source text larger than the configured limit."""
    if len(content.encode("utf-8")) > max_bytes:
        raise HTTPException(status_code=413, detail=f"Content exceeds {max_bytes} bytes")
