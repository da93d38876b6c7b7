"""Read-only endpoints: the style rule catalog and the sample schema."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from protolint.examples import EXAMPLE_PROTO
from protolint.rules import RULE_CATALOG, RuleDescription

router = APIRouter(prefix="/api", tags=["catalog"])


class ExampleResponse(BaseModel):
    content: str


@router.get("/rules", response_model=list[RuleDescription])
async def list_rules() -> list[RuleDescription]:
    """List the style rules checked by /api/validate."""
    return RULE_CATALOG


@router.get("/example", response_model=ExampleResponse)
async def get_example() -> ExampleResponse:
    """Return the sample schema the editor starts with."""
    return ExampleResponse(content=EXAMPLE_PROTO)
