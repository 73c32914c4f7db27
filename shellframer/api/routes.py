"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from shellframer.services.frame_service import FrameService
from shellframer.api.schemas import (
    FrameRequest, FrameResponse, FramingErrorResponse, LayoutCounts, RuleInfo,
)

router = APIRouter()

# Shared service instance
_service = FrameService()


@router.post(
    "/frame",
    response_model=FrameResponse,
    responses={422: {"model": FramingErrorResponse}},
)
def frame_shell(request: FrameRequest) -> FrameResponse:
    """Lay out timber framing for a box-shaped shell."""
    result = _service.generate(request.solid, request.params, request.config)

    return FrameResponse(
        members=result.frame.members,
        layout=LayoutCounts.from_layout(result.frame.layout),
        summary=result.summary,
        warnings=result.warnings,
        wall_count=len(result.walls),
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available framing rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
