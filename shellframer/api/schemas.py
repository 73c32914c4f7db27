"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from shellframer.models import (
    FrameLayout, FrameSummary, FramingParams, GenerationConfig, Solid, TimberMember,
)


class FrameRequest(BaseModel):
    """Request body for the /frame endpoint."""
    solid: Solid
    params: FramingParams = FramingParams()
    config: GenerationConfig = GenerationConfig()


class LayoutCounts(BaseModel):
    studs: int
    jack_studs: int
    headers: int
    bottom_plates: int
    top_plates: int
    corner_posts: int
    braces: int

    @classmethod
    def from_layout(cls, layout: FrameLayout) -> LayoutCounts:
        return cls(**{name: len(getattr(layout, name)) for name in cls.model_fields})


class FrameResponse(BaseModel):
    """Response from the /frame endpoint."""
    members: list[TimberMember]
    layout: LayoutCounts
    summary: FrameSummary
    warnings: list[str]
    wall_count: int


class FramingErrorResponse(BaseModel):
    kind: str
    message: str


class RuleInfo(BaseModel):
    id: str
    name: str
    priority: int
    dependencies: list[str] = []
