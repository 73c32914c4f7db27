"""High-level framing service: facade for hosts and the API layer."""

from __future__ import annotations
import logging

from pydantic import BaseModel

from shellframer.models import (
    FrameSummary, FramingParams, GenerationConfig, NotAPrismError, Result,
    Solid, TimberFrame, Wall,
)
from shellframer.core.classifier import PlaneClassifier
from shellframer.core.generator import FrameGenerator
from shellframer.core.openings import OpeningExtractor
from shellframer.core.registry import RuleRegistry, create_default_registry
from shellframer.core.validator import Validator
from shellframer.core.walls import WallExtractor

logger = logging.getLogger(__name__)


class FrameResult(BaseModel):
    """Everything a host needs to materialize and tag the frame."""
    frame: TimberFrame
    walls: list[Wall]
    summary: FrameSummary
    warnings: list[str] = []


class FrameService:
    """Classifies, validates, extracts and lays out a shell in one call.

    Any FramingError aborts the run before members are produced; the host
    is responsible for rolling back and showing the message.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = FrameGenerator(self.registry)

    def generate(
        self,
        solid: Solid,
        params: FramingParams | None = None,
        config: GenerationConfig | None = None,
    ) -> FrameResult:
        if params is None:
            params = FramingParams()
        if config is None:
            config = GenerationConfig()

        faces, loose = solid.split()
        if loose:
            classification = Result.failure(NotAPrismError(f"{len(loose)} loose loop(s) outside any face"))
        else:
            classification = PlaneClassifier(params).classify(faces, solid.transform)

        dims = Validator(params).validate(classification).unwrap()
        planes = classification.unwrap()

        walls = WallExtractor().extract(planes)
        OpeningExtractor(params).assign(walls)

        warnings: list[str] = []
        for wall in walls:
            for opening in wall.openings:
                if opening.degenerate:
                    message = (
                        f"{wall.name}: {opening.type.value} at "
                        f"{opening.raw_horizontal_range} collapsed after clamping and was skipped"
                    )
                    logger.warning(message)
                    warnings.append(message)

        frame, layout_warnings = self.generator.generate(walls, params, config, planes.tolerance)
        warnings.extend(layout_warnings)

        summary = FrameSummary.from_members(
            frame.members,
            length_mm=params.to_mm(dims.length),
            width_mm=params.to_mm(dims.width),
            height_mm=params.to_mm(dims.height),
        )
        logger.info(
            "Framed %.0fx%.0fx%.0f mm shell: %d members",
            summary.length_mm, summary.width_mm, summary.height_mm, summary.total_members,
        )
        return FrameResult(frame=frame, walls=walls, summary=summary, warnings=warnings)

    def list_rules(self) -> list[dict[str, object]]:
        return [r.describe() for r in self.registry.list_rules()]
