"""Layout engine: orchestrates corner analysis and framing rules."""

from __future__ import annotations
import logging

from shellframer.models import (
    Wall, TimberFrame, FrameLayout, FramingParams, GenerationConfig, BuildingContext,
)
from shellframer.core.registry import RuleRegistry, create_default_registry
from shellframer.core.analyzer import WallAnalyzer

logger = logging.getLogger(__name__)


class FrameGenerator:
    """
    Stateless frame generator.

    Takes walls with resolved openings + params, runs analysis, executes
    applicable rules, and returns a complete TimberFrame. Sequence counters
    live on the per-run context, so identical input gives identical tags.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = WallAnalyzer()

    def generate(
        self,
        walls: list[Wall],
        params: FramingParams | None = None,
        config: GenerationConfig | None = None,
        tolerance: float | None = None,
    ) -> tuple[TimberFrame, list[str]]:
        """Return the frame and the warnings raised while placing members."""
        if params is None:
            params = FramingParams()
        if config is None:
            config = GenerationConfig()
        if tolerance is None:
            tolerance = walls[0].plane.tolerance if walls else params.absolute_tolerance

        context = BuildingContext(
            walls=walls,
            params=params,
            config=config,
            tolerance=tolerance,
        )

        self.analyzer.analyze(context)

        for rule in self.registry.get_applicable_rules(context):
            members = rule.generate(context)
            logger.debug("%s produced %d members", rule.get_id(), len(members))
            context.add_members(members)

        return TimberFrame(members=context.members), context.warnings

    def build(self, walls: list[Wall], params: FramingParams | None = None) -> FrameLayout:
        """Members grouped per kind."""
        frame, _ = self.generate(walls, params)
        return frame.layout
