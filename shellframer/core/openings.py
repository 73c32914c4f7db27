"""Opening extraction: hole loops to wall-local rough openings."""

from __future__ import annotations
import logging

from shellframer.models import FramingParams, Opening, OpeningType, Wall

logger = logging.getLogger(__name__)


def expand_interval(interval: tuple[float, float], amount: float) -> tuple[float, float]:
    return (interval[0] - amount, interval[1] + amount)


def apply_clearance(
    interval: tuple[float, float],
    wall_range: tuple[float, float],
    clearance: float,
    tolerance: float,
) -> tuple[tuple[float, float], bool]:
    """Expand by clearance and clamp to the wall.

    Returns (range, degenerate). The opening is degenerate when the clamped
    rough opening, or the cut-out's own overlap with the wall, is no wider
    than the tolerance.
    """
    low, high = expand_interval(interval, clearance)
    lower = max(low, wall_range[0])
    upper = max(min(high, wall_range[1]), lower)

    overlap = min(interval[1], wall_range[1]) - max(interval[0], wall_range[0])
    degenerate = upper - lower <= tolerance or overlap <= tolerance
    if upper - lower <= tolerance:
        upper = lower
    return (lower, upper), degenerate


class OpeningExtractor:
    """Reads the hole loops of each wall's plane into Opening values."""

    def __init__(self, params: FramingParams | None = None) -> None:
        self.params = params or FramingParams()

    def assign(self, walls: list[Wall]) -> None:
        """Populate ``wall.openings`` for every wall."""
        for wall in walls:
            wall.openings = self.extract(wall)

    def extract(self, wall: Wall) -> list[Opening]:
        plane = wall.plane
        tolerance = plane.tolerance
        openings: list[Opening] = []

        for loop in plane.inner_loops:
            primary_values = [p.component(wall.primary_axis) for p in loop]
            secondary_values = [p.component(wall.secondary_axis) for p in loop]

            raw_h = (
                min(primary_values) - wall.horizontal_origin,
                max(primary_values) - wall.horizontal_origin,
            )
            raw_v = (
                min(secondary_values) - wall.base_elevation,
                max(secondary_values) - wall.base_elevation,
            )

            h_range, h_degenerate = apply_clearance(
                raw_h, wall.horizontal_range, self.params.opening_clearance, tolerance,
            )
            v_range, v_degenerate = apply_clearance(
                raw_v, wall.height_range, self.params.opening_clearance, tolerance,
            )

            opening = Opening(
                type=self.classify(raw_v),
                horizontal_range=h_range,
                vertical_range=v_range,
                raw_horizontal_range=raw_h,
                raw_vertical_range=raw_v,
                degenerate=h_degenerate or v_degenerate,
            )
            if opening.degenerate:
                logger.debug(
                    "%s: opening at %s collapsed after clamping", wall.name, raw_h,
                )
            openings.append(opening)

        openings.sort(key=lambda o: o.horizontal_range)
        return openings

    def classify(self, vertical_range: tuple[float, float]) -> OpeningType:
        """Openings starting at or below the sill threshold are doors."""
        if vertical_range[0] <= self.params.sill_threshold:
            return OpeningType.DOOR
        return OpeningType.WINDOW
