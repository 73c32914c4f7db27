"""Framing parameters and generation configuration."""

from __future__ import annotations
from pydantic import BaseModel

from .units import LengthUnit, convert


class FramingParams(BaseModel):
    """User-adjustable parameters for shell framing.

    Lengths are expressed in ``unit`` (meters by default). Use
    :meth:`for_unit` to get the defaults in another unit.
    """
    unit: LengthUnit = LengthUnit.M

    stud_spacing: float = 0.4           # Center-to-center (400mm)
    edge_offset: float = 0.045          # First interior stud from a wall end
    stud_width: float = 0.038           # Along the wall; also the jack-stud inset
    stud_depth: float = 0.089           # Through the wall
    plate_thickness: float = 0.038
    header_height: float = 0.038
    corner_post_width: float = 0.089
    corner_post_depth: float = 0.089

    opening_clearance: float = 0.006    # Rough-opening tolerance on each side
    sill_threshold: float = 0.1         # Openings starting at or below are doors

    min_span: float = 0.3               # Footprint length and width
    min_height: float = 2.1
    min_opening_width: float = 0.3
    min_opening_height: float = 0.3

    braces: bool = False                # Diagonal bracing on walls without openings

    angular_tolerance: float = 1e-3     # 1 - |cos| allowed for axis alignment
    relative_tolerance: float = 1e-6    # Scaled by the solid's diagonal
    absolute_tolerance: float = 1e-6

    @property
    def jack_stud_width(self) -> float:
        return self.stud_width

    @classmethod
    def for_unit(cls, unit: LengthUnit, **overrides: object) -> FramingParams:
        """Default parameters rescaled into ``unit``."""
        defaults = cls()
        values = {
            name: convert(getattr(defaults, name), defaults.unit, unit)
            for name in LENGTH_FIELDS
        }
        values.update(overrides)
        return cls(unit=unit, **values)

    def to_mm(self, value: float) -> float:
        return value * self.unit.mm_per_unit

    def tolerance_for(self, diagonal: float) -> float:
        """Scale-aware tolerance shared by every stage of a run."""
        return max(self.absolute_tolerance, diagonal * self.relative_tolerance)


LENGTH_FIELDS = (
    "stud_spacing",
    "edge_offset",
    "stud_width",
    "stud_depth",
    "plate_thickness",
    "header_height",
    "corner_post_width",
    "corner_post_depth",
    "opening_clearance",
    "sill_threshold",
    "min_span",
    "min_height",
    "min_opening_width",
    "min_opening_height",
)


class GenerationConfig(BaseModel):
    """Controls which framing rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
