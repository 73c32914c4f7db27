"""Length units. Only the metadata boundary converts to millimeters."""

from __future__ import annotations
from enum import Enum


class LengthUnit(str, Enum):
    MM = "mm"
    CM = "cm"
    M = "m"
    INCH = "inch"

    @property
    def mm_per_unit(self) -> float:
        return _MM_PER_UNIT[self]


_MM_PER_UNIT = {
    LengthUnit.MM: 1.0,
    LengthUnit.CM: 10.0,
    LengthUnit.M: 1000.0,
    LengthUnit.INCH: 25.4,
}


def convert(value: float, source: LengthUnit, target: LengthUnit) -> float:
    return value * source.mm_per_unit / target.mm_per_unit
