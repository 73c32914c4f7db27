"""Framing failures and the Result type returned by checking stages."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_A_PRISM = "not_a_prism"
    DIMENSION_TOO_SMALL = "dimension_too_small"
    NON_RECTANGULAR_OPENING = "non_rectangular_opening"
    OPENING_OUT_OF_BOUNDS = "opening_out_of_bounds"
    OPENING_TOO_SMALL = "opening_too_small"
    OPENINGS_OVERLAP = "openings_overlap"
    DEGENERATE_GEOMETRY = "degenerate_geometry"


class FramingError(Exception):
    """Base class for every failure surfaced to the host."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


class NotAPrismError(FramingError):
    kind = ErrorKind.NOT_A_PRISM

    def __init__(self, reason: str = "") -> None:
        message = "Selected solid must be an axis-aligned rectangular prism"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.reason = reason


class DimensionTooSmallError(FramingError):
    kind = ErrorKind.DIMENSION_TOO_SMALL

    def __init__(self, which: str, minimum_mm: float) -> None:
        if which == "height":
            message = f"Shell height must be at least {minimum_mm:.0f} mm."
        else:
            message = f"Footprint {which} must be at least {minimum_mm:.0f} mm."
        super().__init__(message)
        self.which = which
        self.minimum = minimum_mm


class NonRectangularOpeningError(FramingError):
    kind = ErrorKind.NON_RECTANGULAR_OPENING

    def __init__(self, wall: str) -> None:
        super().__init__(
            f"{wall}: every opening must be a rectangle aligned with the global axes."
        )
        self.wall = wall


class OpeningOutOfBoundsError(FramingError):
    kind = ErrorKind.OPENING_OUT_OF_BOUNDS

    def __init__(self, wall: str) -> None:
        super().__init__(f"{wall}: opening extends beyond the wall.")
        self.wall = wall


class OpeningTooSmallError(FramingError):
    kind = ErrorKind.OPENING_TOO_SMALL

    def __init__(self, wall: str, which: str, minimum_mm: float) -> None:
        super().__init__(
            f"{wall}: opening {which} must be at least {minimum_mm:.0f} mm."
        )
        self.wall = wall
        self.which = which
        self.minimum = minimum_mm


class OpeningsOverlapError(FramingError):
    kind = ErrorKind.OPENINGS_OVERLAP

    def __init__(self, wall: str) -> None:
        super().__init__(f"{wall}: openings on the same wall must not overlap.")
        self.wall = wall


class DegenerateGeometryError(FramingError):
    kind = ErrorKind.DEGENERATE_GEOMETRY


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or the FramingError explaining why there is none."""
    value: T | None = None
    error: FramingError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: FramingError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
