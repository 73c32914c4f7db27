"""Platform wall framing: the standard light timber framing system.

Generates, per wall: full-height studs at regular spacing plus king studs
around openings, jack studs under each opening, one header per opening,
and a bottom and top plate running the full wall length.
"""

from __future__ import annotations

from shellframer.rules.base import FramingRule
from shellframer.rules.members import horizontal_member, vertical_member
from shellframer.models import (
    BuildingContext, FramingParams, MemberType, Opening, TimberMember, Wall,
)


class PlatformWallFramingRule(FramingRule):
    """Studs, jack studs, headers and plates for every wall."""

    priority = 50  # Corner posts depend on it

    def get_id(self) -> str:
        return "wall.platform_frame"

    def get_name(self) -> str:
        return "Platform Wall Framing"

    def applies(self, context: BuildingContext) -> bool:
        return len(context.walls) > 0

    def generate(self, context: BuildingContext) -> list[TimberMember]:
        members: list[TimberMember] = []
        for wall in context.walls:
            if wall.length <= context.tolerance:
                context.warn(f"{wall.name}: zero length, skipped")
                continue
            members.extend(self._studs(wall, context))
            members.extend(self._jack_studs(wall, context))
            members.extend(self._headers(wall, context))
            members.extend(self._plates(wall, context))
        return members

    # Positions

    def compute_base_positions(self, length: float, params: FramingParams, tol: float) -> list[float]:
        """Wall ends plus regular positions from the edge offset, stopping before the far edge offset."""
        positions = [0.0, length]
        if length <= 2 * params.edge_offset + tol:
            return positions
        current = params.edge_offset
        while current < length - params.edge_offset - tol:
            positions.append(current)
            current += params.stud_spacing
        return positions

    def compute_stud_positions(
        self,
        length: float,
        openings: list[Opening],
        params: FramingParams,
        tol: float,
    ) -> list[float]:
        """Sorted unique full-height stud positions along a wall."""
        jack = params.jack_stud_width
        positions = self.compute_base_positions(length, params, tol)

        for opening in openings:
            start, end = opening.horizontal_range
            positions.extend([start, end])
            if opening.width > 2 * jack + tol:
                positions.append(max(start - jack, 0.0))
                positions.append(min(end + jack, length))

        positions = normalize_positions(positions, length, tol)
        return [p for p in positions if not inside_opening(p, openings, tol)]

    # Members

    def _studs(self, wall: Wall, context: BuildingContext) -> list[TimberMember]:
        p = context.params
        stud_length = wall.height - 2 * p.plate_thickness
        if stud_length <= context.tolerance:
            context.warn(f"{wall.name}: no room for studs between plates")
            return []

        offsets = self.compute_stud_positions(
            wall.length, wall.usable_openings(), p, context.tolerance,
        )
        return [
            vertical_member(
                wall.frame, MemberType.STUD, offset,
                elevation=p.plate_thickness,
                length=stud_length,
                width=p.stud_width,
                depth=p.stud_depth,
                tag=context.next_tag(MemberType.STUD, wall),
            )
            for offset in offsets
        ]

    def _jack_studs(self, wall: Wall, context: BuildingContext) -> list[TimberMember]:
        """Two trimmers per opening, from the bottom plate up to the sill."""
        p = context.params
        tol = context.tolerance
        jack = p.jack_stud_width
        members: list[TimberMember] = []

        for opening in wall.usable_openings():
            if opening.head <= tol:
                continue
            jack_length = opening.sill - p.plate_thickness
            if jack_length <= tol:
                continue

            left = _clamp(opening.horizontal_range[0] + jack, 0.0, wall.length)
            right = _clamp(opening.horizontal_range[1] - jack, 0.0, wall.length)
            if right - left <= tol:
                continue

            for offset in (left, right):
                members.append(vertical_member(
                    wall.frame, MemberType.JACK_STUD, offset,
                    elevation=p.plate_thickness,
                    length=jack_length,
                    width=p.stud_width,
                    depth=p.stud_depth,
                    tag=context.next_tag(MemberType.JACK_STUD, wall),
                ))
        return members

    def _headers(self, wall: Wall, context: BuildingContext) -> list[TimberMember]:
        """One header on each opening head, unless it would run into the top plate."""
        p = context.params
        top_plate_underside = wall.height - p.plate_thickness
        members: list[TimberMember] = []
        for opening in wall.usable_openings():
            if opening.width <= context.tolerance:
                continue
            if opening.head + p.header_height > top_plate_underside + context.tolerance:
                context.warn(
                    f"{wall.name}: no room for a header above the opening at "
                    f"{opening.horizontal_range}, header skipped"
                )
                continue
            members.append(horizontal_member(
                wall.frame, MemberType.HEADER,
                start=opening.horizontal_range[0],
                span=opening.width,
                elevation=opening.head,
                section_height=p.header_height,
                section_depth=p.stud_depth,
                tag=context.next_tag(MemberType.HEADER, wall),
            ))
        return members

    def _plates(self, wall: Wall, context: BuildingContext) -> list[TimberMember]:
        p = context.params
        bottom = horizontal_member(
            wall.frame, MemberType.BOTTOM_PLATE,
            start=0.0,
            span=wall.length,
            elevation=0.0,
            section_height=p.plate_thickness,
            section_depth=p.stud_depth,
            tag=context.next_tag(MemberType.BOTTOM_PLATE, wall),
        )
        top = horizontal_member(
            wall.frame, MemberType.TOP_PLATE,
            start=0.0,
            span=wall.length,
            elevation=wall.height - p.plate_thickness,
            section_height=p.plate_thickness,
            section_depth=p.stud_depth,
            tag=context.next_tag(MemberType.TOP_PLATE, wall),
        )
        return [bottom, top]


def normalize_positions(positions: list[float], length: float, tol: float) -> list[float]:
    """Clamp to [0, length], sort, and drop values within tolerance of the previous one."""
    unique: list[float] = []
    for value in sorted(_clamp(p, 0.0, length) for p in positions):
        if not unique or abs(value - unique[-1]) > tol:
            unique.append(value)
    return unique


def inside_opening(offset: float, openings: list[Opening], tol: float) -> bool:
    """True when ``offset`` is strictly inside an opening's horizontal range."""
    return any(
        o.horizontal_range[0] + tol < offset < o.horizontal_range[1] - tol
        for o in openings
    )


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)
