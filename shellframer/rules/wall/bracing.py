"""Diagonal bracing: crossing braces across walls without openings."""

from __future__ import annotations

from shellframer.rules.base import FramingRule
from shellframer.models import (
    BuildingContext, LocalFrame, MemberType, TimberMember, Wall,
)


class WallBracingRule(FramingRule):
    """Two diagonal braces per unbroken wall, bottom corner to opposite top corner."""

    priority = 70
    dependencies = ["wall.platform_frame"]

    def get_id(self) -> str:
        return "wall.bracing"

    def get_name(self) -> str:
        return "Diagonal Wall Bracing"

    def applies(self, context: BuildingContext) -> bool:
        return context.params.braces and len(context.walls) > 0

    def generate(self, context: BuildingContext) -> list[TimberMember]:
        members: list[TimberMember] = []
        for wall in context.walls:
            if wall.usable_openings():
                continue
            for start, end in ((0.0, wall.length), (wall.length, 0.0)):
                brace = self._brace(wall, start, end, context)
                if brace is not None:
                    members.append(brace)
        return members

    def _brace(
        self, wall: Wall, start: float, end: float, context: BuildingContext,
    ) -> TimberMember | None:
        p = context.params
        low = p.plate_thickness
        high = wall.height - p.plate_thickness
        start_point = wall.frame.point_at(x=start, z=low)
        end_point = wall.frame.point_at(x=end, z=high)
        direction = start_point.vector_to(end_point)
        length = direction.length()
        if length <= context.tolerance:
            return None

        zaxis = direction.normalized()
        frame = LocalFrame(
            origin=start_point,
            xaxis=wall.frame.yaxis.cross(zaxis).normalized(),
            yaxis=wall.frame.yaxis,
            zaxis=zaxis,
        )
        return TimberMember(
            type=MemberType.BRACE,
            frame=frame,
            width=p.stud_width,
            depth=p.stud_depth,
            length=length,
            tag=context.next_tag(MemberType.BRACE, wall),
        )
