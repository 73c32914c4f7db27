"""Corner posts: the one cross-wall framing step.

One post per unique footprint corner, pushed outward by half its section
on both horizontal axes so it sits flush outside the corner.
"""

from __future__ import annotations

from shellframer.rules.base import FramingRule
from shellframer.models import (
    BuildingContext, LocalFrame, MemberType, Point3D, TimberMember,
)


class CornerPostRule(FramingRule):
    """Vertical posts at wall-to-wall corners."""

    priority = 60
    dependencies = ["wall.platform_frame"]

    def get_id(self) -> str:
        return "corner.posts"

    def get_name(self) -> str:
        return "Corner Posts"

    def applies(self, context: BuildingContext) -> bool:
        return len(context.corners) > 0

    def generate(self, context: BuildingContext) -> list[TimberMember]:
        p = context.params
        height = max(w.height for w in context.walls)
        if height <= context.tolerance:
            return []

        points = [c.point for c in context.corners]
        min_x, max_x = min(pt.x for pt in points), max(pt.x for pt in points)
        min_y, max_y = min(pt.y for pt in points), max(pt.y for pt in points)

        members: list[TimberMember] = []
        for corner in context.corners:
            pt = corner.point
            origin = Point3D(
                x=pt.x + outward_offset(pt.x, min_x, max_x, p.corner_post_width),
                y=pt.y + outward_offset(pt.y, min_y, max_y, p.corner_post_depth),
                z=pt.z,
            )
            members.append(TimberMember(
                type=MemberType.CORNER_POST,
                frame=LocalFrame.world(origin),
                width=p.corner_post_width,
                depth=p.corner_post_depth,
                length=height,
                tag=context.next_tag(MemberType.CORNER_POST),
            ))
        return members


def outward_offset(coordinate: float, low: float, high: float, size: float) -> float:
    """Half of ``size`` away from the footprint midpoint along one axis."""
    midpoint = (low + high) / 2.0
    return -size / 2.0 if coordinate < midpoint else size / 2.0
