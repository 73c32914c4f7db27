"""Helpers turning wall-local placements into TimberMember values."""

from __future__ import annotations

from shellframer.models import LocalFrame, MemberTag, MemberType, TimberMember


def vertical_member(
    wall_frame: LocalFrame,
    member_type: MemberType,
    offset: float,
    elevation: float,
    length: float,
    width: float,
    depth: float,
    tag: MemberTag,
) -> TimberMember:
    """Member standing at ``offset`` along the wall, rising from ``elevation``."""
    origin = wall_frame.point_at(x=offset, z=elevation)
    return TimberMember(
        type=member_type,
        frame=wall_frame.moved_to(origin).right_handed(),
        width=width,
        depth=depth,
        length=length,
        tag=tag,
    )


def horizontal_member(
    wall_frame: LocalFrame,
    member_type: MemberType,
    start: float,
    span: float,
    elevation: float,
    section_height: float,
    section_depth: float,
    tag: MemberTag,
) -> TimberMember:
    """Member lying along the wall from ``start``, its underside at ``elevation``.

    The member frame is (wall y, wall z, wall x): the section is
    ``section_depth`` through the wall by ``section_height`` tall.
    """
    origin = wall_frame.point_at(x=start, z=elevation + section_height / 2.0)
    frame = LocalFrame(
        origin=origin,
        xaxis=wall_frame.yaxis,
        yaxis=wall_frame.zaxis,
        zaxis=wall_frame.xaxis,
    ).right_handed()
    return TimberMember(
        type=member_type,
        frame=frame,
        width=section_depth,
        depth=section_height,
        length=span,
        tag=tag,
    )
