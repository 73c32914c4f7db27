"""Timber framing output models."""

from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .geometry import LocalFrame, Point3D

FRAME_CATEGORY = "timber_frame"
FRAME_VERSION = "0.3.0"


class MemberType(str, Enum):
    STUD = "stud"
    JACK_STUD = "jack_stud"
    HEADER = "header"
    BOTTOM_PLATE = "bottom_plate"
    TOP_PLATE = "top_plate"
    CORNER_POST = "corner_post"
    BRACE = "brace"


class MemberTag(BaseModel):
    """Metadata record attached to one member."""
    model_config = ConfigDict(frozen=True)

    category: str = "framing_member"
    member_type: MemberType
    sequence: int
    wall: str = ""

    def as_attributes(self) -> dict[str, str | int]:
        attrs: dict[str, str | int] = {
            "category": self.category,
            "member_type": self.member_type.value,
            "sequence": self.sequence,
        }
        if self.wall:
            attrs["wall"] = self.wall
        return attrs


class TimberMember(BaseModel):
    """A single piece of timber: a centred rectangular section extruded along frame z."""
    model_config = ConfigDict(frozen=True)

    type: MemberType
    frame: LocalFrame
    width: float    # Along frame x
    depth: float    # Along frame y
    length: float   # Along frame z
    tag: MemberTag

    @property
    def start(self) -> Point3D:
        return self.frame.origin

    @property
    def end(self) -> Point3D:
        return self.frame.origin.offset(self.frame.zaxis, self.length)


class FrameLayout(BaseModel):
    """Members grouped per kind, in generation order."""
    studs: list[TimberMember] = []
    jack_studs: list[TimberMember] = []
    headers: list[TimberMember] = []
    bottom_plates: list[TimberMember] = []
    top_plates: list[TimberMember] = []
    corner_posts: list[TimberMember] = []
    braces: list[TimberMember] = []

    @classmethod
    def from_members(cls, members: list[TimberMember]) -> FrameLayout:
        buckets: dict[MemberType, list[TimberMember]] = {t: [] for t in MemberType}
        for m in members:
            buckets[m.type].append(m)
        return cls(
            studs=buckets[MemberType.STUD],
            jack_studs=buckets[MemberType.JACK_STUD],
            headers=buckets[MemberType.HEADER],
            bottom_plates=buckets[MemberType.BOTTOM_PLATE],
            top_plates=buckets[MemberType.TOP_PLATE],
            corner_posts=buckets[MemberType.CORNER_POST],
            braces=buckets[MemberType.BRACE],
        )


class FrameSummary(BaseModel):
    """Metadata record attached to the produced assembly."""
    category: str = FRAME_CATEGORY
    version: str = FRAME_VERSION
    length_mm: float
    width_mm: float
    height_mm: float
    total_members: int = 0
    counts: dict[str, int] = {}

    @classmethod
    def from_members(
        cls,
        members: list[TimberMember],
        length_mm: float,
        width_mm: float,
        height_mm: float,
    ) -> FrameSummary:
        counts = {t.value: 0 for t in MemberType}
        for m in members:
            counts[m.type.value] += 1
        return cls(
            length_mm=length_mm,
            width_mm=width_mm,
            height_mm=height_mm,
            total_members=len(members),
            counts=counts,
        )


class TimberFrame(BaseModel):
    """The complete generated timber frame."""
    members: list[TimberMember]
    layout: FrameLayout = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.layout is None:
            self.layout = FrameLayout.from_members(self.members)
