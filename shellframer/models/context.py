"""Building context: accumulates state during one framing run."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import Wall, Corner
from .framing import MemberTag, MemberType, TimberMember
from .parameters import FramingParams, GenerationConfig


# Members sharing a counter are numbered in one sequence.
SEQUENCE_CATEGORY = {
    MemberType.STUD: "stud",
    MemberType.JACK_STUD: "stud",
    MemberType.BOTTOM_PLATE: "plate",
    MemberType.TOP_PLATE: "plate",
    MemberType.HEADER: "header",
    MemberType.CORNER_POST: "corner_post",
    MemberType.BRACE: "brace",
}


class BuildingContext(BaseModel):
    """
    Holds all state during a single frame generation pass.

    The analyzer adds corners.
    Rules add generated members.
    Sequence counters live here, so they reset with every run.
    """
    # Input
    walls: list[Wall]
    params: FramingParams
    config: GenerationConfig = Field(default_factory=GenerationConfig)
    tolerance: float = 1e-6

    # Analysis results (populated by the analyzer)
    corners: list[Corner] = []

    # Output (populated by rules)
    members: list[TimberMember] = []
    warnings: list[str] = []

    sequences: dict[str, int] = {}

    def next_tag(self, member_type: MemberType, wall: Wall | None = None) -> MemberTag:
        category = SEQUENCE_CATEGORY[member_type]
        self.sequences[category] = self.sequences.get(category, 0) + 1
        return MemberTag(
            member_type=member_type,
            sequence=self.sequences[category],
            wall=wall.name if wall is not None else "",
        )

    def add_members(self, members: list[TimberMember]) -> None:
        self.members.extend(members)

    def warn(self, message: str) -> None:
        self.warnings.append(message)
