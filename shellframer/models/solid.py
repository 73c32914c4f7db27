"""Solid input: the host's description of the selected shell.

Geometry arrives as a closed tagged union of entities. The dispatch over
entity kinds happens once, here, at the ingestion boundary.
"""

from __future__ import annotations
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .geometry import Point3D, Transform, Vector3D


class FaceEntity(BaseModel):
    """A planar face: a normal plus closed point loops, one of them outer."""
    kind: Literal["face"] = "face"
    normal: Vector3D
    loops: list[list[Point3D]] = Field(min_length=1)
    outer_loop: int = 0

    @property
    def outer(self) -> list[Point3D]:
        return self.loops[self.outer_loop]

    @property
    def inner(self) -> list[list[Point3D]]:
        return [loop for i, loop in enumerate(self.loops) if i != self.outer_loop]


class EdgeEntity(BaseModel):
    kind: Literal["edge"] = "edge"
    start: Point3D
    end: Point3D


class LoopEntity(BaseModel):
    """A closed loop not bound to any face."""
    kind: Literal["loop"] = "loop"
    points: list[Point3D]


GeometryEntity = Annotated[
    Union[FaceEntity, EdgeEntity, LoopEntity],
    Field(discriminator="kind"),
]


class Solid(BaseModel):
    """Entities in solid-local coordinates plus the solid-to-world transform."""
    entities: list[GeometryEntity]
    transform: Transform = Field(default_factory=Transform.identity)

    @classmethod
    def from_faces(cls, faces: list[FaceEntity], transform: Transform | None = None) -> Solid:
        return cls(entities=faces, transform=transform or Transform.identity())

    def split(self) -> tuple[list[FaceEntity], list[LoopEntity]]:
        """Return (faces, loose loops). Free edges are dropped: faces carry their own boundary."""
        faces: list[FaceEntity] = []
        loose: list[LoopEntity] = []
        for entity in self.entities:
            if isinstance(entity, FaceEntity):
                faces.append(entity)
            elif isinstance(entity, LoopEntity):
                loose.append(entity)
            elif isinstance(entity, EdgeEntity):
                continue
            else:
                raise TypeError(f"Unsupported geometry entity: {type(entity).__name__}")
        return faces, loose
