"""Interface shared by the wall, corner and bracing rules.

A rule reads the walls and corners of a BuildingContext and returns the
members it is responsible for. The registry decides which rules run and
in what order.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from shellframer.models.context import BuildingContext
from shellframer.models.framing import TimberMember


class FramingRule(ABC):
    """One group of framing members, e.g. wall studs or corner posts."""

    # Lower runs first
    priority: int = 100

    # Rule ids that must run earlier when they are active
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Dotted id such as ``"corner.posts"``; used by GenerationConfig."""

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def applies(self, context: BuildingContext) -> bool:
        ...

    @abstractmethod
    def generate(self, context: BuildingContext) -> list[TimberMember]:
        """
        Members for this rule.

        Tags must come from ``context.next_tag`` so sequence numbers follow
        generation order within a run.
        """

    def describe(self) -> dict[str, object]:
        return {
            "id": self.get_id(),
            "name": self.get_name(),
            "priority": self.priority,
            "dependencies": list(self.dependencies),
        }
