"""Rule registry: stores framing rules and resolves their run order."""

from __future__ import annotations
import logging

from shellframer.models.context import BuildingContext
from shellframer.models.parameters import GenerationConfig
from shellframer.rules.base import FramingRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Framing rules keyed by id, in registration order.

    A run asks for the rules that survive the GenerationConfig filters and
    their own ``applies()`` check. Those come back ordered by priority, and
    a rule never runs before the rules named in its ``dependencies``.
    """

    def __init__(self) -> None:
        self._rules: dict[str, FramingRule] = {}

    def register(self, rule: FramingRule) -> None:
        rule_id = rule.get_id()
        if rule_id in self._rules:
            raise ValueError(f"Framing rule already registered: {rule_id}")
        self._rules[rule_id] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> FramingRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[FramingRule]:
        return list(self._rules.values())

    def select(self, config: GenerationConfig) -> list[FramingRule]:
        """Rules left after the enabled/disabled filters, in registration order."""
        enabled = set(config.enabled_rules)
        disabled = set(config.disabled_rules)
        return [
            rule for rule_id, rule in self._rules.items()
            if (not enabled or rule_id in enabled) and rule_id not in disabled
        ]

    def get_applicable_rules(self, context: BuildingContext) -> list[FramingRule]:
        active = [r for r in self.select(context.config) if r.applies(context)]
        ordered = run_order(active)
        logger.debug("Rule order: %s", [r.get_id() for r in ordered])
        return ordered


def run_order(rules: list[FramingRule]) -> list[FramingRule]:
    """Priority order, moving each rule after its active dependencies.

    Dependencies that are not in ``rules`` are ignored. A dependency cycle
    raises ValueError.
    """
    by_id = {r.get_id(): r for r in rules}
    done: dict[str, FramingRule] = {}
    pending: list[str] = []

    def place(rule: FramingRule) -> None:
        rule_id = rule.get_id()
        if rule_id in done:
            return
        if rule_id in pending:
            cycle = " -> ".join([*pending[pending.index(rule_id):], rule_id])
            raise ValueError(f"Framing rule dependency cycle: {cycle}")
        pending.append(rule_id)
        for dep_id in rule.dependencies:
            dep = by_id.get(dep_id)
            if dep is None:
                logger.debug("%s: dependency %s is not active in this run", rule_id, dep_id)
                continue
            place(dep)
        pending.pop()
        done[rule_id] = rule

    for rule in sorted(rules, key=lambda r: r.priority):
        place(rule)
    return list(done.values())


def create_default_registry() -> RuleRegistry:
    """Registry with the wall, corner and bracing rules."""
    from shellframer.rules.wall.platform_frame import PlatformWallFramingRule
    from shellframer.rules.wall.bracing import WallBracingRule
    from shellframer.rules.corner.corner_posts import CornerPostRule

    registry = RuleRegistry()
    for rule in (PlatformWallFramingRule(), CornerPostRule(), WallBracingRule()):
        registry.register(rule)
    return registry
