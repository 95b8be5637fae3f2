"""
Assembly Domain - Compatibility Rules.

A rule is a plain callable taking a RuleContext and returning a Violation,
or None when it has no objection. Rules run in order and evaluation stops at
the first violation.

Two kinds of rules exist:
- part rules look at ``context.subject`` (the part being checked) and do
  nothing when there is no subject;
- assembly rules look at the candidate set as a whole, usually through
  ``context.category_map``.

New rules are added to a RuleSet without touching the validator or callers:

    rules = default_rule_set()
    rules.add(my_rule)
    AssemblyValidator(rules)
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Callable, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple
from uuid import UUID

from domain.catalog.entities import Part
from domain.shared.value_objects import PartCategory, PartValue

from .value_objects import Violation


@dataclass(frozen=True)
class RuleContext:
    """
    Snapshot the rules are evaluated against.

    Attributes:
        product_type: declared type of the custom product
        parts: the full candidate part set (existing parts plus any new one)
        subject: the part currently being checked, if any
        attached_ids: ids of parts already attached before this change
    """

    product_type: str
    parts: Tuple[Part, ...]
    subject: Optional[Part] = None
    attached_ids: FrozenSet[UUID] = field(default_factory=frozenset)

    @cached_property
    def category_map(self) -> Dict[str, str]:
        """Category -> value for the candidate set; the last part wins."""
        mapping: Dict[str, str] = {}
        for part in self.parts:
            mapping[part.category] = part.value
        return mapping

    def is_newly_attached(self, part: Part) -> bool:
        return part.id not in self.attached_ids

    def with_subject(self, part: Part) -> RuleContext:
        return replace(self, subject=part)


Rule = Callable[[RuleContext], Optional[Violation]]


# =============================================================================
# PART RULES
# =============================================================================

def product_type_matches(context: RuleContext) -> Optional[Violation]:
    """A part can only join a product of its own type."""
    part = context.subject
    if part is None or part.product_type == context.product_type:
        return None
    return Violation(
        rule="product_type_matches",
        message=f"Part {part.category} cannot be added to a {context.product_type}.",
        category=part.category,
        value=part.product_type,
        part_id=part.id,
    )


def in_stock(context: RuleContext) -> Optional[Violation]:
    """Newly attached parts must have stock; parts already attached are kept."""
    part = context.subject
    if part is None or part.in_stock or not context.is_newly_attached(part):
        return None
    return Violation(
        rule="in_stock",
        message=f"Part {part.category} is out of stock.",
        category=part.category,
        value=part.value,
        part_id=part.id,
    )


# =============================================================================
# ASSEMBLY RULES
# =============================================================================

def mountain_wheels_need_full_suspension(context: RuleContext) -> Optional[Violation]:
    categories = context.category_map
    if categories.get(PartCategory.WHEELS.value) != PartValue.MOUNTAIN_WHEELS.value:
        return None
    if categories.get(PartCategory.FRAME_TYPE.value) == PartValue.FULL_SUSPENSION.value:
        return None
    return Violation(
        rule="mountain_wheels_need_full_suspension",
        message="Mountain wheels require a full-suspension frame.",
        category=PartCategory.WHEELS.value,
        value=PartValue.MOUNTAIN_WHEELS.value,
    )


def no_red_rims_on_fat_bike_wheels(context: RuleContext) -> Optional[Violation]:
    categories = context.category_map
    if (
        categories.get(PartCategory.RIM_COLOR.value) == PartValue.RED.value
        and categories.get(PartCategory.WHEELS.value) == PartValue.FAT_BIKE_WHEELS.value
    ):
        return Violation(
            rule="no_red_rims_on_fat_bike_wheels",
            message="Fat bike wheels cannot have a red rim color.",
            category=PartCategory.RIM_COLOR.value,
            value=PartValue.RED.value,
        )
    return None


def single_part_per_category(context: RuleContext) -> Optional[Violation]:
    """Each category slot holds at most one part."""
    seen = set()
    for part in context.parts:
        if part.category in seen:
            return Violation(
                rule="single_part_per_category",
                message=f"Only one {part.category} part can be selected.",
                category=part.category,
                value=part.value,
                part_id=part.id,
            )
        seen.add(part.category)
    return None


# =============================================================================
# RULE SET
# =============================================================================

DEFAULT_RULES: Tuple[Rule, ...] = (
    product_type_matches,
    in_stock,
    mountain_wheels_need_full_suspension,
    no_red_rims_on_fat_bike_wheels,
    single_part_per_category,
)


class RuleSet:
    """Ordered collection of rules evaluated with short-circuit semantics."""

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: List[Rule] = list(rules)

    def add(self, rule: Rule) -> None:
        """Append a rule; it runs after every existing rule."""
        self._rules.append(rule)

    def evaluate(self, context: RuleContext) -> Optional[Violation]:
        """Return the first violation, or None if every rule passes."""
        for rule in self._rules:
            violation = rule(context)
            if violation is not None:
                return violation
        return None

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def default_rule_set() -> RuleSet:
    return RuleSet(DEFAULT_RULES)
