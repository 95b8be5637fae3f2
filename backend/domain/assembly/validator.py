"""
Assembly Domain - Validator.

Decides whether a proposed change to a custom product's parts or type is legal.
All operations are pure: they read the snapshot they are given and never
mutate the product, the parts or the rule set.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, List, Optional

from domain.catalog.entities import Part

from .rules import RuleContext, RuleSet, default_rule_set
from .value_objects import IncompatiblePart, Violation

if TYPE_CHECKING:
    from .aggregates import CustomProduct


class AssemblyValidator:
    """
    Applies the compatibility rule set to custom product changes.

    Rule failures are returned as a Violation; None means "no objection".
    """

    def __init__(self, rules: Optional[RuleSet] = None):
        self.rules = rules if rules is not None else default_rule_set()

    def validate_attach(self, product: CustomProduct, new_part: Part) -> Optional[Violation]:
        """
        Check attaching ``new_part`` to ``product``.

        A part already occupying the same category is swapped out, so the
        candidate set is the product's parts with ``new_part`` in that slot.
        """
        candidates = tuple(
            part for part in product.parts
            if part.category != new_part.category and part.id != new_part.id
        ) + (new_part,)
        context = RuleContext(
            product_type=product.product_type,
            parts=candidates,
            subject=new_part,
            attached_ids=frozenset(
                part.id for part in product.parts if part.id != new_part.id
            ),
        )
        return self.rules.evaluate(context)

    def validate_replace_all(
        self,
        product: CustomProduct,
        candidate_parts: Iterable[Part],
    ) -> Optional[Violation]:
        """
        Check replacing every part of ``product`` with ``candidate_parts``.

        The replacement is total: rules see only the candidate set, never the
        old parts. Each candidate is checked in order and the first violation
        found is returned. Callers reject an empty replacement beforehand.
        """
        base = RuleContext(
            product_type=product.product_type,
            parts=tuple(candidate_parts),
            attached_ids=product.part_ids,
        )
        for part in base.parts:
            violation = self.rules.evaluate(base.with_subject(part))
            if violation is not None:
                return violation
        return None

    def validate_type_change(
        self,
        product: CustomProduct,
        new_type: str,
    ) -> Optional[List[IncompatiblePart]]:
        """Return every attached part that does not match ``new_type``, or None."""
        incompatible = [
            IncompatiblePart(
                part_id=part.id,
                category=part.category,
                product_type=part.product_type,
            )
            for part in product.parts
            if part.product_type != new_type
        ]
        return incompatible or None
