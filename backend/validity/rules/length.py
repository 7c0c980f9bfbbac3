"""
Length rules. Lengths count code points, not bytes.
"""

from typing import Sequence

from ..base import BaseRule, RuleMetadata, CheckContext, Category


class BetweenRule(BaseRule):
    """Exclusive bounds: between:3,6 accepts lengths 4 and 5 only."""

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="between",
            name="Between",
            description="Length strictly between min and max",
            category=Category.LENGTH,
            arity=2,
            example_valid="between:3,6 -> 'abcd'",
            example_invalid="between:3,6 -> 'abc'",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        low, high = self.to_int(args[0], ctx), self.to_int(args[1], ctx)
        return low < len(item) < high


class BetweenInclusiveRule(BaseRule):

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="between_inclusive",
            name="Between Inclusive",
            description="Length within [min, max]",
            category=Category.LENGTH,
            arity=2,
            example_valid="between_inclusive:3,6 -> 'abc'",
            example_invalid="between_inclusive:3,6 -> 'ab'",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        low, high = self.to_int(args[0], ctx), self.to_int(args[1], ctx)
        return low <= len(item) <= high


class LenRule(BaseRule):
    """
    Passes when the length is NOT the given value.

    The inverted sense is long-standing behaviour that existing rule lists
    depend on; use between_inclusive:n,n for an exact length.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="len",
            name="Length Differs",
            description="Length must differ from the given value",
            category=Category.LENGTH,
            arity=1,
            example_valid="len:5 -> 'abcd'",
            example_invalid="len:5 -> 'abcde'",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return len(item) != self.to_int(args[0], ctx)


class MaxRule(BaseRule):

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="max",
            name="Max Length",
            description="Length at most the given bound",
            category=Category.LENGTH,
            arity=1,
            example_valid="max:3 -> 'abc'",
            example_invalid="max:3 -> 'abcd'",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return len(item) <= self.to_int(args[0], ctx)


class MinRule(BaseRule):

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="min",
            name="Min Length",
            description="Length at least the given bound",
            category=Category.LENGTH,
            arity=1,
            example_valid="min:3 -> 'abc'",
            example_invalid="min:3 -> 'ab'",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return len(item) >= self.to_int(args[0], ctx)
