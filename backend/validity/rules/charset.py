"""
Character-set rules: which characters an item may consist of.

All patterns use a * quantifier, so the empty string passes.
"""

from typing import Sequence

from ..base import BaseRule, RuleMetadata, CheckContext, Category


ACCEPTED_TOKENS = {'yes', 'on', '1'}


class AcceptedRule(BaseRule):
    """Checkbox-style acceptance."""

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="accepted",
            name="Accepted",
            description="Item must be exactly 'yes', 'on' or '1'",
            category=Category.CHARSET,
            example_valid="yes",
            example_invalid="Yes, true, 0",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return item in ACCEPTED_TOKENS


class AlphaRule(BaseRule):

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="alpha",
            name="Alpha",
            description="Only ASCII letters",
            category=Category.CHARSET,
            example_valid="Hello",
            example_invalid="Hello1, Grüezi",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return self.matches(r'[A-Za-z]*', item)


class AlphaDashRule(BaseRule):

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="alpha_dash",
            name="Alpha Dash",
            description="Only ASCII letters, digits, hyphens and underscores",
            category=Category.CHARSET,
            example_valid="user_name-42",
            example_invalid="user.name, user name",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return self.matches(r'[A-Za-z0-9\-_]*', item)


class AlphaNumRule(BaseRule):

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="alpha_num",
            name="Alpha Numeric",
            description="Only ASCII letters and digits",
            category=Category.CHARSET,
            example_valid="abc123",
            example_invalid="abc-123",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return self.matches(r'[A-Za-z0-9]*', item)


class FullNameRule(BaseRule):
    """Letters, digits, whitespace and periods, e.g. 'J. R. Smith'."""

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="full_name",
            name="Full Name",
            description="Only ASCII letters, digits, whitespace and periods",
            category=Category.CHARSET,
            example_valid="John F. Kennedy",
            example_invalid="O'Brien, Anne-Marie",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        # tab, newline, form feed, carriage return and space; no vertical tab
        return self.matches(r'[A-Za-z0-9\t\n\f\r .]*', item)
