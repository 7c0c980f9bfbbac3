"""
Base classes for the validity string-rule framework.

To create a new rule:
1. Create a class that inherits from BaseRule
2. Implement the metadata property with RuleMetadata
3. Implement the check() method
4. Register the rule in the registry
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple, Union

from .errors import MalformedArgument

logger = logging.getLogger(__name__)
diagnostics_logger = logging.getLogger('validity.diagnostics')

INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


class Category(Enum):
    """Categories for grouping rules."""
    CHARSET = "charset"
    LENGTH = "length"
    FORMAT = "format"
    NETWORK = "network"
    IDENTITY = "identity"
    CUSTOM = "custom"


class RuleOutcome(Enum):
    """Result of evaluating one rule against one item."""
    PASSED = "passed"
    FAILED = "failed"
    UNKNOWN_RULE = "unknown_rule"
    MALFORMED_ARGUMENT = "malformed_argument"


@dataclass
class RuleMetadata:
    """Metadata for a rule, used for dispatch and documentation."""
    id: str
    name: str
    description: str
    category: Category
    arity: int = 0
    example_valid: Optional[str] = None
    example_invalid: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'category': self.category.value,
            'arity': self.arity,
            'example_valid': self.example_valid,
            'example_invalid': self.example_invalid,
        }


@dataclass(frozen=True)
class CheckOptions:
    """Switches for the legacy leniencies of the string checker."""
    strict_arguments: bool = False
    strict_calendar: bool = False
    minimum_age: int = 14


def log_diagnostic(message: str) -> None:
    diagnostics_logger.debug(message)


@dataclass(frozen=True)
class CheckContext:
    """
    Everything a rule may need besides the item and its arguments.

    today is read by the rules that depend on the calendar; sink receives
    human-readable diagnostics and is never required for correctness.
    """
    options: CheckOptions = field(default_factory=CheckOptions)
    today: Callable[[], date] = date.today
    sink: Optional[Callable[[str], None]] = log_diagnostic

    def emit(self, message: str) -> None:
        if self.sink is None:
            return
        try:
            self.sink(message)
        except Exception:
            logger.exception("Diagnostic sink failed for message: %s", message)


@dataclass(frozen=True)
class RuleSpec:
    """A rule name plus its raw string arguments."""
    name: str
    args: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, token: str, arity: Optional[int] = None) -> 'RuleSpec':
        """
        Split a rule token of the form name, name:arg or name:arg1,arg2.

        Arguments are comma-split only when the rule takes two of them, or
        when the arity is unknown. Otherwise everything after the first colon
        is a single argument, so regexp patterns may contain commas.
        """
        name, sep, rest = token.partition(':')
        if not sep:
            return cls(name=name)
        if arity is None or arity >= 2:
            return cls(name=name, args=tuple(rest.split(',')))
        return cls(name=name, args=(rest,))

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}:{','.join(self.args)}"


RuleLike = Union[str, RuleSpec]


@dataclass(frozen=True)
class ValidationSubject:
    """
    One value under validation.

    rules[0] is the required gate, evaluated by the caller; error
    collection starts at rules[1].
    """
    key: str
    item: str
    rules: Tuple[RuleLike, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'rules', tuple(self.rules))


class BaseRule(ABC):
    """
    Base class for all string rules.

    ```python
    class UpperRule(BaseRule):
        @property
        def metadata(self) -> RuleMetadata:
            return RuleMetadata(
                id="upper",
                name="Upper Case",
                description="Only upper case ASCII letters",
                category=Category.CUSTOM,
            )

        def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
            return self.matches(r'[A-Z]*', item)
    ```
    """

    @property
    @abstractmethod
    def metadata(self) -> RuleMetadata:
        """Return rule metadata for dispatch and documentation."""
        pass

    @abstractmethod
    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        """
        Check a single item.

        Args:
            item: The string under test, possibly empty
            args: Raw arguments, already checked against metadata.arity
            ctx: Options, clock and diagnostic sink

        Returns:
            True when the item satisfies the rule
        """
        pass

    def to_int(self, raw: str, ctx: CheckContext) -> int:
        """
        Parse an integer argument.

        Unparseable input degrades to 0 unless strict arguments are enabled,
        in which case MalformedArgument is raised.
        """
        if INTEGER_PATTERN.fullmatch(raw):
            return int(raw)
        if ctx.options.strict_arguments:
            raise MalformedArgument(self.metadata.id, raw, "not an integer")
        ctx.emit(f"Argument {raw!r} of rule '{self.metadata.id}' is not an integer, using 0")
        return 0

    @staticmethod
    def matches(pattern: str, item: str, flags: int = 0) -> bool:
        return re.fullmatch(pattern, item, flags) is not None
