"""
Rule dispatch and batch execution.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .base import (
    BaseRule,
    Category,
    CheckContext,
    RuleLike,
    RuleOutcome,
    RuleSpec,
    ValidationSubject,
)
from .errors import ArityMismatch, MalformedArgument, UnknownRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Central registry for all string rules, keyed by rule name."""

    def __init__(self):
        self._rules: Dict[str, BaseRule] = {}

    def register(self, rule: BaseRule) -> None:
        """Register a rule instance, replacing any rule with the same name."""
        self._rules[rule.metadata.id] = rule

    def get_rule(self, rule_id: str) -> Optional[BaseRule]:
        """Get a specific rule by name."""
        return self._rules.get(rule_id)

    def get_all_rules(self) -> List[BaseRule]:
        """Get all registered rules."""
        return list(self._rules.values())

    def get_rules_by_category(self, category: Category) -> List[BaseRule]:
        """Get all rules in a category."""
        return [r for r in self._rules.values()
                if r.metadata.category == category]

    def get_rule_ids(self) -> List[str]:
        """Get all rule names."""
        return list(self._rules.keys())

    def get_documentation(self) -> List[dict]:
        """Generate documentation for all rules."""
        return [
            r.metadata.to_dict()
            for r in sorted(self._rules.values(), key=lambda x: x.metadata.id)
        ]


class RuleDispatcher:
    """
    Maps a rule name and its arguments onto a registered rule.

    Usage:
        dispatcher = RuleDispatcher(create_default_registry())
        dispatcher.dispatch("abcd", "between", ["3", "6"])  # True

        subject = ValidationSubject("name", "abc", ["required", "alpha", "min:5"])
        dispatcher.get_errors(subject)  # ['min']
    """

    def __init__(self, registry: RuleRegistry, context: Optional[CheckContext] = None):
        self.registry = registry
        self.context = context or CheckContext()

    def resolve(self, rule: RuleLike) -> RuleSpec:
        """Turn a rule token into a RuleSpec, using the rule's arity to split arguments."""
        if isinstance(rule, RuleSpec):
            return rule
        name = rule.partition(':')[0]
        known = self.registry.get_rule(name)
        return RuleSpec.parse(rule, known.metadata.arity if known else None)

    def dispatch(self, item: str, name: str, args: Sequence[str] = ()) -> bool:
        """
        Run one rule against an item.

        Raises:
            UnknownRule: name is not registered
            ArityMismatch: wrong number of arguments for the rule
            MalformedArgument: unparseable argument, strict mode only
        """
        rule = self.registry.get_rule(name)
        if rule is None:
            raise UnknownRule(name)
        arity = rule.metadata.arity
        if len(args) != arity:
            raise ArityMismatch(name, arity, len(args))
        return bool(rule.check(item, tuple(args), self.context))

    def run(self, item: str, rule: RuleLike) -> Tuple[RuleOutcome, Optional[str]]:
        """Evaluate a rule without raising; returns the outcome and, for errors, the reason."""
        spec = self.resolve(rule)
        try:
            passed = self.dispatch(item, spec.name, spec.args)
        except UnknownRule as e:
            return RuleOutcome.UNKNOWN_RULE, str(e)
        except MalformedArgument as e:
            return RuleOutcome.MALFORMED_ARGUMENT, str(e)
        return (RuleOutcome.PASSED if passed else RuleOutcome.FAILED), None

    def evaluate(self, item: str, rule: RuleLike) -> RuleOutcome:
        return self.run(item, rule)[0]

    def check_subject(self, subject: ValidationSubject) -> List[Tuple[RuleSpec, RuleOutcome]]:
        """Outcomes for every rule after the required gate, in declaration order."""
        results = []
        for rule in subject.rules[1:]:
            spec = self.resolve(rule)
            outcome, reason = self.run(subject.item, spec)
            if reason is not None:
                logger.warning("Field '%s': %s", subject.key, reason)
            results.append((spec, outcome))
        return results

    def get_errors(self, subject: ValidationSubject) -> List[str]:
        """Names of the rules the subject does not satisfy, skipping rules[0]."""
        return [
            spec.name
            for spec, outcome in self.check_subject(subject)
            if outcome is not RuleOutcome.PASSED
        ]


@dataclass
class ValidationError:
    """A single (row, rule) failure from a batch run."""
    row_index: int
    key: str
    rule_id: str
    outcome: RuleOutcome
    value: Optional[str] = None
    message: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'row_index': self.row_index,
            'key': self.key,
            'rule_id': self.rule_id,
            'outcome': self.outcome.value,
            'value': self.value,
            'message': self.message,
        }


@dataclass
class ValidationResult:
    """Complete result of a batch run over one field."""
    key: str
    total_rows: int
    errors: List[ValidationError] = field(default_factory=list)
    rules_executed: List[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def passed_rows(self) -> int:
        failed_rows = set(e.row_index for e in self.errors)
        return self.total_rows - len(failed_rows)

    def get_errors_by_rule(self) -> Dict[str, int]:
        """Group error counts by rule."""
        counts = defaultdict(int)
        for e in self.errors:
            counts[e.rule_id] += 1
        return dict(counts)

    def get_errors_by_outcome(self) -> Dict[str, int]:
        """Separate plain failures from misconfigured rules."""
        counts = defaultdict(int)
        for e in self.errors:
            counts[e.outcome.value] += 1
        return dict(counts)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'key': self.key,
            'total_rows': self.total_rows,
            'error_count': self.error_count,
            'passed_rows': self.passed_rows,
            'pass_rate': round(self.passed_rows / self.total_rows * 100, 1) if self.total_rows > 0 else 100,
            'errors': [e.to_dict() for e in self.errors],
            'errors_by_rule': self.get_errors_by_rule(),
            'errors_by_outcome': self.get_errors_by_outcome(),
            'rules_executed': self.rules_executed,
        }


class ValidationEngine:
    """
    Runs one field's rule list over many values.

    Usage:
        engine = ValidationEngine(RuleDispatcher(create_default_registry()))
        result = engine.validate(pd.Series(["a", "b1"]), "code", ["required", "alpha"])
    """

    def __init__(self, dispatcher: RuleDispatcher):
        self.dispatcher = dispatcher

    def validate(self, values: pd.Series, key: str, rules: Sequence[RuleLike]) -> ValidationResult:
        """
        Check every value against rules[1:].

        Missing values (None, NaN) are checked as the empty string; the
        required gate in rules[0] is the caller's concern.
        """
        specs = [self.dispatcher.resolve(r) for r in rules[1:]]
        result = ValidationResult(key=key, total_rows=len(values))
        result.rules_executed = [s.name for s in specs]

        for idx, value in values.items():
            item = '' if pd.isna(value) else str(value)
            for spec in specs:
                outcome, reason = self.dispatcher.run(item, spec)
                if outcome is RuleOutcome.PASSED:
                    continue
                if reason is not None:
                    logger.warning("Field '%s' row %s: %s", key, idx, reason)
                result.errors.append(ValidationError(
                    row_index=idx,
                    key=key,
                    rule_id=spec.name,
                    outcome=outcome,
                    value=item,
                    message=reason or f"'{item}' does not satisfy '{spec}'",
                ))

        return result
