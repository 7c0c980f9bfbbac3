from typing import Sequence

import pytest

from validity import (
    ArityMismatch,
    BaseRule,
    Category,
    CheckContext,
    RuleMetadata,
    RuleOutcome,
    RuleSpec,
    UnknownRule,
    ValidationSubject,
)


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


def test_catalog_is_complete(registry) -> None:
    assert sorted(registry.get_rule_ids()) == sorted([
        "accepted", "alpha", "alpha_dash", "alpha_num", "between",
        "between_inclusive", "cnp", "date", "email", "full_name", "ip",
        "ipv4", "ipv6", "len", "max", "min", "regexp", "url",
    ])


def test_documentation_is_sorted(registry) -> None:
    ids = [doc['id'] for doc in registry.get_documentation()]
    assert ids == sorted(ids)


def test_rules_by_category(registry) -> None:
    network = {r.metadata.id for r in registry.get_rules_by_category(Category.NETWORK)}
    assert network == {"ip", "ipv4", "ipv6"}


def test_unknown_rule_raises(dispatcher) -> None:
    with pytest.raises(UnknownRule) as exc_info:
        dispatcher.dispatch("anything", "required_if")
    assert exc_info.value.rule == "required_if"


def test_unknown_rule_never_passes(dispatcher) -> None:
    assert dispatcher.evaluate("", "nope") is RuleOutcome.UNKNOWN_RULE
    assert dispatcher.evaluate("abc", "Alpha") is RuleOutcome.UNKNOWN_RULE


def test_arity_mismatch(dispatcher) -> None:
    with pytest.raises(ArityMismatch) as exc_info:
        dispatcher.dispatch("abc", "between", ["3"])
    assert (exc_info.value.expected, exc_info.value.got) == (2, 1)
    assert dispatcher.evaluate("abc", "alpha:x") is RuleOutcome.MALFORMED_ARGUMENT
    assert dispatcher.evaluate("abc", "max") is RuleOutcome.MALFORMED_ARGUMENT


def test_registered_rule_is_dispatched(registry, dispatcher) -> None:
    registry.register(UpperRule())
    assert dispatcher.dispatch("ABC", "upper") is True
    assert dispatcher.dispatch("AbC", "upper") is False


def test_rule_spec_parse() -> None:
    assert RuleSpec.parse("alpha") == RuleSpec("alpha")
    assert RuleSpec.parse("between:3,6") == RuleSpec("between", ("3", "6"))
    assert RuleSpec.parse("regexp:a,b", arity=1) == RuleSpec("regexp", ("a,b",))
    assert RuleSpec.parse("regexp:a:b", arity=1) == RuleSpec("regexp", ("a:b",))
    assert str(RuleSpec("between", ("3", "6"))) == "between:3,6"


def test_resolve_uses_registered_arity(dispatcher) -> None:
    assert dispatcher.resolve("regexp:^[0-9]{1,3}$").args == ("^[0-9]{1,3}$",)
    assert dispatcher.resolve("between_inclusive:1,3").args == ("1", "3")


def test_get_errors_keeps_declaration_order(dispatcher) -> None:
    subject = ValidationSubject(
        key="code",
        item="abc1",
        rules=["required", "alpha", "min:5", "bogus", "max:10", RuleSpec("len", ("4",))],
    )
    assert dispatcher.get_errors(subject) == ["alpha", "min", "bogus", "len"]


def test_get_errors_skips_first_rule(dispatcher) -> None:
    assert dispatcher.get_errors(ValidationSubject("code", "123", ["alpha"])) == []
    assert dispatcher.get_errors(ValidationSubject("code", "123", [])) == []
    assert dispatcher.get_errors(ValidationSubject("code", "123", ["alpha", "alpha"])) == ["alpha"]


def test_check_subject_reports_outcomes(dispatcher) -> None:
    subject = ValidationSubject("ip", "::1", ["required", "ipv6", "ipv4", "unknown"])
    outcomes = [(spec.name, outcome) for spec, outcome in dispatcher.check_subject(subject)]
    assert outcomes == [
        ("ipv6", RuleOutcome.PASSED),
        ("ipv4", RuleOutcome.FAILED),
        ("unknown", RuleOutcome.UNKNOWN_RULE),
    ]


def test_subject_is_immutable() -> None:
    subject = ValidationSubject("k", "v", ["required"])
    assert subject.rules == ("required",)
    with pytest.raises(AttributeError):
        subject.item = "other"
