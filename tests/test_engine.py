import pandas as pd
import pytest

from validity import RuleOutcome, ValidationEngine


@pytest.fixture
def engine(dispatcher) -> ValidationEngine:
    return ValidationEngine(dispatcher)


def test_batch_over_series(engine) -> None:
    values = pd.Series(["abcd", "ab", None, "abcdefgh"])
    result = engine.validate(values, "code", ["required", "alpha", "between:3,6"])

    assert result.total_rows == 4
    assert result.rules_executed == ["alpha", "between"]
    assert [e.row_index for e in result.errors] == [1, 2, 3]
    assert result.error_count == 3
    assert result.passed_rows == 1
    assert result.get_errors_by_rule() == {"between": 3}
    assert result.errors[1].value == ""


def test_batch_separates_misconfigured_rules(engine) -> None:
    values = pd.Series(["1800101221144", "1800101221145"])
    result = engine.validate(values, "cnp", ["required", "cnp", "checksum"])

    assert result.get_errors_by_outcome() == {"failed": 1, "unknown_rule": 2}
    unknown = [e for e in result.errors if e.outcome is RuleOutcome.UNKNOWN_RULE]
    assert all("checksum" in e.message for e in unknown)


def test_batch_to_dict(engine) -> None:
    result = engine.validate(pd.Series(["yes", "no"]), "terms", ["required", "accepted"])
    data = result.to_dict()

    assert data['key'] == "terms"
    assert data['pass_rate'] == 50.0
    assert data['errors'] == [{
        'row_index': 1,
        'key': "terms",
        'rule_id': "accepted",
        'outcome': "failed",
        'value': "no",
        'message': "'no' does not satisfy 'accepted'",
    }]


def test_empty_series(engine) -> None:
    result = engine.validate(pd.Series([], dtype=object), "code", ["required", "alpha"])
    assert result.to_dict()['pass_rate'] == 100
    assert result.passed_rows == 0
