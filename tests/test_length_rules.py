import pytest

from validity import MalformedArgument, RuleOutcome


@pytest.mark.parametrize("length, expected", [(3, False), (4, True), (5, True), (6, False)])
def test_between_is_exclusive(dispatcher, length: int, expected: bool) -> None:
    assert dispatcher.dispatch("x" * length, "between", ["3", "6"]) is expected


@pytest.mark.parametrize("length, expected", [(2, False), (3, True), (6, True), (7, False)])
def test_between_inclusive(dispatcher, length: int, expected: bool) -> None:
    assert dispatcher.dispatch("x" * length, "between_inclusive", ["3", "6"]) is expected


def test_len_passes_when_length_differs(dispatcher) -> None:
    assert dispatcher.dispatch("abcde", "len", ["5"]) is False
    assert dispatcher.dispatch("abcd", "len", ["5"]) is True
    assert dispatcher.dispatch("abcdef", "len", ["5"]) is True


def test_max_and_min_include_the_bound(dispatcher) -> None:
    item = "x" * 10
    assert dispatcher.dispatch(item, "max", ["10"]) is True
    assert dispatcher.dispatch(item, "min", ["10"]) is True
    assert dispatcher.dispatch(item + "x", "max", ["10"]) is False
    assert dispatcher.dispatch(item[:-1], "min", ["10"]) is False


def test_lengths_count_code_points(dispatcher) -> None:
    item = "\u0103\u00ee\u0219\u021b\u00e2"  # 5 characters, 10 bytes in UTF-8
    assert dispatcher.dispatch(item, "max", ["5"]) is True
    assert dispatcher.dispatch(item, "between_inclusive", ["5", "5"]) is True


def test_signed_argument_is_parsed(dispatcher) -> None:
    assert dispatcher.dispatch("abc", "min", ["+3"]) is True


def test_malformed_argument_degrades_to_zero(dispatcher, diagnostics) -> None:
    assert dispatcher.dispatch("", "max", ["ten"]) is True
    assert dispatcher.dispatch("a", "max", ["ten"]) is False
    assert dispatcher.dispatch("a", "min", [" 3"]) is True
    assert diagnostics


def test_malformed_argument_in_strict_mode(make_dispatcher) -> None:
    dispatcher = make_dispatcher(strict_arguments=True)
    with pytest.raises(MalformedArgument):
        dispatcher.dispatch("abc", "between", ["three", "6"])
    assert dispatcher.evaluate("abc", "max:ten") is RuleOutcome.MALFORMED_ARGUMENT
