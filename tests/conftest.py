import datetime

import pytest

from validity import CheckContext, CheckOptions, RuleDispatcher, create_default_registry

FIXED_TODAY = datetime.date(2026, 10, 19)


@pytest.fixture
def registry():
    return create_default_registry()


@pytest.fixture
def diagnostics() -> list:
    return []


@pytest.fixture
def make_dispatcher(registry, diagnostics):
    """Build a dispatcher with a fixed clock and a collecting sink."""

    def _make(today: datetime.date = FIXED_TODAY, **options) -> RuleDispatcher:
        context = CheckContext(
            options=CheckOptions(**options),
            today=lambda: today,
            sink=diagnostics.append,
        )
        return RuleDispatcher(registry, context)

    return _make


@pytest.fixture
def dispatcher(make_dispatcher) -> RuleDispatcher:
    return make_dispatcher()
