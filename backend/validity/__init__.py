"""
validity - string rule checking

Checks string values against declarative rules such as "alpha",
"between:3,6" or "cnp" and reports the rules that fail.

Usage:
    from validity import create_default_dispatcher, ValidationSubject

    dispatcher = create_default_dispatcher()

    subject = ValidationSubject(
        key='username',
        item='jo',
        rules=['required', 'alpha_dash', 'between:3,16'],
    )

    print(dispatcher.get_errors(subject))   # ['between']
"""

from typing import Optional

from .base import (
    BaseRule,
    Category,
    CheckContext,
    CheckOptions,
    RuleMetadata,
    RuleOutcome,
    RuleSpec,
    ValidationSubject,
)

from .errors import (
    ArityMismatch,
    MalformedArgument,
    RuleError,
    UnknownRule,
)

from .engine import (
    RuleDispatcher,
    RuleRegistry,
    ValidationEngine,
    ValidationError,
    ValidationResult,
)

from .rules import ALL_RULES, DecodedIdentity, decode_cnp


def create_default_registry() -> RuleRegistry:
    """
    Create a rule registry with all built-in rules.

    Returns:
        RuleRegistry with the whole catalog registered
    """
    registry = RuleRegistry()

    for rule_class in ALL_RULES:
        registry.register(rule_class())

    return registry


def create_default_dispatcher(context: Optional[CheckContext] = None) -> RuleDispatcher:
    """Create a dispatcher over the default registry."""
    return RuleDispatcher(create_default_registry(), context)


__all__ = [
    # Base classes
    'BaseRule',
    'Category',
    'CheckContext',
    'CheckOptions',
    'RuleMetadata',
    'RuleOutcome',
    'RuleSpec',
    'ValidationSubject',
    # Errors
    'ArityMismatch',
    'MalformedArgument',
    'RuleError',
    'UnknownRule',
    # Engine
    'RuleDispatcher',
    'RuleRegistry',
    'ValidationEngine',
    'ValidationError',
    'ValidationResult',
    # CNP
    'DecodedIdentity',
    'decode_cnp',
    # Factory
    'create_default_registry',
    'create_default_dispatcher',
]
