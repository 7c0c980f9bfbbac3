"""
Exceptions raised by the rule dispatcher.

A rule returning False is a normal validation failure and is never an
exception. These errors describe a misconfigured rule list instead.
"""


class RuleError(Exception):
    """Base class for rule configuration problems."""

    def __init__(self, rule: str, message: str):
        super().__init__(message)
        self.rule = rule


class UnknownRule(RuleError):
    """The rule name is not in the registry."""

    def __init__(self, rule: str):
        super().__init__(rule, f"Unknown rule: '{rule}'")


class MalformedArgument(RuleError):
    """A rule argument could not be parsed into the expected shape."""

    def __init__(self, rule: str, argument: str, reason: str):
        super().__init__(rule, f"Malformed argument for '{rule}': {argument!r} ({reason})")
        self.argument = argument


class ArityMismatch(MalformedArgument):
    """The number of arguments does not match the rule's declared arity."""

    def __init__(self, rule: str, expected: int, got: int):
        RuleError.__init__(
            self,
            rule,
            f"Rule '{rule}' takes {expected} argument(s), got {got}",
        )
        self.argument = None
        self.expected = expected
        self.got = got
