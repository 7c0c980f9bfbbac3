"""
Rules package.

Contains all built-in string rules organized by category.
"""

from .charset import (
    AcceptedRule,
    AlphaRule,
    AlphaDashRule,
    AlphaNumRule,
    FullNameRule,
)

from .length import (
    BetweenRule,
    BetweenInclusiveRule,
    LenRule,
    MaxRule,
    MinRule,
)

from .formats import (
    DateRule,
    EmailRule,
    RegexpRule,
    UrlRule,
)

from .network import (
    IpRule,
    Ipv4Rule,
    Ipv6Rule,
)

from .cnp import (
    CnpRule,
    DecodedIdentity,
    decode_cnp,
    control_digit,
    resolve_year,
)

# All rules for easy registration
ALL_RULES = [
    # Character set
    AcceptedRule,
    AlphaRule,
    AlphaDashRule,
    AlphaNumRule,
    FullNameRule,
    # Length
    BetweenRule,
    BetweenInclusiveRule,
    LenRule,
    MaxRule,
    MinRule,
    # Format
    DateRule,
    EmailRule,
    RegexpRule,
    UrlRule,
    # Network
    IpRule,
    Ipv4Rule,
    Ipv6Rule,
    # Identity
    CnpRule,
]

__all__ = [
    'AcceptedRule',
    'AlphaRule',
    'AlphaDashRule',
    'AlphaNumRule',
    'FullNameRule',
    'BetweenRule',
    'BetweenInclusiveRule',
    'LenRule',
    'MaxRule',
    'MinRule',
    'DateRule',
    'EmailRule',
    'RegexpRule',
    'UrlRule',
    'IpRule',
    'Ipv4Rule',
    'Ipv6Rule',
    'CnpRule',
    'DecodedIdentity',
    'decode_cnp',
    'control_digit',
    'resolve_year',
    'ALL_RULES',
]
