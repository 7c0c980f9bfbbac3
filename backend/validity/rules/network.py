"""
IP address rules.
"""

import ipaddress
from typing import Optional, Sequence, Union

from ..base import BaseRule, RuleMetadata, CheckContext, Category

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_ip(value: str) -> Optional[IPAddress]:
    """
    Parse an IP literal, returning None if it is not one.

    Scoped literals such as fe80::1%eth0 are not accepted.
    """
    if '%' in value:
        return None
    try:
        return ipaddress.ip_address(value)
    except ValueError:
        return None


class IpRule(BaseRule):

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="ip",
            name="IP Address",
            description="Any IPv4 or IPv6 literal",
            category=Category.NETWORK,
            example_valid="192.168.0.1, ::1",
            example_invalid="not-an-ip, 256.0.0.1",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return parse_ip(item) is not None


class Ipv4Rule(BaseRule):
    """IPv4 literals, including IPv4-mapped IPv6 forms like ::ffff:10.0.0.1."""

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="ipv4",
            name="IPv4 Address",
            description="IP literal with a 4-byte form",
            category=Category.NETWORK,
            example_valid="192.168.0.1",
            example_invalid="::1",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        parsed = parse_ip(item)
        if parsed is None:
            return False
        if parsed.version == 4:
            return True
        return parsed.ipv4_mapped is not None


class Ipv6Rule(BaseRule):

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="ipv6",
            name="IPv6 Address",
            description="IPv6 literal",
            category=Category.NETWORK,
            example_valid="::1, 2001:db8::8a2e:370:7334",
            example_invalid="192.168.0.1",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        parsed = parse_ip(item)
        return parsed is not None and parsed.version == 6
