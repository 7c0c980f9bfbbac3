"""
Format rules: date stamps, e-mail addresses, URLs and free patterns.
"""

import re
from datetime import datetime
from typing import Sequence

from ..base import BaseRule, RuleMetadata, CheckContext, Category
from ..errors import MalformedArgument


# Layout "Jan 2, 2006 at 3:04pm (MST)"
DATE_PATTERN = re.compile(
    r'(?P<month>[A-Za-z]{3}) (?P<day>[0-9]{1,2}), (?P<year>[0-9]{4})'
    r' at (?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2})(?:am|pm)'
    r' \((?P<zone>[^()]+)\)'
)
DATE_FORMAT = '%b %d %Y'

# Zone abbreviations: 3 capitals, 4 ending in T (or WITA), 5 ending in T,
# ChST, MeST, GMT with an optional offset, or a bare signed offset.
ZONE_PATTERN = re.compile(
    r'ChST|MeST|WITA|[A-Z]{3}|[A-Z]{3}T|[A-Z]{4}T'
    r'|(?:GMT)?[+-](?P<offset>[0-9]+)|GMT'
)
MAX_ZONE_OFFSET = 24

EMAIL_PATTERN = re.compile(r'.+@.+\..+')

SCHEME_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9+.\-]*:')
BAD_ESCAPE_PATTERN = re.compile(r'%(?![0-9A-Fa-f]{2})')

HOST_PUNCTUATION = set("-_.~!$&'()*+,;=:[]<>\"%")
USERINFO_PUNCTUATION = set("-._:~!$&'()*+,;=%@")


def _has_control_chars(value: str) -> bool:
    return any(ord(c) < 0x20 or ord(c) == 0x7f for c in value)


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _valid_zone(zone: str) -> bool:
    match = ZONE_PATTERN.fullmatch(zone)
    if match is None:
        return False
    offset = match.group('offset')
    return offset is None or int(offset) <= MAX_ZONE_OFFSET


def _valid_port(colon_port: str) -> bool:
    """Empty, or ':' followed by ASCII digits only. The range is not checked."""
    if colon_port == '':
        return True
    return colon_port.startswith(':') and all(c in '0123456789' for c in colon_port[1:])


def _valid_host(host: str) -> bool:
    if host.startswith('['):
        end = host.find(']')
        if end < 0:
            return False
        if not _valid_port(host[end + 1:]):
            return False
    else:
        colon = host.rfind(':')
        if colon != -1 and not _valid_port(host[colon:]):
            return False
    if BAD_ESCAPE_PATTERN.search(host):
        return False
    return all(
        ord(c) >= 0x80 or _is_ascii_alnum(c) or c in HOST_PUNCTUATION
        for c in host
    )


def _valid_authority(authority: str) -> bool:
    userinfo, at, host = authority.rpartition('@')
    if at and not all(_is_ascii_alnum(c) or c in USERINFO_PUNCTUATION for c in userinfo):
        return False
    return _valid_host(host)


def parse_request_uri(value: str) -> bool:
    """
    Return True if value is usable as an HTTP request target.

    Accepted: '*', an absolute path, 'scheme:opaque', or
    'scheme://authority/path'. Relative references without a leading slash
    are rejected. Percent escapes are checked in the host and path only.
    """
    if value == '*':
        return True
    if not value or _has_control_chars(value):
        return False
    if value.startswith(':'):
        return False  # missing scheme

    scheme = SCHEME_PATTERN.match(value)
    rest = value[scheme.end():] if scheme else value
    rest = rest.split('?', 1)[0]

    if not rest.startswith('/'):
        # opaque, e.g. mailto:anna@example.com
        return scheme is not None

    path = rest
    if scheme and rest.startswith('//'):
        authority, slash, tail = rest[2:].partition('/')
        if not _valid_authority(authority):
            return False
        path = slash + tail
    return BAD_ESCAPE_PATTERN.search(path) is None


class DateRule(BaseRule):
    """Date-time stamps such as 'Feb 3, 2013 at 7:54pm (PST)'."""

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="date",
            name="Date",
            description="Date-time in the layout 'Jan 2, 2006 at 3:04pm (MST)'",
            category=Category.FORMAT,
            example_valid="Feb 3, 2013 at 7:54pm (PST)",
            example_invalid="2013-02-03 19:54, Feb 30, 2013 at 7:54pm (PST)",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        match = DATE_PATTERN.fullmatch(item)
        if match is None:
            return False
        # 12-hour clock, where 0 is accepted as well
        if int(match.group('hour')) > 12 or int(match.group('minute')) > 59:
            return False
        if not _valid_zone(match.group('zone')):
            return False
        try:
            datetime.strptime(
                f"{match.group('month')} {match.group('day')} {match.group('year')}",
                DATE_FORMAT,
            )
        except ValueError:
            return False
        return True


class EmailRule(BaseRule):
    """Loose e-mail shape: something@something.something."""

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="email",
            name="E-Mail",
            description="Something, '@', a domain, '.', a suffix",
            category=Category.FORMAT,
            example_valid="anna@example.com",
            example_invalid="anna@example, anna.example.com",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return EMAIL_PATTERN.fullmatch(item) is not None


class RegexpRule(BaseRule):
    """
    Unanchored search with a caller-supplied pattern.

    Anchor the pattern with ^ and $ to require a full match. An invalid
    pattern fails the item, or raises MalformedArgument in strict mode.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="regexp",
            name="Regular Expression",
            description="Item must match the given pattern",
            category=Category.FORMAT,
            arity=1,
            example_valid="regexp:^[0-9]{4}$ -> '8001'",
            example_invalid="regexp:^[0-9]{4}$ -> '800'",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        try:
            expression = re.compile(args[0])
        except re.error as e:
            if ctx.options.strict_arguments:
                raise MalformedArgument(self.metadata.id, args[0], str(e))
            ctx.emit(f"Invalid pattern {args[0]!r}: {e}")
            return False
        return expression.search(item) is not None


class UrlRule(BaseRule):

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="url",
            name="URL",
            description="Absolute URI or absolute path usable as a request target",
            category=Category.FORMAT,
            example_valid="https://example.com/a?b=1, /path/to",
            example_invalid="example.com, http://host:port/",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        return parse_request_uri(item)
