"""
CNP (Cod Numeric Personal) validation.

A CNP is 13 digits: S YY MM DD CC NNN K

    S    sex and century (1-9)
    YY   year of birth within the century
    MM   month, DD day
    CC   county code (01-52)
    NNN  sequence number (001-999)
    K    control digit

The control digit is the weighted sum of the first 12 digits modulo 11,
with a remainder of 10 written as 1.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..base import BaseRule, RuleMetadata, CheckContext, Category


CNP_LENGTH = 13
WEIGHTS = (2, 7, 9, 1, 4, 6, 3, 5, 8, 2, 7, 9)

# Sex digit -> century. 7-9 (residents) are resolved against the clock.
CENTURIES = {
    1: 1900, 2: 1900,
    3: 1800, 4: 1800,
    5: 2000, 6: 2000,
    7: 2000, 8: 2000, 9: 2000,
}
RESIDENT_SEX_DIGITS = {7, 8, 9}

MIN_YEAR, MAX_YEAR = 1800, 2099
MIN_COUNTY, MAX_COUNTY = 1, 52
MIN_NUMBER, MAX_NUMBER = 1, 999


@dataclass(frozen=True)
class DecodedIdentity:
    """The fields of a CNP, decoded but not yet range-checked."""
    sex: int
    year: int
    month: int
    day: int
    county: int
    number: int
    control: int
    checksum: int

    @property
    def birth_date(self) -> Optional[date]:
        """The birth date, or None if it does not exist in the calendar."""
        try:
            return date(self.year, self.month, self.day)
        except ValueError:
            return None

    @property
    def checksum_matches(self) -> bool:
        return self.control == self.checksum


def control_digit(digits: Sequence[int]) -> int:
    """Compute the control digit for the first 12 digits."""
    remainder = sum(w * d for w, d in zip(WEIGHTS, digits)) % 11
    return 1 if remainder == 10 else remainder


def resolve_year(sex: int, fragment: int, today: date, minimum_age: int = 14) -> int:
    """
    Combine the two-digit year with the century implied by the sex digit.

    Resident digits 7-9 are read as 20YY unless that would make the person
    younger than minimum_age today, in which case 19YY is used.
    """
    century = CENTURIES.get(sex)
    if century is None:
        return fragment
    year = century + fragment
    if sex in RESIDENT_SEX_DIGITS and year > today.year - minimum_age:
        year -= 100
    return year


def decode_cnp(raw: str, today: date, minimum_age: int = 14) -> DecodedIdentity:
    """
    Decode a CNP string into its fields.

    Raises:
        ValueError: if raw is not exactly 13 ASCII digits
    """
    if len(raw) != CNP_LENGTH:
        raise ValueError(f"Expected {CNP_LENGTH} characters, got {len(raw)}")
    for position, char in enumerate(raw):
        if char not in '0123456789':
            raise ValueError(f"The character at position {position} [{char}] is not a digit")

    digits = [int(c) for c in raw]
    return DecodedIdentity(
        sex=digits[0],
        year=resolve_year(digits[0], digits[1] * 10 + digits[2], today, minimum_age),
        month=digits[3] * 10 + digits[4],
        day=digits[5] * 10 + digits[6],
        county=digits[7] * 10 + digits[8],
        number=digits[9] * 100 + digits[10] * 10 + digits[11],
        control=digits[12],
        checksum=control_digit(digits[:12]),
    )


class CnpRule(BaseRule):
    """
    Romanian personal numeric code.

    Checks stop at the first violated field. A birth date that does not
    exist (31 April, 30 February) is reported but only fails the item when
    strict_calendar is enabled.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return RuleMetadata(
            id="cnp",
            name="CNP",
            description="13-digit personal numeric code with date, county and control digit",
            category=Category.IDENTITY,
            example_valid="1800101221144",
            example_invalid="1800101221145, 0800101221144",
        )

    def check(self, item: str, args: Sequence[str], ctx: CheckContext) -> bool:
        options = ctx.options
        try:
            cnp = decode_cnp(item, ctx.today(), options.minimum_age)
        except ValueError as e:
            ctx.emit(str(e))
            return False

        if cnp.sex == 0:
            ctx.emit("Sex can not be 0")
            return False

        if not MIN_YEAR <= cnp.year <= MAX_YEAR:
            ctx.emit(f"Wrong year: {cnp.year}")
            return False

        if not 1 <= cnp.month <= 12:
            ctx.emit(f"Wrong month: {cnp.month}")
            return False

        if cnp.birth_date is None:
            ctx.emit(f"The date does not exist: {cnp.year}/{cnp.month}/{cnp.day}")
            if options.strict_calendar:
                return False

        if not MIN_COUNTY <= cnp.county <= MAX_COUNTY:
            ctx.emit(f"Wrong county: {cnp.county}")
            return False

        if not MIN_NUMBER <= cnp.number <= MAX_NUMBER:
            ctx.emit(f"Wrong number: {cnp.number}")
            return False

        if not cnp.checksum_matches:
            ctx.emit(f"Wrong control digit: expected {cnp.checksum}, got {cnp.control}")
            return False
        return True
