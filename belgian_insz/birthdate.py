from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from .checksum import DecodingMode

# Month field layout:
#   01-12  regular national register number (RN), real month
#   20-32  BIS number, sex unknown when issued, real month + 20
#   40-52  BIS number, sex known when issued, real month + 40
# A real month of 0 on a BIS number is a placeholder for "month unknown".


class Classification(Enum):
    REGULAR_NUMBER = 0
    BIS_UNKNOWN_SEX = 20
    BIS_KNOWN_SEX = 40

    @property
    def month_offset(self) -> int:
        return self.value

    @property
    def is_bis(self) -> bool:
        return self is not Classification.REGULAR_NUMBER

    @property
    def sex_is_known(self) -> bool:
        return self is not Classification.BIS_UNKNOWN_SEX


def classify(month_field: int) -> Classification | None:
    """Classify the number by its month field; None if the field is out of every range."""
    if 1 <= month_field <= 12:
        return Classification.REGULAR_NUMBER
    if 20 <= month_field <= 32:
        return Classification.BIS_UNKNOWN_SEX
    if 40 <= month_field <= 52:
        return Classification.BIS_KNOWN_SEX
    return None


class DateState(Enum):
    FULL_DATE = "full_date"
    YEAR_KNOWN_DATE_UNKNOWN = "year_known_date_unknown"
    DATE_UNKNOWN_YEAR_UNKNOWN = "date_unknown_year_unknown"
    INVALID = "invalid"


@dataclass(frozen=True)
class DecodedDate:
    state: DateState
    birth_date: date | None = None
    birth_year: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.state is not DateState.INVALID


_INVALID = DecodedDate(DateState.INVALID)


def _calendar_date(year: int, month: int, day: int) -> DecodedDate:
    try:
        birth_date = date(year, month, day)
    except ValueError:
        return _INVALID
    return DecodedDate(DateState.FULL_DATE, birth_date=birth_date, birth_year=year)


def decode_birth_date(
    year_digits: int,
    month_field: int,
    day: int,
    classification: Classification | None,
    mode: DecodingMode,
) -> DecodedDate:
    """Decode the birth date fields of a number.

    BIS numbers may carry placeholders instead of a real date:

    - month 0 and day 0: only the year is known;
    - year 00, month 0 and day 1..10: neither the date nor the year is known.

    The year-known check runs first, so ``00 00 00`` on a BIS number decodes
    as year 1900 or 2000 rather than as an unknown year.
    """
    if classification is None:
        return _INVALID

    year = mode.century + year_digits
    month = month_field - classification.month_offset

    if classification.is_bis and month == 0:
        if day == 0:
            return DecodedDate(DateState.YEAR_KNOWN_DATE_UNKNOWN, birth_year=year)
        if year_digits == 0 and 1 <= day <= 10:
            return DecodedDate(DateState.DATE_UNKNOWN_YEAR_UNKNOWN)
        return _INVALID

    return _calendar_date(year, month, day)
