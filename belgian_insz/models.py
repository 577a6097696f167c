from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any


class Sex(str, Enum):
    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "U"


class ValidationError(str, Enum):
    """Stable error codes reported in a validation result (not an exception)."""

    INPUT_IS_NOT_A_NUMBER = "InputIsNotANumber"
    INPUT_IS_WRONG_LENGTH = "InputIsWrongLength"
    CHECKSUM_IS_INVALID = "ChecksumIsInvalid"
    DATE_IS_INVALID = "DateIsInvalid"
    INVALID_SEQUENCE_NUMBER = "InvalidSequenceNumber"


@dataclass(frozen=True)
class InszNumber:
    """A Belgian INSZ/NISS number and the data decoded from it.

    ``is_valid`` is None until the number went through the validator; the
    decoded fields are only filled in by the validator.
    """

    value: int
    is_valid: bool | None = None
    is_bis: bool | None = None
    birth_date: date | None = None
    birth_year: int | None = None  # may be set while birth_date is None (BIS)
    sex: Sex | None = None

    def __post_init__(self) -> None:
        # Strings go through validate(), which handles formatting punctuation
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"InszNumber value must be an int, not {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValueError(f"INSZ number cannot be negative: {self.value}")

    def __str__(self) -> str:
        return f"{self.value:011d}"

    @property
    def has_been_validated(self) -> bool:
        return self.is_valid is not None

    # Fixed-offset fields: YY MM DD SSS CC
    @property
    def year_digits(self) -> int:
        return int(str(self)[0:2])

    @property
    def month_field(self) -> int:
        return int(str(self)[2:4])

    @property
    def day(self) -> int:
        return int(str(self)[4:6])

    @property
    def sequence_number(self) -> int:
        return int(str(self)[6:9])

    @property
    def check_digits(self) -> int:
        return int(str(self)[9:11])

    def formatted(self) -> str | None:
        """Return the canonical ``YY.MM.DD-SSS.CC`` form, or None unless valid."""
        if not self.is_valid:
            return None
        s = str(self)
        return f"{s[0:2]}.{s[2:4]}.{s[4:6]}-{s[6:9]}.{s[9:11]}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": str(self),
            "formatted": self.formatted(),
            "is_valid": self.is_valid,
            "is_bis": self.is_bis,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "birth_year": self.birth_year,
            "sex": self.sex.value if self.sex else None,
        }


@dataclass(frozen=True)
class InszValidationResult:
    is_valid: bool
    errors: tuple[ValidationError, ...] = ()
    insz_number: InszNumber | None = None  # None when the input could not be parsed

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [e.value for e in self.errors],
            "insz_number": self.insz_number.to_dict() if self.insz_number else None,
        }
