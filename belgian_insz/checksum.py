from __future__ import annotations
from enum import Enum
from .models import ValidationError

# The check digits are 97 - (N mod 97) where N is the first nine digits.
# For people born in 2000 or later a leading "2" is prepended to N, which is
# the only thing that tells the two centuries apart.
_POST_2000_PREFIX = 2_000_000_000


class DecodingMode(Enum):
    PRE_2000 = 1900
    POST_2000 = 2000

    @property
    def century(self) -> int:
        return self.value


def check_digits(base: int, mode: DecodingMode) -> int:
    """Return the expected check value (1..97) for the 9-digit base under mode."""
    if mode is DecodingMode.POST_2000:
        base += _POST_2000_PREFIX
    return 97 - (base % 97)


def resolve_checksum(digits: str) -> tuple[DecodingMode, ValidationError | None]:
    """Find the century hypothesis that matches the check digits.

    ``digits`` must be 11 ASCII digits. When neither hypothesis matches, the
    error is returned together with POST_2000 so that the remaining fields can
    still be decoded for reporting.
    """
    base = int(digits[:9])
    actual = int(digits[9:11])
    for mode in (DecodingMode.PRE_2000, DecodingMode.POST_2000):
        if check_digits(base, mode) == actual:
            return mode, None
    return DecodingMode.POST_2000, ValidationError.CHECKSUM_IS_INVALID
