from __future__ import annotations
import re
from .models import InszNumber, ValidationError

# Punctuation allowed in written numbers, e.g. "85.06.13-001.78" or "85 06 13 001 78".
_FORMATTING = re.compile(r"[ ./_-]")
_DIGITS = re.compile(r"[0-9]+")

INSZ_LENGTH = 11


def to_text(value: str | int | InszNumber) -> str:
    """Return the string the validator works on for any supported input type.

    Integers are zero-padded to 11 digits; strings have their formatting
    punctuation removed. Negative integers and unsupported types are caller
    bugs and raise.
    """
    if isinstance(value, InszNumber):
        return to_text(value.value)
    if isinstance(value, bool):
        raise TypeError("INSZ number must be a str or int, not bool")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"INSZ number cannot be negative: {value}")
        return f"{value:0{INSZ_LENGTH}d}"
    if isinstance(value, str):
        return _FORMATTING.sub("", value)
    raise TypeError(f"INSZ number must be a str or int, not {type(value).__name__}")


def check_format(text: str) -> ValidationError | None:
    """Return the format error for cleaned input, or None if it is 11 plain digits.

    Only ASCII 0-9 count as digits: signs, whitespace left after cleaning and
    other Unicode digits are rejected.
    """
    if not _DIGITS.fullmatch(text):
        return ValidationError.INPUT_IS_NOT_A_NUMBER
    if len(text) != INSZ_LENGTH:
        return ValidationError.INPUT_IS_WRONG_LENGTH
    return None
