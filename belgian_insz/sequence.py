from __future__ import annotations
from .birthdate import Classification
from .models import Sex, ValidationError

# 000 and 999 are never assigned.
_RESERVED_SEQUENCE_NUMBERS = frozenset({0, 999})


def resolve_sex(
    sequence_number: int, classification: Classification | None
) -> tuple[Sex | None, ValidationError | None]:
    """Validate the sequence number and derive the sex from its parity.

    Odd is male, even is female. BIS numbers issued with unknown sex are always
    UNKNOWN. Sex stays None when the number could not be classified.
    """
    if sequence_number in _RESERVED_SEQUENCE_NUMBERS:
        return None, ValidationError.INVALID_SEQUENCE_NUMBER
    if classification is None:
        return None, None
    if not classification.sex_is_known:
        return Sex.UNKNOWN, None
    return (Sex.FEMALE if sequence_number % 2 == 0 else Sex.MALE), None
