from __future__ import annotations
import logging
from .birthdate import classify, decode_birth_date
from .checksum import resolve_checksum
from .models import InszNumber, InszValidationResult, ValidationError
from .normalizer import check_format, to_text
from .sequence import resolve_sex

logger = logging.getLogger(__name__)


def _collect(*errors: ValidationError | None) -> tuple[ValidationError, ...]:
    """Drop empty stage outcomes and duplicates, keeping stage order."""
    collected = tuple(dict.fromkeys(e for e in errors if e is not None))
    if collected:
        logger.debug("INSZ validation failed: %s", ", ".join(e.value for e in collected))
    return collected


def validate(value: str | int | InszNumber) -> InszValidationResult:
    """Validate a Belgian INSZ/NISS number (national register or BIS number).

    Accepts a string (spaces, dots, dashes, slashes and underscores are
    ignored), a non-negative integer, or an ``InszNumber`` to re-validate.

    Format errors stop validation and leave ``insz_number`` unset. The
    checksum, date and sequence checks all run, so they may be reported
    together; on a checksum mismatch the date is decoded as post-2000 for
    reporting only.
    """
    text = to_text(value)
    format_error = check_format(text)
    if format_error is not None:
        return InszValidationResult(is_valid=False, errors=_collect(format_error))

    mode, checksum_error = resolve_checksum(text)

    year_digits = int(text[0:2])
    month_field = int(text[2:4])
    day = int(text[4:6])
    sequence_number = int(text[6:9])

    classification = classify(month_field)
    decoded = decode_birth_date(year_digits, month_field, day, classification, mode)
    date_error = None if decoded.is_valid else ValidationError.DATE_IS_INVALID

    sex, sequence_error = resolve_sex(sequence_number, classification)

    errors = _collect(checksum_error, date_error, sequence_error)
    insz_number = InszNumber(
        value=int(text),
        is_valid=not errors,
        is_bis=classification.is_bis if classification is not None else None,
        birth_date=decoded.birth_date,
        birth_year=decoded.birth_year,
        sex=sex,
    )
    return InszValidationResult(is_valid=not errors, errors=errors, insz_number=insz_number)


class InszValidator:
    """Stateless validator, for callers that want an object to inject or mock."""

    def validate(self, value: str | int | InszNumber) -> InszValidationResult:
        return validate(value)

    def is_valid(self, value: str | int | InszNumber) -> bool:
        return validate(value).is_valid
