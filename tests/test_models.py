from __future__ import annotations
from datetime import date
import pytest
from belgian_insz import InszNumber, InszValidationResult, Sex, ValidationError, validate


def test_str_is_zero_padded() -> None:
    assert str(InszNumber(5071512395)) == "05071512395"


def test_unvalidated_defaults() -> None:
    number = InszNumber(85061300178)
    assert number.is_valid is None
    assert not number.has_been_validated
    assert number.is_bis is None
    assert number.birth_date is None
    assert number.sex is None


def test_field_accessors() -> None:
    number = InszNumber(85273003371)
    assert number.year_digits == 85
    assert number.month_field == 27
    assert number.day == 30
    assert number.sequence_number == 33
    assert number.check_digits == 71


def test_formatted_only_when_valid() -> None:
    assert InszNumber(5071512395, is_valid=True).formatted() == "05.07.15-123.95"
    assert InszNumber(5071512395, is_valid=False).formatted() is None
    assert InszNumber(5071512395).formatted() is None


def test_immutable() -> None:
    number = InszNumber(85061300178)
    with pytest.raises(AttributeError):
        number.value = 1  # type: ignore[misc]


def test_error_codes_are_stable() -> None:
    assert [e.value for e in ValidationError] == [
        "InputIsNotANumber",
        "InputIsWrongLength",
        "ChecksumIsInvalid",
        "DateIsInvalid",
        "InvalidSequenceNumber",
    ]


def test_number_to_dict() -> None:
    number = InszNumber(
        85061300178,
        is_valid=True,
        is_bis=False,
        birth_date=date(1985, 6, 13),
        birth_year=1985,
        sex=Sex.MALE,
    )
    assert number.to_dict() == {
        "value": "85061300178",
        "formatted": "85.06.13-001.78",
        "is_valid": True,
        "is_bis": False,
        "birth_date": "1985-06-13",
        "birth_year": 1985,
        "sex": "M",
    }


def test_result_to_dict_without_number() -> None:
    result = InszValidationResult(
        is_valid=False, errors=(ValidationError.INPUT_IS_NOT_A_NUMBER,)
    )
    assert result.to_dict() == {
        "is_valid": False,
        "errors": ["InputIsNotANumber"],
        "insz_number": None,
    }


def test_result_to_dict_bis_year_only() -> None:
    data = validate("85400001216").to_dict()
    assert data["is_valid"] is True
    assert data["errors"] == []
    assert data["insz_number"]["birth_date"] is None
    assert data["insz_number"]["birth_year"] == 1985
    assert data["insz_number"]["sex"] == "F"


@pytest.mark.parametrize("value", ["85061300178", True, 8.5, None])
def test_value_must_be_int(value: object) -> None:
    with pytest.raises(TypeError):
        InszNumber(value)  # type: ignore[arg-type]


def test_negative_value_rejected() -> None:
    with pytest.raises(ValueError):
        InszNumber(-85061300178)
