from __future__ import annotations
import pytest
from belgian_insz import Sex, ValidationError
from belgian_insz.birthdate import Classification
from belgian_insz.sequence import resolve_sex

_SEX_KNOWN = [Classification.REGULAR_NUMBER, Classification.BIS_KNOWN_SEX]


@pytest.mark.parametrize("classification", _SEX_KNOWN)
@pytest.mark.parametrize("sequence_number,sex", [(1, Sex.MALE), (2, Sex.FEMALE), (997, Sex.MALE), (998, Sex.FEMALE)])
def test_parity(classification: Classification, sequence_number: int, sex: Sex) -> None:
    assert resolve_sex(sequence_number, classification) == (sex, None)


@pytest.mark.parametrize("sequence_number", [1, 2, 998])
def test_bis_unknown_sex_ignores_parity(sequence_number: int) -> None:
    assert resolve_sex(sequence_number, Classification.BIS_UNKNOWN_SEX) == (Sex.UNKNOWN, None)


@pytest.mark.parametrize("sequence_number", [0, 999])
@pytest.mark.parametrize("classification", [*Classification, None])
def test_reserved_sequence_numbers(
    sequence_number: int, classification: Classification | None
) -> None:
    assert resolve_sex(sequence_number, classification) == (
        None,
        ValidationError.INVALID_SEQUENCE_NUMBER,
    )


def test_unclassified_has_no_sex() -> None:
    assert resolve_sex(1, None) == (None, None)
