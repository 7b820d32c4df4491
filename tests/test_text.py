"""Tests for postcode_nl.core.text."""

import pytest

from postcode_nl.core.errors import InvalidInput
from postcode_nl.core.text import U32_MAX, validate_house_number, validate_postcode


class TestValidatePostcode:
    @pytest.mark.parametrize(
        "pc",
        ["1012RJ", "1012 RJ", "1012rj", "1012 rJ", "9999ZZ", "0000aa", "１０１２RJ", "١٠١٢RJ"],
    )
    def test_valid_postcodes(self, pc: str):
        assert validate_postcode(pc) == pc

    @pytest.mark.parametrize(
        "pc",
        [
            "",
            "101RJ",
            "10123RJ",
            "1012RJK",
            "1012  RJ",
            "1012-RJ",
            " 1012RJ",
            "1012RJ ",
            "1012RJ\n",
            "1012\tRJ",
            "RJ1012",
            "1012R1",
        ],
    )
    def test_invalid_postcodes(self, pc: str):
        with pytest.raises(InvalidInput) as exc_info:
            validate_postcode(pc)
        assert exc_info.value.value == pc
        assert pc in str(exc_info.value)

    def test_non_string_is_rejected(self):
        with pytest.raises(InvalidInput):
            validate_postcode(1012)  # type: ignore[arg-type]


class TestValidateHouseNumber:
    @pytest.mark.parametrize("n", [0, 1, 147, U32_MAX])
    def test_unsigned_32_bit_range_passes(self, n: int):
        assert validate_house_number(n) == n

    @pytest.mark.parametrize("n", [-1, U32_MAX + 1])
    def test_out_of_range(self, n: int):
        with pytest.raises(InvalidInput) as exc_info:
            validate_house_number(n)
        assert exc_info.value.value == n
        assert "House numbers" in str(exc_info.value)

    @pytest.mark.parametrize("n", ["147", "147a", 14.7, True, None])
    def test_non_integers(self, n):
        with pytest.raises(InvalidInput):
            validate_house_number(n)
