"""Tests for ISRC and UPC generation and validation."""

import re
from datetime import date

from release_desk.services.identifiers import (
    generate_isrc,
    generate_upc,
    is_valid_isrc,
    is_valid_upc,
    normalize_isrc,
)


class TestGenerateISRC:
    """Tests for ISRC generation."""

    def test_format(self) -> None:
        """Generated ISRCs are country, registrant, year and 5 digits."""
        isrc = generate_isrc(today=date(2025, 6, 1))

        assert re.fullmatch(r"USXXX25\d{5}", isrc)
        assert is_valid_isrc(isrc)

    def test_explicit_codes(self) -> None:
        """Explicit country and registrant codes override settings."""
        isrc = generate_isrc(country_code="GB", registrant_code="ABC", today=date(2031, 1, 1))

        assert isrc.startswith("GBABC31")
        assert len(isrc) == 12

    def test_uses_current_year_by_default(self) -> None:
        isrc = generate_isrc()

        assert isrc[5:7] == date.today().strftime("%y")


class TestGenerateUPC:
    """Tests for UPC generation."""

    def test_format(self) -> None:
        """Generated UPCs are 12 zero-padded digits."""
        for _ in range(50):
            upc = generate_upc()
            assert re.fullmatch(r"\d{12}", upc)
            assert is_valid_upc(upc)


class TestValidation:
    """Tests for identifier format checks."""

    def test_valid_isrc_with_hyphens(self) -> None:
        assert is_valid_isrc("US-S1Z-99-00001")
        assert normalize_isrc("us-s1z-99-00001") == "USS1Z9900001"

    def test_invalid_isrc(self) -> None:
        assert not is_valid_isrc("")
        assert not is_valid_isrc("USXXX2512")
        assert not is_valid_isrc("1SXXX2512345")
        assert not is_valid_isrc("USXXX25ABCDE")

    def test_upc_lengths(self) -> None:
        assert is_valid_upc("012345678905")
        assert is_valid_upc("4006381333931")
        assert not is_valid_upc("12345")
        assert not is_valid_upc("01234567890A")
