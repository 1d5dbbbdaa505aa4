"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from release_desk.config import Settings


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.isrc_country_code == "US"
        assert settings.max_audio_size_bytes == 200 * 1024 * 1024
        assert settings.max_artwork_size_bytes == 50 * 1024 * 1024
        assert settings.min_artwork_dimension == 3000
        assert settings.export_placeholder == "N/A"
        assert settings.max_open_wizards == 1000

    def test_codes_are_upper_cased(self) -> None:
        settings = Settings(_env_file=None, isrc_country_code="gb", isrc_registrant_code="a1b")

        assert settings.isrc_country_code == "GB"
        assert settings.isrc_registrant_code == "A1B"

    @pytest.mark.parametrize("code", ["USA", "U1", ""])
    def test_bad_country_code(self, code: str) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, isrc_country_code=code)

    def test_bad_registrant_code(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, isrc_registrant_code="AB-")

    def test_bad_default_role(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_user_role="owner")

    def test_runtime_warnings(self) -> None:
        settings = Settings(_env_file=None, debug=True, enforce_review_role=False)

        warnings = settings.validate_runtime_config()

        assert len(warnings) == 3
        assert any("ISRC_REGISTRANT_CODE" in w for w in warnings)
        assert any("ENFORCE_REVIEW_ROLE" in w for w in warnings)
        assert any("DEBUG" in w for w in warnings)

    def test_no_warnings_when_configured(self) -> None:
        settings = Settings(
            _env_file=None, debug=False, enforce_review_role=True, isrc_registrant_code="S1Z"
        )

        assert settings.validate_runtime_config() == []
