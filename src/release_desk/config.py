"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Release Desk API"
    debug: bool = False

    # Identifier generation
    isrc_country_code: str = "US"
    isrc_registrant_code: str = "XXX"

    # Intake limits
    max_audio_size_mb: int = 200
    max_artwork_size_mb: int = 50
    min_artwork_dimension: int = 3000
    artwork_probe_timeout: float = 5.0

    # Upload wizard
    max_open_wizards: int = 1000

    # Reporting
    export_placeholder: str = "N/A"

    # Review workflow
    enforce_review_role: bool = True

    # Seed profile for the current user
    default_user_id: str = "1"
    default_user_name: str = "Demo Artist"
    default_user_email: str = "artist@demo.com"
    default_user_role: str = "artist"

    @field_validator("isrc_country_code")
    @classmethod
    def validate_country_code(cls, v: str) -> str:
        """Validate that the ISRC country code is two letters."""
        v = v.strip().upper()
        if len(v) != 2 or not v.isalpha():
            raise ValueError("ISRC_COUNTRY_CODE must be exactly two letters")
        return v

    @field_validator("isrc_registrant_code")
    @classmethod
    def validate_registrant_code(cls, v: str) -> str:
        """Validate that the ISRC registrant code is three alphanumerics."""
        v = v.strip().upper()
        if len(v) != 3 or not v.isalnum():
            raise ValueError("ISRC_REGISTRANT_CODE must be exactly three letters or digits")
        return v

    @field_validator("default_user_role")
    @classmethod
    def validate_default_role(cls, v: str) -> str:
        """Validate that the seed role is a known role."""
        if v not in ("artist", "label", "admin"):
            raise ValueError("DEFAULT_USER_ROLE must be one of: artist, label, admin")
        return v

    @property
    def max_audio_size_bytes(self) -> int:
        return self.max_audio_size_mb * 1024 * 1024

    @property
    def max_artwork_size_bytes(self) -> int:
        return self.max_artwork_size_mb * 1024 * 1024

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        # Placeholder registrant means generated ISRCs are not real codes
        if self.isrc_registrant_code == "XXX":
            warnings.append(
                "ISRC_REGISTRANT_CODE is the placeholder 'XXX' - "
                "generated ISRCs will not be registrable"
            )

        if not self.enforce_review_role:
            warnings.append(
                "ENFORCE_REVIEW_ROLE is disabled - any user can approve or reject releases"
            )

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
