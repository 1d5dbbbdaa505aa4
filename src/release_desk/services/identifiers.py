"""ISRC and UPC generation and format checks.

Generated codes are best effort: they come from an unseeded random source and
are not checked against existing releases, so collisions are possible.
"""

import random
import re
from datetime import date

from release_desk.config import get_settings

ISRC_PATTERN = re.compile(r"^[A-Z]{2}[A-Z0-9]{3}\d{7}$")
UPC_PATTERN = re.compile(r"^\d{12,13}$")


def generate_isrc(
    country_code: str | None = None,
    registrant_code: str | None = None,
    today: date | None = None,
) -> str:
    """Generate an ISRC of the form ``CCRRRYYNNNNN``.

    Args:
        country_code: Two-letter country code. Defaults to settings.
        registrant_code: Three-character registrant code. Defaults to settings.
        today: Date supplying the two-digit year. Defaults to today.

    Returns:
        A 12-character ISRC without hyphens.
    """
    settings = get_settings()
    country = country_code or settings.isrc_country_code
    registrant = registrant_code or settings.isrc_registrant_code
    year = (today or date.today()).strftime("%y")
    designation = f"{random.randrange(100_000):05d}"
    return f"{country}{registrant}{year}{designation}"


def generate_upc() -> str:
    """Generate a 12-digit zero-padded UPC."""
    return f"{random.randrange(10**12):012d}"


def normalize_isrc(code: str) -> str:
    """Strip hyphens and whitespace and upper-case an ISRC."""
    return code.replace("-", "").strip().upper()


def normalize_upc(code: str) -> str:
    return code.replace(" ", "").strip()


def is_valid_isrc(code: str) -> bool:
    """Check that a (normalized) code is a well-formed ISRC."""
    return bool(ISRC_PATTERN.match(normalize_isrc(code)))


def is_valid_upc(code: str) -> bool:
    """Check that a code is a 12-digit UPC or 13-digit EAN."""
    return bool(UPC_PATTERN.match(normalize_upc(code)))
