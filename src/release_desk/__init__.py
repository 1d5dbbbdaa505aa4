"""Release Desk - music release submission and review service."""

__version__ = "0.1.0"
