"""Settings error types."""

from __future__ import annotations


class SettingsError(Exception):
    """Raised when the configuration file cannot be read, parsed, or validated."""
