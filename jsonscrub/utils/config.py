"""
Configuration for jsonscrub.

This module defines the options that control how comments and trailing commas
are removed from JSON-with-comments text.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Optional

# Accepted option spellings mapped onto StripConfig fields
OPTION_ALIASES = {
    "preserve_whitespace": "preserve_whitespace",
    "preserveWhitespace": "preserve_whitespace",
    "whitespace": "preserve_whitespace",
    "strip_trailing_commas": "strip_trailing_commas",
    "stripTrailingCommas": "strip_trailing_commas",
    "trailing_commas": "strip_trailing_commas",
    "trailingCommas": "strip_trailing_commas",
    "logger": "logger",
}


@dataclass
class StripConfig:
    """Options for a single strip pass."""

    # Blank removed spans with spaces instead of dropping them
    preserve_whitespace: bool = True
    strip_trailing_commas: bool = False

    # Diagnostics go here when set, otherwise to the scanner module logger
    logger: Optional[logging.Logger] = None

    @classmethod
    def compact(cls) -> "StripConfig":
        """Create a configuration that drops removed spans entirely."""
        return cls(preserve_whitespace=False)

    @classmethod
    def lenient(cls) -> "StripConfig":
        """Create a configuration that also strips trailing commas."""
        return cls(strip_trailing_commas=True)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "StripConfig":
        """Create configuration from an options mapping.

        Recognized names may be given in snake_case, camelCase or the short
        forms ``whitespace`` and ``trailing_commas``. Anything else is ignored.
        """
        return cls().merged(options)

    def merged(self, options: Mapping[str, Any]) -> "StripConfig":
        """Return a copy of this configuration with recognized options applied.

        Options set to None are treated as absent.
        """
        changes: dict[str, Any] = {}
        for name, value in options.items():
            field_name = OPTION_ALIASES.get(name)
            if field_name is None or value is None:
                continue
            if field_name == "logger":
                changes[field_name] = value
            else:
                changes[field_name] = bool(value)

        if not changes:
            return self
        return replace(self, **changes)
