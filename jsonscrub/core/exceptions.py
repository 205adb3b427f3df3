"""
Exception classes for jsonscrub.

The scanner is lenient by construction: malformed but textual input always
produces output. The only condition it raises is a wrong input type.
"""

from typing import Any, Optional


class JsonScrubError(Exception):
    """Base exception for all jsonscrub errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        lines = [self.message]
        if self.suggestions:
            lines.append("Suggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)


class InvalidArgumentError(JsonScrubError, TypeError):
    """Raised when the input to strip or loads is not text."""

    def __init__(self, argument: str, expected: str, value: Any):
        self.argument = argument
        self.expected = expected
        self.actual = type(value).__name__

        suggestions = []
        if isinstance(value, (bytes, bytearray)):
            suggestions.append(
                "Decode the bytes first, e.g. data.decode('utf-8'), "
                "or pass them to jsonscrub.loads() which decodes like json.loads()"
            )
        elif hasattr(value, "read"):
            suggestions.append("Use jsonscrub.load() for file-like objects")

        super().__init__(
            f"Expected argument `{argument}` to be a `{expected}`, "
            f"got `{self.actual}`",
            suggestions,
        )
