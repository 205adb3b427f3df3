"""
Comment scanner for jsonscrub - removes comments from JSON-with-comments text.

The scanner makes a single left-to-right pass over the input with one character
of lookahead. String literals are copied through untouched, comments are
blanked out (or dropped), and trailing commas are optionally removed. Malformed
JSON is tolerated: the scanner only tracks string and comment boundaries.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..utils.config import StripConfig
from .constants import (
    BACKSLASH,
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    CLOSING_BRACKETS,
    COMMA,
    CRLF,
    INSIGNIFICANT_WHITESPACE,
    LF,
    LINE_COMMENT_OPEN,
    LINE_TERMINATORS,
    QUOTE,
)
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class ScanState(Enum):
    """Where the scan cursor currently is."""

    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_LINE_COMMENT = "in_line_comment"
    IN_BLOCK_COMMENT = "in_block_comment"


COMMENT_STATES = frozenset({ScanState.IN_LINE_COMMENT, ScanState.IN_BLOCK_COMMENT})


@dataclass
class Position:
    """Position in source text (line and column)."""

    line: int
    column: int


def position_at(text: str, offset: int) -> Position:
    """Get the 1-based line and column of an offset in text."""
    line = text.count(LF, 0, offset) + 1
    line_start = text.rfind(LF, 0, offset) + 1
    return Position(line, offset - line_start + 1)


def blank_out(span: str) -> str:
    """Replace every character except line terminators with a space."""
    return "".join(char if char in LINE_TERMINATORS else " " for char in span)


def drop(_span: str) -> str:
    """Remove the span entirely."""
    return ""


class CommentScanner:
    """Single-use scanner holding the state of one strip pass."""

    def __init__(self, text: str, config: StripConfig) -> None:
        self.text = text
        self.config = config
        self.erase = blank_out if config.preserve_whitespace else drop

        self.pos = 0
        self.state = ScanState.NORMAL
        # Start of the text not yet moved into a buffer
        self.offset = 0

        # Text whose trailing-comma status is settled
        self.confirmed: list[str] = []
        # Text from the candidate comma onward, or plain buffered text
        self.pending: list[str] = []
        self.comma_pending = False

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def lookahead_pair(self) -> str:
        """Get the current character and the one after it."""
        return self.text[self.pos : self.pos + 2]

    def is_escaped(self, pos: int) -> bool:
        """Check whether the character at pos follows an odd run of backslashes."""
        index = pos - 1
        backslashes = 0
        while index >= 0 and self.text[index] == BACKSLASH:
            backslashes += 1
            index -= 1
        return backslashes % 2 == 1

    def scan(self) -> str:
        """Run the pass and return the stripped text."""
        while self.pos < len(self.text):
            char = self.peek()

            if char == QUOTE and self.state not in COMMENT_STATES:
                self._toggle_string()

            if self.state is ScanState.IN_STRING:
                self.pos += 1
            elif self.state is ScanState.IN_LINE_COMMENT:
                self._scan_line_comment()
            elif self.state is ScanState.IN_BLOCK_COMMENT:
                self._scan_block_comment()
            else:
                self._scan_normal(char)

        return self._finish()

    def _toggle_string(self) -> None:
        if self.is_escaped(self.pos):
            return
        if self.state is ScanState.IN_STRING:
            self.state = ScanState.NORMAL
        else:
            self.state = ScanState.IN_STRING

    def _scan_normal(self, char: str) -> None:
        pair = self.lookahead_pair()

        if pair == LINE_COMMENT_OPEN:
            self._open_comment(ScanState.IN_LINE_COMMENT)
        elif pair == BLOCK_COMMENT_OPEN:
            self._open_comment(ScanState.IN_BLOCK_COMMENT)
        else:
            if self.config.strip_trailing_commas:
                self._track_comma(char)
            self.pos += 1

    def _open_comment(self, state: ScanState) -> None:
        self._buffer_verbatim(self.pos)
        self.state = state
        self.pos += 2

    def _scan_line_comment(self) -> None:
        if self.lookahead_pair() == CRLF or self.peek() == LF:
            # The terminator stays outside the erased span
            self._buffer_erased(self.pos)
            self.state = ScanState.NORMAL
        self.pos += 1

    def _scan_block_comment(self) -> None:
        if self.lookahead_pair() == BLOCK_COMMENT_CLOSE:
            self.pos += 2
            self._buffer_erased(self.pos)
            self.state = ScanState.NORMAL
        else:
            self.pos += 1

    def _track_comma(self, char: str) -> None:
        if self.comma_pending:
            if char in CLOSING_BRACKETS:
                self._confirm_trailing_comma()
            elif char not in INSIGNIFICANT_WHITESPACE:
                # Content follows, so the comma is a real separator
                self._buffer_verbatim(self.pos)
                self.comma_pending = False
        elif char == COMMA:
            self._buffer_verbatim(self.pos)
            self.confirmed.extend(self.pending)
            self.pending.clear()
            self.comma_pending = True

    def _confirm_trailing_comma(self) -> None:
        self._buffer_verbatim(self.pos)
        buffered = "".join(self.pending)
        self.confirmed.append(self.erase(buffered[0]) + buffered[1:])
        self.pending.clear()
        self.comma_pending = False

    def _buffer_verbatim(self, end: int) -> None:
        self.pending.append(self.text[self.offset : end])
        self.offset = end

    def _buffer_erased(self, end: int) -> None:
        self.pending.append(self.erase(self.text[self.offset : end]))
        self.offset = end

    def _finish(self) -> str:
        tail = self.text[self.offset :]
        if self.state in COMMENT_STATES:
            self._log_unterminated_comment()
            tail = self.erase(tail)
        return "".join(self.confirmed) + "".join(self.pending) + tail

    def _log_unterminated_comment(self) -> None:
        log = self.config.logger or logger
        if not log.isEnabledFor(logging.DEBUG):
            return
        kind = "block" if self.state is ScanState.IN_BLOCK_COMMENT else "line"
        position = position_at(self.text, self.offset)
        log.debug(
            f"Unterminated {kind} comment at line {position.line}, "
            f"column {position.column}; erasing to end of input"
        )


def strip(
    json_string: str,
    config: Union[StripConfig, Mapping[str, Any], None] = None,
    **options: Any,
) -> str:
    """
    Remove comments, and optionally trailing commas, from JSON text.

    Args:
        json_string: JSON-with-comments text
        config: Strip options as a StripConfig or an options mapping such as
            ``{"stripTrailingCommas": True}``; defaults to StripConfig()
        **options: Overrides for config fields. camelCase names such as
            ``preserveWhitespace`` and ``stripTrailingCommas`` are accepted,
            unrecognized names are ignored.

    Returns:
        The text with comments removed. With preserve_whitespace (the default)
        removed characters become spaces, so every surviving character keeps
        its offset, line and column.

    Raises:
        InvalidArgumentError: If json_string is not a str, or config is neither
            a StripConfig nor a mapping
    """
    if not isinstance(json_string, str):
        raise InvalidArgumentError("json_string", "str", json_string)

    if config is None:
        config = StripConfig()
    elif isinstance(config, Mapping):
        config = StripConfig.from_options(config)
    elif not isinstance(config, StripConfig):
        raise InvalidArgumentError("config", "StripConfig or mapping", config)

    effective = config.merged(options)
    return CommentScanner(json_string, effective).scan()
