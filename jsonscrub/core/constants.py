"""
Character sets and delimiters recognized by the comment scanner.
"""

QUOTE = '"'
BACKSLASH = "\\"
COMMA = ","

LINE_COMMENT_OPEN = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
CRLF = "\r\n"
LF = "\n"

# Characters kept as-is when a removed span is blanked out
LINE_TERMINATORS = frozenset("\r\n")

# Whitespace that keeps a trailing-comma candidate open
INSIGNIFICANT_WHITESPACE = frozenset(" \t\r\n")

CLOSING_BRACKETS = frozenset("}]")
