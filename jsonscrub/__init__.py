"""
jsonscrub - strips comments from JSON so a strict parser can read it.

Configuration files such as tsconfig.json or VS Code settings allow // and /* */
comments and often trailing commas. jsonscrub removes them in a single pass
while leaving string contents alone, so the result can be fed to json.loads().

Key Features:
- Removes // line comments and /* block */ comments
- Optionally removes trailing commas before } and ]
- Preserves offsets: removed characters become spaces, newlines are kept
- Comment markers inside string literals are left untouched
- loads() and load() mirror the json module for one-step parsing

Quick Start:
    import jsonscrub

    clean = jsonscrub.strip('{"a": 1 // one\\n}')
    data = jsonscrub.loads('{"a": [1, 2,], /* note */}', strip_trailing_commas=True)

    # camelCase options are accepted as well
    clean = jsonscrub.strip(text, preserveWhitespace=False)
"""

from .core.engine import load, loads
from .core.exceptions import InvalidArgumentError, JsonScrubError
from .core.scanner import ScanState, strip
from .utils.config import StripConfig

__version__ = "0.1.0"
__author__ = "jsonscrub contributors"

__all__ = [
    # Stripping and loading
    "strip", "loads", "load",
    # Configuration
    "StripConfig", "ScanState",
    # Exception classes
    "JsonScrubError", "InvalidArgumentError",
]
