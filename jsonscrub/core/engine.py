"""
JSON loading on top of the comment scanner.

loads() and load() mirror the standard library signatures: the text is
stripped first and the result is handed to json.loads(). Whitespace is
preserved by default, so a json.JSONDecodeError reports the line and column of
the problem in the original, commented text.
"""

import json
from collections.abc import Mapping
from typing import IO, Any, Optional, Union

from ..utils.config import OPTION_ALIASES, StripConfig
from .exceptions import InvalidArgumentError
from .scanner import strip


def loads(
    s: Union[str, bytes, bytearray],
    *,
    config: Union[StripConfig, Mapping[str, Any], None] = None,
    preserve_whitespace: Optional[bool] = None,
    strip_trailing_commas: Optional[bool] = None,
    **kwargs: Any,
) -> Any:
    """
    Deserialize JSON-with-comments text to a Python object.

    Args:
        s: JSON text, possibly containing comments and trailing commas
        config: Strip options as a StripConfig or mapping; defaults to StripConfig()
        preserve_whitespace: Override for config.preserve_whitespace
        strip_trailing_commas: Override for config.strip_trailing_commas
        **kwargs: Strip option aliases such as ``stripTrailingCommas`` are
            applied to the strip pass; everything else is passed through to
            json.loads (object_hook, parse_float, ...)

    Returns:
        The parsed Python object

    Raises:
        InvalidArgumentError: If s is not str, bytes or bytearray
        json.JSONDecodeError: If the stripped text is not valid JSON
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode(json.detect_encoding(s), "surrogatepass")
    elif not isinstance(s, str):
        raise InvalidArgumentError("s", "str, bytes or bytearray", s)

    # Strip options given under their aliases must not reach json.loads
    overrides = {
        name: kwargs.pop(name) for name in list(kwargs) if name in OPTION_ALIASES
    }
    if preserve_whitespace is not None:
        overrides["preserve_whitespace"] = preserve_whitespace
    if strip_trailing_commas is not None:
        overrides["strip_trailing_commas"] = strip_trailing_commas

    cleaned = strip(s, config, **overrides)
    return json.loads(cleaned, **kwargs)


def load(
    fp: IO[Any],
    *,
    config: Union[StripConfig, Mapping[str, Any], None] = None,
    preserve_whitespace: Optional[bool] = None,
    strip_trailing_commas: Optional[bool] = None,
    **kwargs: Any,
) -> Any:
    """Deserialize a file-like object containing JSON-with-comments text."""
    if not hasattr(fp, "read"):
        raise InvalidArgumentError("fp", "file-like object", fp)

    return loads(
        fp.read(),
        config=config,
        preserve_whitespace=preserve_whitespace,
        strip_trailing_commas=strip_trailing_commas,
        **kwargs,
    )
