"""
jsonscrub Core.

This module provides the comment scanner and the JSON loading helpers built on it.
"""

from .engine import load, loads
from .exceptions import InvalidArgumentError, JsonScrubError
from .scanner import CommentScanner, Position, ScanState, strip

__all__ = [
    'strip', 'loads', 'load',
    'CommentScanner', 'ScanState', 'Position',
    'JsonScrubError', 'InvalidArgumentError'
]
