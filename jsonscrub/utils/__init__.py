"""Configuration helpers for jsonscrub."""

from .config import StripConfig

__all__ = ['StripConfig']
