"""Normalize, merge, and validate locale-aware site navigation."""

from .paths import (
    LocalPath,
    PathNormalizer,
    expand_path,
    is_external,
    strip_base_path,
)
from .resolve import resolve

__all__ = [
    "LocalPath",
    "PathNormalizer",
    "expand_path",
    "is_external",
    "resolve",
    "strip_base_path",
]
