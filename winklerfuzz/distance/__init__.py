"""
winklerfuzz.distance — string similarity metrics.
"""

from __future__ import annotations

from . import Jaro, JaroWinkler, Prefix  # noqa: F401

__all__ = [
    "Jaro",
    "JaroWinkler",
    "Prefix",
]
