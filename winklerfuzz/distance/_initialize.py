"""
winklerfuzz.distance._initialize — argument handling shared by the metrics.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def check_str(s: Any, name: str) -> None:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a str or None, got {type(s).__name__}")


def preprocess(
    s1: Any,
    s2: Any,
    processor: Callable[..., Any] | None,
) -> tuple[str, str] | None:
    """
    Apply *processor* to both inputs and validate them.

    Returns ``None`` when either input is ``None``; callers treat that as
    "nothing in common".
    """
    if s1 is None or s2 is None:
        return None

    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    check_str(s1, "s1")
    check_str(s2, "s2")
    return s1, s2


__all__ = ["check_str", "preprocess"]
