"""winklerfuzz.distance.Prefix"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from winklerfuzz.config import MAX_PREFIX

from ._initialize import check_str, preprocess


def _prefix_len(first: str, second: str) -> int:
    n = 0
    for a, b in zip(first, second):
        if a != b:
            break
        n += 1
    return n


def _other_len(s1: Any, s2: Any, processor: Callable[..., Any] | None) -> int:
    # length of the side that is not None, after preprocessing
    if s1 is None and s2 is None:
        return 0
    name, s = ("s2", s2) if s1 is None else ("s1", s1)
    if processor is not None:
        s = processor(s)
    check_str(s, name)
    return len(s)


def common_prefix_length(first: str, second: str, max_length: int = MAX_PREFIX) -> int:
    """
    Number of leading characters shared by *first* and *second*, capped at
    *max_length*.

    >>> common_prefix_length("abcdeZZZ", "abcdeYYY")
    4
    """
    return min(_prefix_len(first, second), max_length)


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """Calculates the length of the common prefix of two strings."""
    pair = preprocess(s1, s2, processor)
    if pair is None:
        return 0

    sim = _prefix_len(*pair)
    return sim if score_cutoff is None or sim >= score_cutoff else 0


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """Calculates the number of characters outside the common prefix."""
    pair = preprocess(s1, s2, processor)
    if pair is None:
        dist = _other_len(s1, s2, processor)
    else:
        dist = max(len(pair[0]), len(pair[1])) - _prefix_len(*pair)
    return dist if score_cutoff is None or dist <= score_cutoff else score_cutoff + 1


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Common prefix length divided by the length of the longer string."""
    pair = preprocess(s1, s2, processor)
    if pair is None:
        return 0.0

    maximum = max(len(pair[0]), len(pair[1]))
    sim = 1.0 if maximum == 0 else _prefix_len(*pair) / maximum
    return sim if score_cutoff is None or sim >= score_cutoff else 0.0


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """``1 - normalized_similarity``."""
    if s1 is None or s2 is None:
        return 1.0

    dist = 1.0 - normalized_similarity(s1, s2, processor=processor)
    return dist if score_cutoff is None or dist <= score_cutoff else 1.0


__all__ = [
    "common_prefix_length",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
