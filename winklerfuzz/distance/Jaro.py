"""
winklerfuzz.distance.Jaro — Jaro similarity.

Characters match when they are equal and no further apart than
``min(len(s1), len(s2)) // 2 + 1`` positions. Matching is greedy: each
character takes the leftmost unconsumed equal character inside its window,
so the extraction is run once in each direction and the two match strings
are compared position by position to count transpositions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from winklerfuzz.utils import fold_case

from ._initialize import preprocess

logger = logging.getLogger(__name__)


def matching_characters(first: str, second: str, limit: int) -> str:
    """
    Characters of *first* that have an unconsumed counterpart in *second*
    within *limit* positions, in the order they occur in *first*.

    >>> matching_characters("dixon", "dicksonx", 3)
    'dion'
    """
    consumed = [False] * len(second)
    common: list[str] = []

    for i, ch in enumerate(first):
        start = max(0, i - limit)
        end = min(i + limit, len(second))
        for j in range(start, end):
            if not consumed[j] and second[j] == ch:
                common.append(ch)
                consumed[j] = True
                break

    return "".join(common)


def transpositions(m1: str, m2: str) -> int:
    """Half the number of positions at which *m1* and *m2* disagree."""
    if len(m1) != len(m2):
        raise ValueError(
            f"match strings must have equal length, got {len(m1)} and {len(m2)}"
        )
    return sum(1 for a, b in zip(m1, m2) if a != b) // 2


def _score(first: str, second: str) -> float:
    first = fold_case(first)
    second = fold_case(second)

    if first == second:
        return 1.0

    if len(first) > len(second):
        shorter, longer = second, first
    else:
        shorter, longer = first, second

    limit = len(shorter) // 2 + 1
    m1 = matching_characters(shorter, longer, limit)
    m2 = matching_characters(longer, shorter, limit)

    if not m1 or not m2:
        return 0.0

    if len(m1) != len(m2):
        logger.debug(
            "match strings differ in length (%d != %d) for %r / %r",
            len(m1),
            len(m2),
            shorter,
            longer,
        )
        return 0.0

    t = transpositions(m1, m2)
    matches = len(m1)

    assert shorter and longer
    return (
        matches / len(shorter) + len(m2) / len(longer) + (matches - t) / matches
    ) / 3.0


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the case-insensitive Jaro similarity of two strings.

    Returns a float in ``[0.0, 1.0]``; ``1.0`` for equal strings (two empty
    strings included) and ``0.0`` when no character matches.
    """
    pair = preprocess(s1, s2, processor)
    if pair is None:
        return 0.0

    sim = _score(*pair)
    return sim if score_cutoff is None or sim >= score_cutoff else 0.0


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """``1 - similarity``."""
    dist = 1.0 - similarity(s1, s2, processor=processor)
    return dist if score_cutoff is None or dist <= score_cutoff else 1.0


normalized_similarity = similarity
normalized_distance = distance

__all__ = [
    "matching_characters",
    "transpositions",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
