"""
winklerfuzz.distance.JaroWinkler — Jaro similarity with a shared-prefix bonus.

    sim = jaro + prefix_weight * prefix * (1 - jaro)

where ``prefix`` is the number of equal leading characters of the
case-folded strings, capped at four.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from winklerfuzz.config import DEFAULT_PREFIX_WEIGHT, JaroWinklerConfig
from winklerfuzz.utils import fold_case

from . import Jaro
from ._initialize import preprocess
from .Prefix import common_prefix_length

_DEFAULT_CONFIG = JaroWinklerConfig()


def _resolve_config(
    prefix_weight: float | None, config: JaroWinklerConfig | None
) -> JaroWinklerConfig:
    if config is not None:
        if prefix_weight is not None:
            raise TypeError("pass either prefix_weight or config, not both")
        return config
    if prefix_weight is None:
        return _DEFAULT_CONFIG
    return JaroWinklerConfig(prefix_weight=prefix_weight)


def _score(first: str, second: str, config: JaroWinklerConfig) -> float:
    jaro = Jaro.similarity(first, second)
    prefix = common_prefix_length(
        fold_case(first), fold_case(second), config.max_prefix
    )
    sim = jaro + config.prefix_weight * prefix * (1.0 - jaro)
    return min(1.0, max(0.0, sim))


def similarity(
    s1: Any,
    s2: Any,
    *,
    prefix_weight: float | None = None,
    config: JaroWinklerConfig | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Calculates the Jaro–Winkler similarity of two strings.

    Parameters
    ----------
    s1, s2 : str
        Strings to compare. ``None`` scores ``0.0``.
    prefix_weight : float, optional
        Weight of the shared-prefix bonus, ``0.1`` by default. Must lie in
        ``[0.0, 0.25]``.
    config : JaroWinklerConfig, optional
        Prebuilt configuration, as an alternative to *prefix_weight*.
    processor : callable, optional
        Applied to both strings before scoring.
    score_cutoff : float, optional
        Scores below the cutoff are returned as ``0.0``.

    Raises
    ------
    ValueError
        If *prefix_weight* is outside ``[0.0, 0.25]``.
    """
    cfg = _resolve_config(prefix_weight, config)
    pair = preprocess(s1, s2, processor)
    if pair is None:
        return 0.0

    sim = _score(pair[0], pair[1], cfg)
    return sim if score_cutoff is None or sim >= score_cutoff else 0.0


def distance(
    s1: Any,
    s2: Any,
    *,
    prefix_weight: float | None = None,
    config: JaroWinklerConfig | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """``1 - similarity``."""
    sim = similarity(
        s1, s2, prefix_weight=prefix_weight, config=config, processor=processor
    )
    dist = 1.0 - sim
    return dist if score_cutoff is None or dist <= score_cutoff else 1.0


normalized_similarity = similarity
normalized_distance = distance


def jaro_winkler_distance(
    first: str, second: str, scaling_factor: float = DEFAULT_PREFIX_WEIGHT
) -> float:
    """
    Jaro–Winkler score of *first* and *second*, named after the Apache
    Commons ``getJaroWinklerDistance``: higher means more similar.

    >>> round(jaro_winkler_distance("martha", "marhta"), 4)
    0.9611
    """
    return similarity(first, second, prefix_weight=scaling_factor)


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "jaro_winkler_distance",
]
