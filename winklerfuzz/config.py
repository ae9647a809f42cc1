"""
winklerfuzz.config — tuning knobs for the Jaro–Winkler scorer.
"""

from __future__ import annotations

import dataclasses
import math

DEFAULT_PREFIX_WEIGHT: float = 0.1
MAX_PREFIX_WEIGHT: float = 0.25
MAX_PREFIX: int = 4


@dataclasses.dataclass(frozen=True)
class JaroWinklerConfig:
    """
    Configuration for :mod:`winklerfuzz.distance.JaroWinkler`.

    Parameters
    ----------
    prefix_weight : float
        Scaling factor applied to the shared-prefix bonus. Must lie in
        ``[0.0, 0.25]`` so the score stays within ``[0, 1]``.
    max_prefix : int
        Number of leading characters that can earn the bonus.

    Examples
    --------
    >>> cfg = JaroWinklerConfig(prefix_weight=0.2)
    >>> from winklerfuzz.distance import JaroWinkler
    >>> round(JaroWinkler.similarity("martha", "marhta", config=cfg), 4)
    0.9778
    """

    prefix_weight: float = DEFAULT_PREFIX_WEIGHT
    max_prefix: int = MAX_PREFIX

    def __post_init__(self) -> None:
        weight = self.prefix_weight
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise TypeError(
                f"prefix_weight must be a float, got {type(weight).__name__}"
            )
        if not math.isfinite(weight) or not 0.0 <= weight <= MAX_PREFIX_WEIGHT:
            raise ValueError(
                f"prefix_weight must be in the range [0.0, {MAX_PREFIX_WEIGHT}], "
                f"got {weight!r}"
            )
        if isinstance(self.max_prefix, bool) or not isinstance(self.max_prefix, int):
            raise TypeError(
                f"max_prefix must be an int, got {type(self.max_prefix).__name__}"
            )
        if self.max_prefix < 0:
            raise ValueError(f"max_prefix must be >= 0, got {self.max_prefix}")
        if weight * self.max_prefix > 1.0:
            raise ValueError(
                f"prefix_weight * max_prefix must not exceed 1.0, "
                f"got {weight} * {self.max_prefix}"
            )


__all__ = [
    "DEFAULT_PREFIX_WEIGHT",
    "MAX_PREFIX",
    "MAX_PREFIX_WEIGHT",
    "JaroWinklerConfig",
]
