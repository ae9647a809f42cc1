"""
winklerfuzz — Jaro–Winkler string similarity.
"""

from __future__ import annotations

import logging

from . import config, distance, utils
from .config import JaroWinklerConfig
from .distance.JaroWinkler import jaro_winkler_distance

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__author__: str = "BM Suisse"

__all__ = [
    "config",
    "distance",
    "utils",
    "JaroWinklerConfig",
    "jaro_winkler_distance",
    "__version__",
]
