"""
winklerfuzz.utils — string preprocessing helpers.
"""

from __future__ import annotations

import re
from typing import Any

_NON_ALNUM = re.compile(r"[^\w]|_", re.UNICODE)


def fold_case(s: str) -> str:
    """Canonical case used by every scorer before comparing characters."""
    return s.casefold()


def default_process(s: Any) -> str:
    """
    Lowercase *s*, replace every non-alphanumeric character with a space and
    trim surrounding whitespace.

    ``None`` becomes the empty string.

    Examples
    --------
    >>> default_process("Hello, World!")
    'hello  world'
    """
    if s is None:
        return ""
    return _NON_ALNUM.sub(" ", str(s)).lower().strip()


__all__ = ["fold_case", "default_process"]
