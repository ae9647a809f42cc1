"""
winklerfuzz — Quick-start examples.

Run:  uv run python examples/quickstart.py
"""

from __future__ import annotations


def divider(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


# ──────────────────────────────────────────────────────────────
# 1. Jaro–Winkler score  (winklerfuzz.jaro_winkler_distance)
# ──────────────────────────────────────────────────────────────

def example_jaro_winkler() -> None:
    divider("1 · Jaro–Winkler (winklerfuzz.jaro_winkler_distance)")

    from winklerfuzz import jaro_winkler_distance

    pairs = [
        ("martha", "marhta"),
        ("Hello", "hey"),
        ("dixon", "dicksonx"),
    ]

    for s1, s2 in pairs:
        print(f'  distance("{s1}", "{s2}") = {jaro_winkler_distance(s1, s2):.4f}')


# ──────────────────────────────────────────────────────────────
# 2. Metric modules  (winklerfuzz.distance)
# ──────────────────────────────────────────────────────────────

def example_metrics() -> None:
    divider("2 · Metric modules (winklerfuzz.distance)")

    from winklerfuzz.distance import Jaro, JaroWinkler, Prefix
    from winklerfuzz.utils import default_process

    s1, s2 = "Microsoft Corporation", "Microsft Corp."
    print(f'  Jaro.similarity                      = {Jaro.similarity(s1, s2):.4f}')
    print(f'  JaroWinkler.similarity               = {JaroWinkler.similarity(s1, s2):.4f}')
    print(f'  JaroWinkler (prefix_weight=0.25)     = '
          f'{JaroWinkler.similarity(s1, s2, prefix_weight=0.25):.4f}')
    print(f'  JaroWinkler (default_process)        = '
          f'{JaroWinkler.similarity(s1, s2, processor=default_process):.4f}')
    print(f'  Prefix.similarity                    = {Prefix.similarity(s1, s2)}')


if __name__ == "__main__":
    example_jaro_winkler()
    example_metrics()
