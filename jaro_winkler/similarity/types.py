"""Type definitions for similarity scoring components.

This module provides structured type definitions for the bookkeeping behind a
Jaro or Jaro-Winkler score, so callers can inspect more than the final float.
"""

from typing import TypedDict


class JaroComponents(TypedDict):
    """Structured result of a Jaro comparison.

    ``transpositions`` is the raw count of lockstep mismatches between the
    matched subsequences; the formula halves it with integer division.
    """

    len_a: int
    len_b: int
    match_range: int
    matches: int
    transpositions: int
    score: float


class JaroWinklerComponents(JaroComponents):
    """Jaro components plus the prefix boost applied on top of them."""

    jaro_score: float
    prefix_length: int
    boost_applied: bool
