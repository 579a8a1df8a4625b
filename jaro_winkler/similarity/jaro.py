"""Jaro similarity scoring."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from jaro_winkler.similarity.constants import (
    JARO_WEIGHT_STRING_A,
    JARO_WEIGHT_STRING_B,
    JARO_WEIGHT_TRANSPOSITIONS,
)
from jaro_winkler.similarity.types import JaroComponents

logger = logging.getLogger(__name__)

T = TypeVar("T")


def as_sequence(value: Iterable[T] | None) -> Sequence[T]:
    """Return ``value`` as an indexable sequence.

    ``None`` becomes an empty tuple; strings, bytes, lists and tuples pass
    through untouched; any other iterable is materialised once.
    """
    if value is None:
        return ()
    if isinstance(value, Sequence):
        return value
    return tuple(value)


def match_range(len_a: int, len_b: int) -> int:
    """Half-width of the window in which two symbols may be matched."""
    return max(0, max(len_a, len_b) // 2 - 1)


def _match_masks(
    seq_a: Sequence[T],
    seq_b: Sequence[T],
    window: int,
) -> tuple[list[bool], list[bool]]:
    """Greedily pair each symbol of ``seq_a`` with the first free equal symbol of ``seq_b``.

    Args:
        seq_a: Sequence scanned left to right
        seq_b: Sequence searched inside the window
        window: Half-width of the matching window

    Returns:
        Tuple of match masks, one per sequence

    """
    len_b = len(seq_b)
    match_a = [False] * len(seq_a)
    match_b = [False] * len_b

    for a_index, symbol in enumerate(seq_a):
        min_index = max(a_index - window, 0)
        max_index = min(a_index + window + 1, len_b)

        # Lower bound only grows with a_index, so a closed window stays closed
        if min_index >= max_index:
            break

        for b_index in range(min_index, max_index):
            if not match_b[b_index] and seq_b[b_index] == symbol:
                match_a[a_index] = True
                match_b[b_index] = True
                break

    return match_a, match_b


def _matched_positions(mask: list[bool]) -> list[int]:
    return [index for index, matched in enumerate(mask) if matched]


def _count_transpositions(
    seq_a: Sequence[T],
    seq_b: Sequence[T],
    match_a: list[bool],
    match_b: list[bool],
) -> int:
    """Count lockstep mismatches between the matched subsequences."""
    positions_a = _matched_positions(match_a)
    positions_b = _matched_positions(match_b)
    return sum(
        1
        for a_index, b_index in zip(positions_a, positions_b)
        if seq_a[a_index] != seq_b[b_index]
    )


def _components(
    len_a: int,
    len_b: int,
    window: int,
    matches: int = 0,
    transpositions: int = 0,
    score: float = 0.0,
) -> JaroComponents:
    return {
        "len_a": len_a,
        "len_b": len_b,
        "match_range": window,
        "matches": matches,
        "transpositions": transpositions,
        "score": score,
    }


def compute_jaro_components(
    a: Iterable[T] | None,
    b: Iterable[T] | None,
) -> JaroComponents:
    """Compute the Jaro score together with the counts it is derived from.

    Symbols only need to support ``==``, so this works for ``str``, ``bytes``
    and sequences of arbitrary tokens alike. An empty (or ``None``) operand
    scores 0.0.

    Args:
        a: First sequence
        b: Second sequence

    Returns:
        JaroComponents with lengths, window, match and transposition counts
        and the final score

    """
    seq_a = as_sequence(a)
    seq_b = as_sequence(b)
    len_a = len(seq_a)
    len_b = len(seq_b)

    if len_a == 0 or len_b == 0:
        return _components(len_a, len_b, 0)

    window = match_range(len_a, len_b)
    match_a, match_b = _match_masks(seq_a, seq_b, window)
    matches = sum(match_a)

    if matches == 0:
        return _components(len_a, len_b, window)

    transpositions = _count_transpositions(seq_a, seq_b, match_a, match_b)

    # Half-transpositions use integer division
    score = (
        JARO_WEIGHT_STRING_A * (matches / len_a)
        + JARO_WEIGHT_STRING_B * (matches / len_b)
        + JARO_WEIGHT_TRANSPOSITIONS * ((matches - transpositions // 2) / matches)
    )

    logger.debug(
        f"Jaro: len_a={len_a} len_b={len_b} window={window} "
        f"matches={matches} transpositions={transpositions} score={score:.6f}"
    )

    return _components(len_a, len_b, window, matches, transpositions, score)


def jaro_distance(
    a: Iterable[T] | None,
    b: Iterable[T] | None,
    *,
    score_cutoff: float | None = None,
) -> float:
    """Jaro similarity of two sequences, in [0, 1].

    1.0 means identical, 0.0 means one side is empty or nothing matched.

    Args:
        a: First sequence
        b: Second sequence
        score_cutoff: Scores below this value are reported as 0.0

    Returns:
        Jaro similarity score

    """
    score = compute_jaro_components(a, b)["score"]
    if score_cutoff is not None and score < score_cutoff:
        return 0.0
    return score


jaro_similarity = jaro_distance

__all__ = [
    "as_sequence",
    "compute_jaro_components",
    "jaro_distance",
    "jaro_similarity",
    "match_range",
]
