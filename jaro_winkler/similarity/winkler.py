"""Jaro-Winkler similarity scoring.

The Winkler variant rewards pairs that already look alike (Jaro score above
``JARO_WINKLER_BOOST_THRESHOLD``) and share a leading run of symbols. The boost
is ``prefix_weight * prefix_length * (1 - jaro)``, so with the default weight
and prefix cap the result never exceeds 1.0.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import TypeVar

from jaro_winkler.similarity.constants import (
    JARO_WINKLER_BOOST_THRESHOLD,
    JARO_WINKLER_PREFIX_SIZE,
    JARO_WINKLER_SCALING_FACTOR,
)
from jaro_winkler.similarity.jaro import (
    as_sequence,
    compute_jaro_components,
    jaro_distance,
)
from jaro_winkler.similarity.types import JaroWinklerComponents

logger = logging.getLogger(__name__)

T = TypeVar("T")


def common_prefix_length(
    a: Iterable[T] | None,
    b: Iterable[T] | None,
    max_prefix: int = JARO_WINKLER_PREFIX_SIZE,
) -> int:
    """Length of the shared leading run of ``a`` and ``b``, capped at ``max_prefix``.

    Args:
        a: First sequence
        b: Second sequence
        max_prefix: Upper bound on the returned length

    Returns:
        Number of leading positions holding equal symbols

    """
    seq_a = as_sequence(a)
    seq_b = as_sequence(b)
    limit = min(len(seq_a), len(seq_b), max_prefix)

    prefix = 0
    while prefix < limit and seq_a[prefix] == seq_b[prefix]:
        prefix += 1
    return prefix


def _check_params(prefix_weight: float, prefix_size: int, boost_threshold: float) -> None:
    """Reject tuning parameters that would push scores outside [0, 1]."""
    if isinstance(prefix_size, bool) or not isinstance(prefix_size, int) or prefix_size < 0:
        raise ValueError(f"prefix_size must be a non-negative int, got {prefix_size!r}")
    if isinstance(prefix_weight, bool) or not isinstance(prefix_weight, (int, float)):
        raise ValueError(f"prefix_weight must be a number, got {prefix_weight!r}")
    if not math.isfinite(prefix_weight) or prefix_weight < 0:
        raise ValueError(f"prefix_weight must be a finite number >= 0, got {prefix_weight!r}")
    if prefix_weight * prefix_size > 1.0:
        raise ValueError(
            f"prefix_weight * prefix_size must be <= 1, got "
            f"{prefix_weight!r} * {prefix_size!r}"
        )
    if (
        isinstance(boost_threshold, bool)
        or not isinstance(boost_threshold, (int, float))
        or not 0.0 <= boost_threshold <= 1.0
    ):
        raise ValueError(f"boost_threshold must be in [0, 1], got {boost_threshold!r}")


def _apply_prefix_boost(
    jaro: float,
    seq_a: Sequence[T],
    seq_b: Sequence[T],
    prefix_weight: float,
    prefix_size: int,
    boost_threshold: float,
) -> tuple[float, int]:
    """Return the boosted score and the prefix length that produced it."""
    if jaro <= boost_threshold:
        return jaro, 0

    prefix = common_prefix_length(seq_a, seq_b, prefix_size)
    return jaro + prefix_weight * prefix * (1.0 - jaro), prefix


def jaro_winkler_distance(
    a: Iterable[T] | None,
    b: Iterable[T] | None,
    *,
    prefix_weight: float = JARO_WINKLER_SCALING_FACTOR,
    prefix_size: int = JARO_WINKLER_PREFIX_SIZE,
    boost_threshold: float = JARO_WINKLER_BOOST_THRESHOLD,
    score_cutoff: float | None = None,
) -> float:
    """Jaro-Winkler similarity of two sequences, in [0, 1].

    Args:
        a: First sequence
        b: Second sequence
        prefix_weight: Scaling factor applied per shared prefix symbol
        prefix_size: Cap on the shared prefix length
        boost_threshold: Jaro scores at or below this are returned unchanged
        score_cutoff: Scores below this value are reported as 0.0

    Returns:
        Jaro-Winkler similarity score

    Raises:
        ValueError: If the tuning parameters could produce a score above 1

    """
    _check_params(prefix_weight, prefix_size, boost_threshold)

    seq_a = as_sequence(a)
    seq_b = as_sequence(b)
    jaro = jaro_distance(seq_a, seq_b)
    score, _ = _apply_prefix_boost(
        jaro, seq_a, seq_b, prefix_weight, prefix_size, boost_threshold
    )

    if score_cutoff is not None and score < score_cutoff:
        return 0.0
    return score


def compute_jaro_winkler_components(
    a: Iterable[T] | None,
    b: Iterable[T] | None,
    *,
    prefix_weight: float = JARO_WINKLER_SCALING_FACTOR,
    prefix_size: int = JARO_WINKLER_PREFIX_SIZE,
    boost_threshold: float = JARO_WINKLER_BOOST_THRESHOLD,
) -> JaroWinklerComponents:
    """Jaro-Winkler score with the Jaro bookkeeping and the prefix boost details."""
    _check_params(prefix_weight, prefix_size, boost_threshold)

    seq_a = as_sequence(a)
    seq_b = as_sequence(b)
    jaro = compute_jaro_components(seq_a, seq_b)
    score, prefix = _apply_prefix_boost(
        jaro["score"], seq_a, seq_b, prefix_weight, prefix_size, boost_threshold
    )
    boost_applied = jaro["score"] > boost_threshold

    logger.debug(
        f"Jaro-Winkler: jaro={jaro['score']:.6f} prefix={prefix} "
        f"boosted={boost_applied} score={score:.6f}"
    )

    return {
        "len_a": jaro["len_a"],
        "len_b": jaro["len_b"],
        "match_range": jaro["match_range"],
        "matches": jaro["matches"],
        "transpositions": jaro["transpositions"],
        "jaro_score": jaro["score"],
        "prefix_length": prefix,
        "boost_applied": boost_applied,
        "score": score,
    }


jaro_winkler_similarity = jaro_winkler_distance

__all__ = [
    "common_prefix_length",
    "compute_jaro_winkler_components",
    "jaro_winkler_distance",
    "jaro_winkler_similarity",
]
