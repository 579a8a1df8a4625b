"""Jaro and Jaro-Winkler similarity for strings, bytes and token sequences."""

from jaro_winkler.similarity import (
    JaroComponents,
    JaroWinklerComponents,
    common_prefix_length,
    compute_jaro_components,
    compute_jaro_winkler_components,
    jaro_distance,
    jaro_similarity,
    jaro_winkler_distance,
    jaro_winkler_similarity,
)

__version__ = "1.0.0"

__all__ = [
    "JaroComponents",
    "JaroWinklerComponents",
    "common_prefix_length",
    "compute_jaro_components",
    "compute_jaro_winkler_components",
    "jaro_distance",
    "jaro_similarity",
    "jaro_winkler_distance",
    "jaro_winkler_similarity",
]
