"""Similarity module for jaro_winkler.

This module provides the Jaro and Jaro-Winkler scorers and their component
breakdowns.
"""

from .constants import (
    JARO_WEIGHT_STRING_A,
    JARO_WEIGHT_STRING_B,
    JARO_WEIGHT_TRANSPOSITIONS,
    JARO_WINKLER_BOOST_THRESHOLD,
    JARO_WINKLER_PREFIX_SIZE,
    JARO_WINKLER_SCALING_FACTOR,
)
from .jaro import compute_jaro_components, jaro_distance, jaro_similarity
from .types import JaroComponents, JaroWinklerComponents
from .winkler import (
    common_prefix_length,
    compute_jaro_winkler_components,
    jaro_winkler_distance,
    jaro_winkler_similarity,
)

# Export all functions

__all__ = [
    "JARO_WEIGHT_STRING_A",
    "JARO_WEIGHT_STRING_B",
    "JARO_WEIGHT_TRANSPOSITIONS",
    "JARO_WINKLER_BOOST_THRESHOLD",
    "JARO_WINKLER_PREFIX_SIZE",
    "JARO_WINKLER_SCALING_FACTOR",
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
