"""
Constants for Jaro and Jaro-Winkler similarity scoring.

These are fixed design parameters of the formulas. They are exposed so callers
and tests can refer to them by name, but the scorers never read them from
configuration.
"""

# Jaro sub-weights: matches in a, matches in b, transposition term
JARO_WEIGHT_STRING_A = 1.0 / 3.0
JARO_WEIGHT_STRING_B = 1.0 / 3.0
JARO_WEIGHT_TRANSPOSITIONS = 1.0 / 3.0

# Winkler prefix boost
JARO_WINKLER_PREFIX_SIZE = 4
JARO_WINKLER_SCALING_FACTOR = 0.1
JARO_WINKLER_BOOST_THRESHOLD = 0.7

__all__ = [
    "JARO_WEIGHT_STRING_A",
    "JARO_WEIGHT_STRING_B",
    "JARO_WEIGHT_TRANSPOSITIONS",
    "JARO_WINKLER_BOOST_THRESHOLD",
    "JARO_WINKLER_PREFIX_SIZE",
    "JARO_WINKLER_SCALING_FACTOR",
]
