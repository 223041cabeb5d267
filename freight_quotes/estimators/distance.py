"""
Distance Estimator

Placeholder lane distance derived from the two location strings. Not a
geographic computation: consumers only rely on the result being
non-negative, larger for more different strings, and zero when either
location is missing. Anything with the same signature can replace it.
"""

from typing import Callable

from ..data import BASE_OFFSET_KM, LENGTH_DIFF_KM, FIRST_CHAR_DIFF_KM


DistanceEstimator = Callable[[str, str], float]


def estimate_distance_km(origin: str, destination: str) -> float:
    """
    Estimate lane distance in km.

    Args:
        origin: Free-text origin (e.g., "Seattle, WA")
        destination: Free-text destination (e.g., "Taipei, TW")

    Returns:
        0 if either location is empty, otherwise
        BASE_OFFSET_KM + LENGTH_DIFF_KM * |length diff| + FIRST_CHAR_DIFF_KM * |first char diff|
    """
    if not origin or not destination:
        return 0
    length_diff = abs(len(origin) - len(destination))
    first_char_diff = abs(ord(origin[0]) - ord(destination[0]))
    return BASE_OFFSET_KM + length_diff * LENGTH_DIFF_KM + first_char_diff * FIRST_CHAR_DIFF_KM


__all__ = ["DistanceEstimator", "estimate_distance_km"]
