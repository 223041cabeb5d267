"""
Distance Heuristic Configuration

Stand-in lane distance until a geocoding service is wired in:
BASE_OFFSET_KM + LENGTH_DIFF_KM * |len diff| + FIRST_CHAR_DIFF_KM * |first char diff|
"""

BASE_OFFSET_KM = 800
LENGTH_DIFF_KM = 120          # Per character of length difference
FIRST_CHAR_DIFF_KM = 5        # Per code point between first characters
