import math

WORDS_PER_MINUTE = 265
DESCRIPTION_AMPLIFICATION = 10
MIN_WORDS = 500


def estimate_reading_time(description: str) -> int:
    """Rough read time in minutes, extrapolated from the post description."""
    words = len((description or "").split()) * DESCRIPTION_AMPLIFICATION
    return math.ceil(max(words, MIN_WORDS) / WORDS_PER_MINUTE)
