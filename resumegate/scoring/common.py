import math


def round_half_up(value: float) -> int:
    """Round halves towards positive infinity so 2.5 -> 3 and -2.5 -> -2."""
    return math.floor(value + 0.5)


def clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


def to_score(value: float) -> int:
    """Round ``value`` and clamp it to the 0-100 score range."""
    return int(clamp(round_half_up(value), 0, 100))


def ratio_score(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return to_score(part / whole * 100)
