import math

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def clamp(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    return max(low, min(high, float(value)))


def coerce_score(value) -> float | None:
    """
    Turn a raw catalog value into a score or None (absent).

    bools are rejected even though they are ints in Python.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None

    try:
        value = float(value)
    except OverflowError:
        return None

    if math.isnan(value) or math.isinf(value):
        return None

    return value


def parse_score_input(raw: str) -> float | None:
    """
    Parse one free-text score field.

    Empty text counts as 0; anything non-numeric returns None so the
    caller can keep the previous value.
    """
    text = raw.strip()
    if text == "":
        return 0.0

    try:
        value = float(text)
    except ValueError:
        return None

    if math.isnan(value):
        return None

    return clamp(value)
