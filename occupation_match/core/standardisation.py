from typing import Optional, Sequence


def normalize_scores(scores: Sequence[Optional[float]]) -> list[float]:
    """
    Min-max rescale a score vector into [0, 1].

    Rules:
    - min and max come from present (non-None) entries only
    - all present values equal (or a single one) -> every entry is 1.0
    - absent entries map to 0.0 after rescaling
    - nothing present -> every entry is 0.0
    """
    present = [s for s in scores if s is not None]

    if not present:
        return [0.0 for _ in scores]

    low = min(present)
    high = max(present)

    if low == high:
        return [1.0 for _ in scores]

    span = high - low
    return [0.0 if s is None else (s - low) / span for s in scores]
