from enum import Enum
from math import sqrt
from typing import Optional, Sequence

from occupation_match.core.career_components import UNIFORM_WEIGHTS, WeightProfile
from occupation_match.core.standardisation import normalize_scores

"""
Similarity policies between a user vector and one occupation vector.

All functions are pure. Only indices where the occupation value is
present take part in a comparison; absent values are never read as 0.
"""

COSINE_SHARE = 0.7
DIFFERENCE_SHARE = 0.3

# Raw scores live on a 0-100 scale
SCORE_SCALE = 100.0


class SimilarityPolicy(str, Enum):
    COSINE = "cosine"
    WEIGHTED_COSINE = "weighted_cosine"
    HYBRID = "hybrid"


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def _valid_indices(occupation: Sequence[Optional[float]]) -> list[int]:
    return [i for i, value in enumerate(occupation) if value is not None]


def cosine_similarity(
    user: Sequence[float],
    occupation: Sequence[Optional[float]],
) -> float:
    """
    Plain cosine on raw scores.

    Rule:
    - Only indices where the occupation is present
    - Zero magnitude on either side -> 0.0
    """

    indices = _valid_indices(occupation)

    dot = sum(user[i] * occupation[i] for i in indices)
    norm_user = sqrt(sum(user[i] * user[i] for i in indices))
    norm_occupation = sqrt(sum(occupation[i] * occupation[i] for i in indices))

    if norm_user == 0 or norm_occupation == 0:
        return 0.0

    return _clamp_unit(dot / (norm_user * norm_occupation))


def weighted_cosine_similarity(
    user: Sequence[float],
    occupation: Sequence[Optional[float]],
    weights: WeightProfile = UNIFORM_WEIGHTS,
) -> float:
    """
    Cosine on min-max normalised scores with per-category weights.

    Rule:
    - Dot product terms are scaled by w, magnitude terms by w squared
    - No valid index -> 0.0
    - Both magnitudes zero -> 1.0 (two flat vectors agree)
    - Exactly one magnitude zero -> 0.0
    """

    indices = _valid_indices(occupation)
    if not indices:
        return 0.0

    norm_user_scores = normalize_scores(user)
    norm_occupation_scores = normalize_scores(occupation)

    dot = 0.0
    sum_user = 0.0
    sum_occupation = 0.0

    for i in indices:
        a = norm_user_scores[i]
        b = norm_occupation_scores[i]
        w = weights[i]

        dot += a * b * w
        sum_user += a * a * w * w
        sum_occupation += b * b * w * w

    magnitude_user = sqrt(sum_user)
    magnitude_occupation = sqrt(sum_occupation)

    if magnitude_user == 0 and magnitude_occupation == 0:
        return 1.0
    if magnitude_user == 0 or magnitude_occupation == 0:
        return 0.0

    return _clamp_unit(dot / (magnitude_user * magnitude_occupation))


def mean_absolute_difference(
    user: Sequence[float],
    occupation: Sequence[Optional[float]],
) -> Optional[float]:
    """Mean |user - occupation| over present occupation values, None if there are none."""
    indices = _valid_indices(occupation)
    if not indices:
        return None

    return sum(abs(user[i] - occupation[i]) for i in indices) / len(indices)


def hybrid_similarity(
    user: Sequence[float],
    occupation: Sequence[Optional[float]],
    weights: WeightProfile = UNIFORM_WEIGHTS,
) -> float:
    """
    Direction plus closeness.

    0.7 * weighted cosine (normalised scores)
    + 0.3 * (1 - mean absolute difference / 100) (raw 0-100 scores)

    The difference term always reads raw scores, so dividing by the
    0-100 scale keeps it in [0, 1] for in-range catalogs.
    """

    difference = mean_absolute_difference(user, occupation)
    if difference is None:
        return 0.0

    direction = weighted_cosine_similarity(user, occupation, weights)
    closeness = 1.0 - difference / SCORE_SCALE

    return _clamp_unit(COSINE_SHARE * direction + DIFFERENCE_SHARE * closeness)


def compute_similarity(
    user: Sequence[float],
    occupation: Sequence[Optional[float]],
    policy: SimilarityPolicy = SimilarityPolicy.HYBRID,
    weights: WeightProfile = UNIFORM_WEIGHTS,
) -> float:
    policy = SimilarityPolicy(policy)

    if policy == SimilarityPolicy.COSINE:
        return cosine_similarity(user, occupation)
    elif policy == SimilarityPolicy.WEIGHTED_COSINE:
        return weighted_cosine_similarity(user, occupation, weights)
    else:
        return hybrid_similarity(user, occupation, weights)
