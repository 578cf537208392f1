import logging
import math
from typing import Iterable, Sequence

from occupation_match.core.career_components import UNIFORM_WEIGHTS, Interests, WeightProfile
from occupation_match.core.config import settings
from occupation_match.core.errors import ComputationError
from occupation_match.explanation.trend_summary import summarise_trend
from occupation_match.matching.similarity import SimilarityPolicy, compute_similarity
from occupation_match.models.career_profile import Occupation
from occupation_match.models.results import RankedResult, RankingOutcome

"""
Ranking orchestration layer.

normalise -> score every occupation -> sort -> threshold -> summarise.
Scoring logic lives in matching.similarity.
"""

logger = logging.getLogger(__name__)

DEFAULT_CUTOFF_FRACTION = settings.THRESHOLD_CUTOFF


def score_occupations(
    user: Sequence[float],
    catalog: Iterable[Occupation],
    policy: SimilarityPolicy = SimilarityPolicy.HYBRID,
    weights: WeightProfile = UNIFORM_WEIGHTS,
) -> list[RankedResult]:
    """Score every occupation in catalog order. No sorting, no filtering."""
    return [
        RankedResult(
            name=occupation.name,
            similarity=compute_similarity(user, occupation.scores, policy, weights),
            description=occupation.description,
        )
        for occupation in catalog
    ]


def compute_threshold(
    similarities: Sequence[float],
    cutoff_fraction: float = DEFAULT_CUTOFF_FRACTION,
) -> float:
    """
    Similarity at index floor(cutoff_fraction * N) of a descending list.
    Empty list -> 0.0.
    """
    if not similarities:
        return 0.0

    index = math.floor(cutoff_fraction * len(similarities))
    index = max(0, min(index, len(similarities) - 1))
    return similarities[index]


def filter_by_threshold(results: Sequence[RankedResult], threshold: float) -> list[RankedResult]:
    return [r for r in results if r.similarity >= threshold]


def rank_occupations(
    user,
    catalog: Sequence[Occupation],
    policy: SimilarityPolicy = SimilarityPolicy.HYBRID,
    weights: WeightProfile = UNIFORM_WEIGHTS,
    cutoff_fraction: float = DEFAULT_CUTOFF_FRACTION,
) -> RankingOutcome:
    """
    Entry point for ranking.

    Rule:
    - The full list is scored and sorted before thresholding
    - Ties keep catalog order (sorted() is stable)
    - Entries at or above the cut-off similarity survive
    - Never raises: failures come back as outcome.error with empty results
    """

    try:
        if not isinstance(user, Interests):
            user = Interests(user)
        user_vector = user.as_vector()

        all_results = score_occupations(user_vector, catalog, policy, weights)
        all_results = sorted(all_results, key=lambda r: r.similarity, reverse=True)

        threshold = compute_threshold([r.similarity for r in all_results], cutoff_fraction)
        results = filter_by_threshold(all_results, threshold)

        trend = summarise_trend([r.similarity for r in results], user_vector)
    except Exception as e:
        logger.exception("Ranking failed")
        return RankingOutcome(
            trend=summarise_trend([], []),
            error=ComputationError(
                f"An error occurred while calculating recommendations: {e}"
            ),
        )

    logger.debug(
        "Ranked %d occupations, %d kept at threshold %.4f",
        len(all_results), len(results), threshold,
    )

    return RankingOutcome(
        results=results,
        all_results=all_results,
        threshold=threshold,
        trend=trend,
    )
