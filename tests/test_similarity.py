"""
Unit tests for the similarity policies.
"""

import itertools

import pytest

from occupation_match.core.career_components import SKEWED_WEIGHTS, WeightProfile
from occupation_match.matching.similarity import (
    SimilarityPolicy,
    compute_similarity,
    cosine_similarity,
    hybrid_similarity,
    mean_absolute_difference,
    weighted_cosine_similarity,
)

FLAT = [50, 50, 50, 50, 50, 50]
ABSENT = [None] * 6


@pytest.mark.parametrize("policy", list(SimilarityPolicy))
def test_identical_vectors_score_one(policy):
    assert compute_similarity(FLAT, FLAT, policy) == pytest.approx(1.0)


@pytest.mark.parametrize("policy", list(SimilarityPolicy))
def test_all_absent_occupation_scores_zero(policy):
    assert compute_similarity(FLAT, ABSENT, policy) == 0.0


def test_policy_accepts_string_value():
    assert compute_similarity(FLAT, FLAT, "cosine") == pytest.approx(1.0)


def test_cosine_uses_raw_scores():
    assert cosine_similarity([100, 0, 0, 0, 0, 0], [0, 100, 0, 0, 0, 0]) == 0.0
    assert cosine_similarity([10, 20, 30, 40, 50, 60], [20, 40, 60, 80, 100, 120]) == pytest.approx(1.0)


def test_cosine_masks_absent_occupation_values():
    # only index 0 is compared, so both vectors point the same way
    assert cosine_similarity([30, 90, 10, 0, 0, 5], [90, None, None, None, None, None]) == pytest.approx(1.0)


def test_cosine_zero_magnitude_returns_zero():
    assert cosine_similarity([0] * 6, [10, 20, 30, 40, 50, 60]) == 0.0


def test_weighted_cosine_on_normalised_scores():
    # normalisation makes [90,10,...] and [60,20,...] identical
    user = [90, 10, 10, 10, 10, 10]
    occupation = [60, 20, 20, 20, 20, 20]
    assert weighted_cosine_similarity(user, occupation) == pytest.approx(1.0)
    assert cosine_similarity(user, occupation) < 1.0


def test_weighted_cosine_one_zero_magnitude():
    user = [0, 0, 100, 100, 100, 100]
    occupation = [10, 20, None, None, None, None]
    assert weighted_cosine_similarity(user, occupation) == 0.0


def test_weighted_cosine_both_zero_magnitude_is_perfect_match():
    zero_weights = WeightProfile([0, 0, 0, 0, 0, 0])
    assert weighted_cosine_similarity([10, 90, 30, 40, 50, 60], [70, 20, 30, 40, 50, 60], zero_weights) == 1.0


def test_weighted_cosine_respects_weights():
    user = [100, 0, 0, 0, 0, 100]
    occupation = [100, 0, 0, 0, 0, 0]
    uniform = weighted_cosine_similarity(user, occupation)
    skewed = weighted_cosine_similarity(user, occupation, SKEWED_WEIGHTS)
    assert uniform == pytest.approx(1 / 2 ** 0.5)
    assert skewed == pytest.approx(1 / (1.2 ** 2 + 0.8 ** 2) ** 0.5)
    assert skewed != uniform


def test_mean_absolute_difference():
    assert mean_absolute_difference([90, 10, 10, 10, 10, 10], [80, 20, None, 20, 20, 20]) == pytest.approx(10.0)
    assert mean_absolute_difference(FLAT, ABSENT) is None


def test_hybrid_combines_direction_and_closeness():
    user = [90, 10, 10, 10, 10, 10]
    occupation = [80, 20, 20, 20, 20, 20]
    # cosine 1.0, mean difference 10 -> 0.7 * 1 + 0.3 * 0.9
    assert hybrid_similarity(user, occupation) == pytest.approx(0.97)


def test_hybrid_penalises_distance_for_same_shape():
    near = hybrid_similarity(FLAT, [55, 55, 55, 55, 55, 55])
    far = hybrid_similarity(FLAT, [100, 100, 100, 100, 100, 100])
    assert near > far
    assert far == pytest.approx(0.7 + 0.3 * 0.5)


def test_hybrid_is_clamped_for_out_of_scale_catalog_values():
    value = hybrid_similarity([0, 0, 0, 0, 0, 100], [1000, 0, 0, 0, 0, 0])
    assert -1.0 <= value <= 1.0


def test_results_stay_in_unit_range():
    vectors = [
        [0, 0, 0, 0, 0, 0],
        [100, 0, 0, 0, 0, 0],
        [10, 90, 30, 70, 50, 20],
        [100, 100, 100, 100, 100, 100],
    ]
    occupations = vectors + [
        [None, 40, None, 80, None, 10],
        [55, None, None, None, None, None],
    ]
    for user, occupation in itertools.product(vectors, occupations):
        for policy in SimilarityPolicy:
            value = compute_similarity(user, occupation, policy)
            assert -1.0 <= value <= 1.0
