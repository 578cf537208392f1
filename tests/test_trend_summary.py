"""
Unit tests for the rule-based trend narrative.
"""

import math

import pytest

from occupation_match.explanation.trend_summary import (
    INVALID_SIMILARITY_DATA_MESSAGE,
    NO_SIMILARITY_DATA_MESSAGE,
    compute_trend_stats,
    interest_rules,
    select_rule,
    similarity_rules,
    summarise_trend,
)

FLAT = [50, 50, 50, 50, 50, 50]


def test_empty_similarities_return_no_data_message():
    report = summarise_trend([], FLAT)
    assert report.narrative == NO_SIMILARITY_DATA_MESSAGE
    assert report.mean_similarity is None


def test_non_finite_similarities_return_invalid_message():
    report = summarise_trend([math.nan, math.inf], FLAT)
    assert report.narrative == INVALID_SIMILARITY_DATA_MESSAGE
    assert report.narrative != NO_SIMILARITY_DATA_MESSAGE


def test_high_similarity_aggregates():
    report = summarise_trend([0.9, 0.85, 0.88], FLAT)
    assert report.mean_similarity == pytest.approx(0.8767, abs=1e-3)
    assert report.std_deviation == pytest.approx(0.021, abs=1e-3)
    assert report.narrative.startswith(
        "The average similarity is 0.88 with a standard deviation of 0.02.\n"
        "Your average interest strength is 50.00."
    )
    assert "high similarity with many occupations" in report.narrative
    assert "consistently strong" in report.narrative


def test_non_finite_values_are_ignored():
    report = summarise_trend([0.9, math.nan], FLAT)
    assert report.mean_similarity == pytest.approx(0.9)
    assert report.std_deviation == 0.0


def test_user_score_aggregates():
    report = summarise_trend([0.5], [90, 10, 20, 30, 40, 50])
    assert report.mean_user_score == pytest.approx(40.0)
    assert report.min_user_score == 10
    assert report.max_user_score == 90


def test_focused_narrow_interest_names_top_category():
    report = summarise_trend([0.9], [90, 10, 10, 10, 10, 10])
    assert "\"realistic\" (90 points)" in report.narrative
    assert "relatively low" in report.narrative


def test_focused_broad_interest():
    report = summarise_trend([0.9], [40, 40, 40, 95, 10, 40])
    assert "\"social\" (95 points)" in report.narrative
    assert "some interest in other areas" in report.narrative


def test_top_category_is_first_maximum():
    stats = compute_trend_stats([0.5], [10, 95, 10, 95, 10, 10])
    assert stats.top_category == "investigative"


@pytest.mark.parametrize("scores, expected", [
    ([80, 80, 80, 80, 80, 80], "strong"),
    ([75, 75, 75, 75, 75, 75], "moderate"),
    ([60, 60, 60, 60, 60, 60], "moderate"),
    ([30, 30, 30, 30, 30, 30], "somewhat_weak"),
    ([25, 25, 25, 25, 25, 25], "weak"),
    ([75, 25, 50, 50, 50, 50], "somewhat_weak"),
    ([90, 10, 10, 10, 10, 10], "focused_narrow"),
    ([90, 40, 40, 40, 10, 40], "focused_broad"),
])
def test_interest_bands(scores, expected):
    stats = compute_trend_stats([0.5], scores)
    assert select_rule(interest_rules(), stats).name == expected


@pytest.mark.parametrize("similarities, expected", [
    ([0.9, 0.85, 0.88], "high_consistent"),
    ([1.0, 0.7], "high_variable"),
    ([0.8], "moderate_consistent"),
    ([0.7, 0.7], "moderate_consistent"),
    ([0.95, 0.45], "moderate_variable"),
    ([0.5], "partial_consistent"),
    ([0.8, 0.2], "partial_variable"),
    ([0.4], "low"),
    ([-0.5, 0.1], "low"),
])
def test_similarity_bands(similarities, expected):
    stats = compute_trend_stats(similarities, FLAT)
    assert select_rule(similarity_rules(), stats).name == expected


def test_rule_tables_end_with_catch_all():
    stats = compute_trend_stats([0.0], [0, 0, 0, 0, 0, 0])
    assert interest_rules()[-1].predicate(stats)
    assert similarity_rules()[-1].predicate(stats)


def test_every_similarity_rule_has_its_own_sentence():
    templates = [rule.template for rule in similarity_rules()]
    assert len(set(templates)) == len(templates)


def test_narrative_has_three_sections():
    report = summarise_trend([0.5], [90, 10, 10, 10, 10, 10])
    assert report.narrative.count("\n\n") == 2


def test_top_score_keeps_full_precision():
    stats = compute_trend_stats([0.5], [100 / 3, 0, 0, 0, 0, 0])
    assert stats.top_score == repr(100 / 3)

    report = summarise_trend([0.5], [90.5, 10, 10, 10, 10, 10])
    assert "(90.5 points)" in report.narrative
