import math
from dataclasses import dataclass
from statistics import fmean, pstdev
from typing import Callable, Sequence

from occupation_match.core.career_components import RIASEC_CATEGORIES
from occupation_match.models.results import TrendReport

"""
Rule-based narrative for the overall match trend.

Each section is an ordered table of (predicate, template) rules.
The first rule whose predicate holds supplies the section text.
Thresholds are fixed business rules.
"""

NO_SIMILARITY_DATA_MESSAGE = (
    "No similarity data is available. "
    "Please check that the occupation data has been loaded correctly."
)
INVALID_SIMILARITY_DATA_MESSAGE = (
    "No valid similarity data is available. "
    "Please check the format of the data."
)

HEADER_TEMPLATE = (
    "The average similarity is {mean_similarity:.2f} "
    "with a standard deviation of {std_deviation:.2f}.\n"
    "Your average interest strength is {mean_user_score:.2f}."
)

# User score thresholds (0-100 scale)
FOCUSED_RANGE = 50
NARROW_FOCUS_MEAN = 30
STRONG_MEAN = 75
MODERATE_MEAN = 50
WEAK_MEAN = 25

# Similarity thresholds
HIGH_SIMILARITY = 0.8
MODERATE_SIMILARITY = 0.6
PARTIAL_SIMILARITY = 0.4

# Standard deviation cut-offs per similarity band
HIGH_BAND_SPREAD = 0.1
MODERATE_BAND_SPREAD = 0.15
PARTIAL_BAND_SPREAD = 0.2


@dataclass(frozen=True)
class TrendStats:
    mean_similarity: float
    std_deviation: float
    mean_user_score: float
    min_user_score: float
    max_user_score: float
    top_category: str

    @property
    def score_range(self) -> float:
        return self.max_user_score - self.min_user_score

    @property
    def top_score(self) -> str:
        if self.max_user_score.is_integer():
            return str(int(self.max_user_score))
        return repr(self.max_user_score)


@dataclass(frozen=True)
class NarrativeRule:
    name: str
    predicate: Callable[[TrendStats], bool]
    template: str

    def render(self, stats: TrendStats) -> str:
        return self.template.format(
            top_category=stats.top_category,
            top_score=stats.top_score,
        )


_FOCUSED_INTRO = (
    "\n\nThere is a large gap between your interest strengths. "
    "You show a particularly strong interest in \"{top_category}\" ({top_score} points). "
)

INTEREST_RULES = (
    NarrativeRule(
        "focused_narrow",
        lambda s: s.score_range > FOCUSED_RANGE and s.mean_user_score < NARROW_FOCUS_MEAN,
        _FOCUSED_INTRO
        + "Your interest in other areas appears relatively low. "
        "Careers centred on this specific area are worth considering.",
    ),
    NarrativeRule(
        "focused_broad",
        lambda s: s.score_range > FOCUSED_RANGE,
        _FOCUSED_INTRO
        + "You also have some interest in other areas, but we recommend "
        "concentrating on occupations that make use of this strong interest.",
    ),
    NarrativeRule(
        "strong",
        lambda s: s.mean_user_score > STRONG_MEAN,
        " Overall you show strong interests. "
        "You can expect to do well across a wide range of fields.",
    ),
    NarrativeRule(
        "moderate",
        lambda s: s.mean_user_score > MODERATE_MEAN,
        " You show moderate interests. Your interests are balanced, "
        "but it may help to look closely at the areas where you scored highest.",
    ),
    NarrativeRule(
        "somewhat_weak",
        lambda s: s.mean_user_score > WEAK_MEAN,
        " Your interests are somewhat weak, but any area that scores relatively "
        "higher is a good place to start exploring.",
    ),
    NarrativeRule(
        "weak",
        lambda s: True,
        " Your interests are weak overall. Exploring new fields or trying "
        "activities you have not experienced before may help.",
    ),
)

_HIGH_INTRO = "\n\nYour interest profile shows high similarity with many occupations. "
_MODERATE_INTRO = "\n\nYour interest profile shows moderate similarity with several occupations. "
_PARTIAL_INTRO = "\n\nYour interest profile is similar to only some occupations. "

SIMILARITY_RULES = (
    NarrativeRule(
        "high_consistent",
        lambda s: s.mean_similarity > HIGH_SIMILARITY and s.std_deviation < HIGH_BAND_SPREAD,
        _HIGH_INTRO
        + "The matches are consistently strong, so you can choose "
        "from a wide range of well-suited occupations.",
    ),
    NarrativeRule(
        "high_variable",
        lambda s: s.mean_similarity > HIGH_SIMILARITY,
        _HIGH_INTRO
        + "The match strength varies, so compare the top-ranked occupations carefully.",
    ),
    NarrativeRule(
        "moderate_consistent",
        lambda s: s.mean_similarity > MODERATE_SIMILARITY and s.std_deviation < MODERATE_BAND_SPREAD,
        _MODERATE_INTRO
        + "The matches are evenly spread, so occupations that suit your "
        "broader interests are worth considering.",
    ),
    NarrativeRule(
        "moderate_variable",
        lambda s: s.mean_similarity > MODERATE_SIMILARITY,
        _MODERATE_INTRO
        + "The match strength varies considerably, so focus on the occupations "
        "at the top of the list.",
    ),
    NarrativeRule(
        "partial_consistent",
        lambda s: s.mean_similarity > PARTIAL_SIMILARITY and s.std_deviation < PARTIAL_BAND_SPREAD,
        _PARTIAL_INTRO
        + "The matches are uniformly modest, so it may help to explore your "
        "interests further before narrowing down.",
    ),
    NarrativeRule(
        "partial_variable",
        lambda s: s.mean_similarity > PARTIAL_SIMILARITY,
        _PARTIAL_INTRO
        + "A few occupations stand out from the rest, so start with those.",
    ),
    NarrativeRule(
        "low",
        lambda s: True,
        "\n\nYour interest profile shows low similarity with many occupations. "
        "Consider revisiting your scores or exploring fields outside this catalog.",
    ),
)


def interest_rules() -> tuple[NarrativeRule, ...]:
    return INTEREST_RULES


def similarity_rules() -> tuple[NarrativeRule, ...]:
    return SIMILARITY_RULES


def select_rule(rules: Sequence[NarrativeRule], stats: TrendStats) -> NarrativeRule:
    for rule in rules:
        if rule.predicate(stats):
            return rule
    raise ValueError("No narrative rule matched")


def _as_score_list(user_scores) -> list[float]:
    if hasattr(user_scores, "as_vector"):
        return user_scores.as_vector()
    return [float(s) for s in user_scores]


def compute_trend_stats(similarities: Sequence[float], user_scores) -> TrendStats:
    """
    Aggregates behind the narrative.
    similarities must hold at least one finite value.
    """
    scores = _as_score_list(user_scores)
    max_score = max(scores)

    return TrendStats(
        mean_similarity=fmean(similarities),
        std_deviation=pstdev(similarities),
        mean_user_score=fmean(scores),
        min_user_score=min(scores),
        max_user_score=max_score,
        top_category=RIASEC_CATEGORIES[scores.index(max_score)],
    )


def summarise_trend(similarities: Sequence[float], user_scores) -> TrendReport:
    """
    Describe how the user's profile relates to the (filtered) results.

    Returns a TrendReport whose narrative is:
    header + interest paragraph + similarity paragraph,
    or one of the two fixed no-data messages.
    """

    if len(similarities) == 0:
        return TrendReport(narrative=NO_SIMILARITY_DATA_MESSAGE)

    valid = [
        float(s) for s in similarities
        if isinstance(s, (int, float)) and not isinstance(s, bool) and math.isfinite(s)
    ]
    if not valid:
        return TrendReport(narrative=INVALID_SIMILARITY_DATA_MESSAGE)

    stats = compute_trend_stats(valid, user_scores)

    narrative = HEADER_TEMPLATE.format(
        mean_similarity=stats.mean_similarity,
        std_deviation=stats.std_deviation,
        mean_user_score=stats.mean_user_score,
    )
    narrative += select_rule(INTEREST_RULES, stats).render(stats)
    narrative += select_rule(SIMILARITY_RULES, stats).render(stats)

    return TrendReport(
        narrative=narrative,
        mean_similarity=stats.mean_similarity,
        std_deviation=stats.std_deviation,
        mean_user_score=stats.mean_user_score,
        min_user_score=stats.min_user_score,
        max_user_score=stats.max_user_score,
    )
