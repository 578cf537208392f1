import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import httpx

from occupation_match.core.career_components import (
    RIASEC_CATEGORIES,
    Interests,
    WeightProfile,
    get_weight_profile,
)
from occupation_match.core.config import settings
from occupation_match.core.errors import CatalogLoadError
from occupation_match.ingestion.read_occupation_data import fetch_catalog, load_catalog_file
from occupation_match.ingestion.utils import SCORE_MAX, parse_score_input
from occupation_match.matching.engine import rank_occupations
from occupation_match.matching.similarity import SimilarityPolicy
from occupation_match.models.career_profile import Occupation
from occupation_match.models.results import RankedResult, RankingOutcome, TrendReport

logger = logging.getLogger(__name__)


def _default_input_values() -> List[str]:
    return [f"{Interests.DEFAULT_SCORE:g}" for _ in RIASEC_CATEGORIES]


@dataclass
class RecommendationSession:
    """
    All per-request state of one recommendation session.

    Holds the user's scores, the loaded catalog and the latest outcome.
    Every mutation that changes an input recomputes the ranking.
    """

    user_scores: Interests = field(default_factory=Interests)
    input_values: List[str] = field(default_factory=_default_input_values)
    catalog: List[Occupation] = field(default_factory=list)
    outcome: RankingOutcome = field(default_factory=RankingOutcome)

    policy: SimilarityPolicy = SimilarityPolicy(settings.SIMILARITY_POLICY)
    weights: WeightProfile = field(
        default_factory=lambda: get_weight_profile(settings.WEIGHT_PROFILE)
    )
    cutoff_fraction: float = settings.THRESHOLD_CUTOFF
    preview_limit: int = settings.RESULTS_PREVIEW_LIMIT
    catalog_url: str = settings.CATALOG_URL
    catalog_path: Path = settings.CATALOG_PATH

    error: Optional[str] = None
    can_retry: bool = False
    is_loading: bool = False
    show_all: bool = False
    _computation_failed: bool = field(default=False, init=False, repr=False)

    # -----------------------------
    # Inputs
    # -----------------------------

    def set_score(self, index: int, raw: str) -> None:
        """
        Update one score field from free text.

        Empty text counts as 0, numbers are clamped into 0-100 and
        non-numeric text is kept as typed without touching the score.
        """
        self.input_values[index] = raw

        value = parse_score_input(raw)
        if value is None:
            return

        self.user_scores.set_index(index, value)
        self.recompute()

    def commit_input(self, index: int) -> None:
        self.input_values[index] = f"{self.user_scores.as_vector()[index]:g}"

    # -----------------------------
    # Catalog
    # -----------------------------

    async def load_catalog(self, client: Optional[httpx.AsyncClient] = None) -> None:
        """
        Load the catalog from catalog_url, or from catalog_path when no
        URL is configured. Load failures become a retryable error state.
        """
        self.is_loading = True
        self.error = None
        self.can_retry = False
        self._computation_failed = False

        try:
            if self.catalog_url:
                self.catalog = await fetch_catalog(self.catalog_url, client=client)
            else:
                self.catalog = load_catalog_file(self.catalog_path)
        except CatalogLoadError as e:
            self._fail_load(e)
        finally:
            self.is_loading = False

        self.recompute()

    async def retry(self, client: Optional[httpx.AsyncClient] = None) -> None:
        await self.load_catalog(client=client)

    def load_catalog_from_file(self, path: Optional[Path] = None) -> None:
        self.is_loading = True
        self.error = None
        self.can_retry = False
        self._computation_failed = False

        try:
            self.catalog = load_catalog_file(path or self.catalog_path)
        except CatalogLoadError as e:
            self._fail_load(e)
        finally:
            self.is_loading = False

        self.recompute()

    def _fail_load(self, error: CatalogLoadError) -> None:
        logger.error("Error loading job scores: %s", error)
        self.catalog = []
        self.error = error.message
        self.can_retry = True

    # -----------------------------
    # Results
    # -----------------------------

    def recompute(self) -> RankingOutcome:
        self.outcome = rank_occupations(
            self.user_scores,
            self.catalog,
            policy=self.policy,
            weights=self.weights,
            cutoff_fraction=self.cutoff_fraction,
        )

        # computation errors clear on the next good run, load errors do not
        if self.outcome.error is not None:
            self.error = str(self.outcome.error)
            self._computation_failed = True
        elif self._computation_failed:
            self.error = None
            self._computation_failed = False

        return self.outcome

    @property
    def recommendations(self) -> List[RankedResult]:
        return self.outcome.results

    @property
    def trend(self) -> Optional[TrendReport]:
        return self.outcome.trend

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def toggle_show_all(self) -> bool:
        self.show_all = not self.show_all
        return self.show_all

    def visible_recommendations(self) -> List[RankedResult]:
        if self.show_all:
            return list(self.recommendations)
        return self.recommendations[:self.preview_limit]

    def has_more(self) -> bool:
        return len(self.recommendations) > self.preview_limit

    def table_rows(self) -> List[dict]:
        return [
            result.as_row(rank)
            for rank, result in enumerate(self.visible_recommendations(), start=1)
        ]

    def chart_data(self) -> List[dict]:
        return [
            {"subject": category, "score": score, "full_mark": SCORE_MAX}
            for category, score in zip(RIASEC_CATEGORIES, self.user_scores.as_vector())
        ]
