"""
Occupation recommendations from RIASEC interest scores.
"""
from occupation_match.core.career_components import (
    RIASEC_CATEGORIES,
    SKEWED_WEIGHTS,
    UNIFORM_WEIGHTS,
    Interests,
    WeightProfile,
)
from occupation_match.core.errors import (
    CatalogDataError,
    CatalogLoadError,
    ComputationError,
    OccupationMatchError,
)
from occupation_match.core.session import RecommendationSession
from occupation_match.explanation.trend_summary import summarise_trend
from occupation_match.ingestion.read_occupation_data import fetch_catalog, load_catalog_file, parse_catalog
from occupation_match.matching.engine import rank_occupations
from occupation_match.matching.similarity import SimilarityPolicy, compute_similarity
from occupation_match.models.career_profile import Occupation
from occupation_match.models.results import RankedResult, RankingOutcome, TrendReport

__version__ = "1.0.0"
