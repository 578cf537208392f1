from dataclasses import dataclass, field
from typing import List, Optional

from occupation_match.core.errors import ComputationError


@dataclass(frozen=True)
class RankedResult:
    name: str
    similarity: float
    description: str = ""

    def as_row(self, rank: int) -> dict:
        """Table row: rank, name, similarity to 4 decimals, description."""
        return {
            "rank": rank,
            "name": self.name,
            "similarity": f"{self.similarity:.4f}",
            "description": self.description,
        }


@dataclass(frozen=True)
class TrendReport:
    """
    Narrative plus the aggregates it was derived from.
    Aggregates are None when there was nothing to summarise.
    """

    narrative: str
    mean_similarity: Optional[float] = None
    std_deviation: Optional[float] = None
    mean_user_score: Optional[float] = None
    min_user_score: Optional[float] = None
    max_user_score: Optional[float] = None


@dataclass
class RankingOutcome:
    results: List[RankedResult] = field(default_factory=list)
    all_results: List[RankedResult] = field(default_factory=list)
    threshold: float = 0.0
    trend: Optional[TrendReport] = None
    error: Optional[ComputationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
