import logging
from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, field_validator

from occupation_match.core.career_components import RIASEC_CATEGORIES
from occupation_match.ingestion.utils import coerce_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Occupation:
    """
    One catalog entry. Scores follow RIASEC_CATEGORIES order;
    None means the category was not measured for this occupation.
    No logic. No scoring.
    """

    name: str
    scores: tuple[Optional[float], ...]
    description: str = ""


class OccupationRecord(BaseModel):
    """Raw catalog entry as it arrives in the JSON payload"""
    name: str
    scores: List[Optional[float]]
    description: str = ""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("occupation name must not be blank")
        return value

    @field_validator("description", mode="before")
    @classmethod
    def description_or_empty(cls, value):
        return "" if value is None else str(value)

    @field_validator("scores", mode="before")
    @classmethod
    def coerce_scores(cls, value):
        if not isinstance(value, (list, tuple)):
            raise ValueError("scores must be a list")

        expected = len(RIASEC_CATEGORIES)
        if len(value) > expected:
            logger.warning("Dropping %d extra score values", len(value) - expected)

        scores = [coerce_score(v) for v in list(value)[:expected]]
        scores += [None] * (expected - len(scores))
        return scores

    def to_occupation(self) -> Occupation:
        return Occupation(
            name=self.name,
            scores=tuple(self.scores),
            description=self.description,
        )
