from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import math
from typing import List, Sequence

from ahp_engine.config import CONSISTENCY_THRESHOLD


class DimensionMismatchError(ValueError):
    """Raised when a score vector is not aligned with the criteria."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        super().__init__(
            f"alternative {name!r} has {actual} scores but there are {expected} criteria; "
            "re-index alternatives after changing the criteria"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class ConsistencyMetrics:
    lambda_max: float
    ci: float
    cr: float
    threshold: float = CONSISTENCY_THRESHOLD

    @property
    def acceptable(self) -> bool:
        return self.cr <= self.threshold

    def to_dict(self) -> dict:
        return {
            "lambda_max": None if math.isnan(self.lambda_max) else self.lambda_max,
            "ci": self.ci,
            "cr": self.cr,
            "acceptable": self.acceptable,
        }


@dataclass(frozen=True)
class Alternative:
    name: str
    scores: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", tuple(float(value) for value in self.scores))


@dataclass(frozen=True)
class ScoredAlternative:
    alternative: Alternative
    contributions: tuple
    total: float
    position: int = 0

    @property
    def name(self) -> str:
        return self.alternative.name

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "scores": list(self.alternative.scores),
            "contributions": list(self.contributions),
            "total": self.total,
        }


@dataclass(frozen=True)
class StatsRow:
    name: str
    value: float
    z: float
    cdf: float
    upper: float


@dataclass(frozen=True)
class StatsSummary:
    mean: float
    standard_deviation: float
    sample: bool
    rows: List[StatsRow] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "mean": self.mean,
            "standard_deviation": self.standard_deviation,
            "sample": self.sample,
            "rows": [row.__dict__ for row in self.rows],
        }


@dataclass
class MethodResult:
    weights: List[float]
    consistency: ConsistencyMetrics | None = None

    @property
    def consistency_ratio(self) -> float | None:
        return self.consistency.cr if self.consistency else None


class MCDAMethod(ABC):
    id: str
    name: str

    @abstractmethod
    def compute_weights(
        self,
        criteria: Sequence[str],
        pairwise: Sequence[Sequence[float]],
    ) -> MethodResult:
        raise NotImplementedError

    @abstractmethod
    def compute_scores(
        self,
        weights: Sequence[float],
        alternatives: Sequence[Alternative],
    ) -> List[ScoredAlternative]:
        raise NotImplementedError
