from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Tuple

from ahp_engine import criteria as edits
from ahp_engine.core import Alternative, ConsistencyMetrics, ScoredAlternative, StatsSummary
from ahp_engine.pairwise import Pair, PairwiseMatrix, coerce_ratio, parse_pair_key


@dataclass(frozen=True)
class DecisionSnapshot:
    """Everything the engine needs for one recomputation.

    Edits return a new snapshot; the ratios and score vectors are re-indexed
    together so they never disagree with ``criteria``.
    """

    criteria: Tuple[str, ...] = ()
    ratios: Dict[Pair, float] = field(default_factory=dict)
    alternatives: Tuple[Alternative, ...] = ()
    sample: bool = True

    def __post_init__(self) -> None:
        names = tuple(str(name) for name in self.criteria)
        if any(not name.strip() for name in names):
            raise ValueError("Criterion names must not be blank")
        if len(set(names)) != len(names):
            raise ValueError(f"Criterion names must be unique: {list(names)}")
        ratios: Dict[Pair, float] = {}
        for key, value in dict(self.ratios).items():
            i, j = parse_pair_key(key)
            if i == j:
                raise ValueError(f"Ratio key ({i}, {j}) is on the diagonal")
            if not (0 <= i < len(names) and 0 <= j < len(names)):
                raise IndexError(f"Ratio key ({i}, {j}) is outside {len(names)} criteria")
            ratio = coerce_ratio(value)
            if i > j:
                i, j, ratio = j, i, 1.0 / ratio
            ratios[(i, j)] = ratio
        object.__setattr__(self, "criteria", names)
        object.__setattr__(self, "ratios", ratios)
        object.__setattr__(self, "alternatives", tuple(self.alternatives))

    def __hash__(self) -> int:
        return hash((self.criteria, tuple(sorted(self.ratios.items())), self.alternatives, self.sample))

    @property
    def matrix(self) -> PairwiseMatrix:
        return PairwiseMatrix(len(self.criteria), self.ratios)

    def set_ratio(self, i: int, j: int, value: float) -> "DecisionSnapshot":
        ratios = dict(self.ratios)
        ratios.pop((j, i), None)
        ratios[(i, j)] = value
        return replace(self, ratios=ratios)

    def add_criterion(self, name: str) -> "DecisionSnapshot":
        names, ratios, alternatives = edits.add_criterion(self.criteria, self.ratios, self.alternatives, name)
        return replace(self, criteria=names, ratios=ratios, alternatives=alternatives)

    def remove_criterion(self, index: int) -> "DecisionSnapshot":
        names, ratios, alternatives = edits.remove_criterion(self.criteria, self.ratios, self.alternatives, index)
        return replace(self, criteria=names, ratios=ratios, alternatives=alternatives)

    def rename_criterion(self, index: int, name: str) -> "DecisionSnapshot":
        return replace(self, criteria=edits.rename_criterion(self.criteria, index, name))

    def add_alternative(self, name: str, scores: List[float] | None = None) -> "DecisionSnapshot":
        return replace(
            self,
            alternatives=edits.add_alternative(self.alternatives, name, len(self.criteria), scores),
        )

    def remove_alternative(self, index: int) -> "DecisionSnapshot":
        return replace(self, alternatives=edits.remove_alternative(self.alternatives, index))

    def rename_alternative(self, index: int, name: str) -> "DecisionSnapshot":
        return replace(self, alternatives=edits.rename_alternative(self.alternatives, index, name))

    def set_score(self, index: int, criterion: int, value: float) -> "DecisionSnapshot":
        return replace(self, alternatives=edits.set_score(self.alternatives, index, criterion, value))

    def with_sample(self, sample: bool) -> "DecisionSnapshot":
        return replace(self, sample=bool(sample))

    def to_dict(self) -> dict:
        return {
            "criteria": list(self.criteria),
            "ratios": {f"{i}-{j}": ratio for (i, j), ratio in sorted(self.ratios.items())},
            "alternatives": [
                {"name": alt.name, "scores": list(alt.scores)} for alt in self.alternatives
            ],
            "sample": self.sample,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DecisionSnapshot":
        raw_ratios = data.get("ratios", {})
        if isinstance(raw_ratios, dict):
            ratios = {parse_pair_key(key): value for key, value in raw_ratios.items()}
        else:
            ratios = {(int(i), int(j)): value for i, j, value in raw_ratios}
        alternatives = tuple(
            Alternative(item.get("name", f"Option {idx + 1}"), item.get("scores", []))
            for idx, item in enumerate(data.get("alternatives", []))
        )
        return cls(
            criteria=tuple(data.get("criteria", [])),
            ratios=ratios,
            alternatives=alternatives,
            sample=bool(data.get("sample", True)),
        )


@dataclass(frozen=True)
class DecisionResult:
    criteria: Tuple[str, ...]
    weights: List[float]
    normalized: List[List[float]]
    consistency: ConsistencyMetrics
    scored: List[ScoredAlternative]
    ranking: List[ScoredAlternative]
    stats: StatsSummary
    interpretations: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "criteria": list(self.criteria),
            "weights": list(self.weights),
            "normalized": [list(row) for row in self.normalized],
            "consistency": self.consistency.to_dict(),
            "scored": [item.to_dict() for item in self.scored],
            "ranking": [item.to_dict() for item in self.ranking],
            "stats": self.stats.to_dict(),
            "interpretations": dict(self.interpretations),
        }
