from __future__ import annotations

from typing import List, Sequence

from ahp_engine.config import CONSISTENCY_THRESHOLD, EPSILON
from ahp_engine.consistency import check_consistency
from ahp_engine.core import Alternative, MCDAMethod, MethodResult, ScoredAlternative
from ahp_engine.pairwise import PairwiseMatrix
from ahp_engine.scoring import rank, score_alternatives
from ahp_engine.weights import derive_weights


class AHPMethod(MCDAMethod):
    id = "ahp"
    name = "Analytic Hierarchy Process"

    def __init__(self, threshold: float = CONSISTENCY_THRESHOLD, epsilon: float = EPSILON) -> None:
        self.threshold = threshold
        self.epsilon = epsilon

    def compute_weights(
        self,
        criteria: Sequence[str],
        pairwise: PairwiseMatrix | Sequence[Sequence[float]],
    ) -> MethodResult:
        if len(criteria) == 0:
            return MethodResult(weights=[], consistency=None)

        matrix = pairwise if isinstance(pairwise, PairwiseMatrix) else PairwiseMatrix.from_array(pairwise)
        if matrix.size != len(criteria):
            raise ValueError(f"Pairwise matrix is {matrix.size}x{matrix.size} but there are {len(criteria)} criteria")

        weights = derive_weights(matrix)
        metrics = check_consistency(matrix, weights, threshold=self.threshold, epsilon=self.epsilon)
        return MethodResult(weights=weights, consistency=metrics)

    def compute_scores(
        self,
        weights: Sequence[float],
        alternatives: Sequence[Alternative],
    ) -> List[ScoredAlternative]:
        if not alternatives:
            return []
        return rank(score_alternatives(alternatives, weights))
