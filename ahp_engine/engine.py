from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence

from ahp_engine.config import DEFAULT_SETTINGS, EngineSettings
from ahp_engine.core import ConsistencyMetrics, DimensionMismatchError, ScoredAlternative, StatsSummary
from ahp_engine.methods.ahp import AHPMethod
from ahp_engine.models import DecisionResult, DecisionSnapshot
from ahp_engine.scoring import rank, score_alternatives
from ahp_engine.statistics import summarize
from ahp_engine.weights import normalize_columns

logger = logging.getLogger(__name__)


def round_value(value: float, digits: int = 3) -> float:
    if value is None or not math.isfinite(value):
        return float("nan")
    return round(value, digits)


def recompute(snapshot: DecisionSnapshot, settings: EngineSettings | None = None) -> DecisionResult:
    """Run the whole pipeline on one snapshot: weights, consistency, ranking, statistics."""
    settings = settings or DEFAULT_SETTINGS
    size = len(snapshot.criteria)
    for alternative in snapshot.alternatives:
        if len(alternative.scores) != size:
            raise DimensionMismatchError(alternative.name, size, len(alternative.scores))

    method = AHPMethod(threshold=settings.consistency_threshold, epsilon=settings.epsilon)
    matrix = snapshot.matrix
    result = method.compute_weights(snapshot.criteria, matrix)
    consistency = result.consistency or ConsistencyMetrics(
        lambda_max=float("nan"), ci=0.0, cr=0.0, threshold=settings.consistency_threshold
    )

    scored = score_alternatives(snapshot.alternatives, result.weights)
    ranking = rank(scored)
    stats = summarize(
        [item.total for item in scored],
        sample=snapshot.sample,
        names=[item.name for item in scored],
        epsilon=settings.epsilon,
    )
    logger.debug(
        "Recomputed %d criteria and %d alternatives (CR=%.4f)",
        size,
        len(scored),
        consistency.cr,
    )
    return DecisionResult(
        criteria=snapshot.criteria,
        weights=result.weights,
        normalized=normalize_columns(matrix).tolist(),
        consistency=consistency,
        scored=scored,
        ranking=ranking,
        stats=stats,
        interpretations=interpret(snapshot.criteria, result.weights, consistency, ranking, stats),
    )


def interpret(
    criteria: Sequence[str],
    weights: List[float],
    consistency: ConsistencyMetrics,
    ranking: List[ScoredAlternative],
    stats: StatsSummary,
) -> Dict[str, str]:
    texts: Dict[str, str] = {}
    if weights:
        top = max(range(len(weights)), key=lambda idx: (weights[idx], -idx))
        verdict = (
            "is acceptable; the pairwise judgments are reasonably consistent."
            if consistency.acceptable
            else "is high; revisit the pairwise judgments (if A > B and B > C, make sure A > C)."
        )
        texts["criteria"] = (
            f"Most important criterion: {criteria[top]} with weight {round_value(weights[top])}. "
            f"CR {round_value(consistency.cr)} {verdict}"
        )

    if ranking:
        best = ranking[0]
        text = f"Best option: {best.name} with total {round_value(best.total)}."
        if len(ranking) > 1:
            runner_up = ranking[1]
            spread = best.total - runner_up.total
            text += (
                f" Next best is {runner_up.name} at {round_value(runner_up.total)},"
                f" a spread of {round_value(spread)}."
            )
        texts["ranking"] = text

    if stats.rows:
        standout = max(stats.rows, key=lambda row: row.z)
        if standout.z >= 2:
            reading = "roughly the top 2.5% under normality."
        elif standout.z >= 1:
            reading = "above average but not an outlier."
        else:
            reading = "not exceptional compared to the other options."
        texts["statistics"] = (
            f"Highest standardized score: {standout.name} with z = {round_value(standout.z)} "
            f"(Phi = {round_value(standout.cdf, 4)}), {reading}"
        )
    return texts
