from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ahp_engine.config import CONSISTENCY_THRESHOLD, EPSILON, RANDOM_INDEX
from ahp_engine.core import ConsistencyMetrics
from ahp_engine.pairwise import PairwiseMatrix

logger = logging.getLogger(__name__)


def random_index(size: int) -> float:
    if size <= 0:
        return 0.0
    return RANDOM_INDEX.get(size, RANDOM_INDEX[max(RANDOM_INDEX)])


def check_consistency(
    matrix: PairwiseMatrix | np.ndarray,
    weights: Sequence[float],
    threshold: float = CONSISTENCY_THRESHOLD,
    epsilon: float = EPSILON,
) -> ConsistencyMetrics:
    values = matrix.to_array() if isinstance(matrix, PairwiseMatrix) else np.asarray(matrix, dtype=float)
    size = values.shape[0] if values.ndim == 2 else 0
    if size < 3:
        return ConsistencyMetrics(lambda_max=float("nan"), ci=0.0, cr=0.0, threshold=threshold)

    weights_array = np.asarray(weights, dtype=float)
    if weights_array.shape != (size,):
        raise ValueError(f"Expected {size} weights, got {weights_array.size}")

    weighted_sum = values.dot(weights_array)
    denominators = np.where(weights_array == 0, epsilon, weights_array)
    lambda_max = float(np.mean(weighted_sum / denominators))
    ci = (lambda_max - size) / (size - 1)
    ri = random_index(size)
    cr = ci / ri if ri > 0 else 0.0

    metrics = ConsistencyMetrics(lambda_max=lambda_max, ci=ci, cr=cr, threshold=threshold)
    if not metrics.acceptable:
        logger.warning("Consistency ratio %.3f exceeds %.2f, judgments should be reviewed", cr, threshold)
    return metrics
