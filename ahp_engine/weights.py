from __future__ import annotations

import logging
from typing import List

import numpy as np

from ahp_engine.pairwise import PairwiseMatrix

logger = logging.getLogger(__name__)


def _as_array(matrix: PairwiseMatrix | np.ndarray) -> np.ndarray:
    if isinstance(matrix, PairwiseMatrix):
        return matrix.to_array()
    return np.asarray(matrix, dtype=float)


def normalize_columns(matrix: PairwiseMatrix | np.ndarray) -> np.ndarray:
    """Divide every column by its sum; a zero-sum column becomes all zeros."""
    values = _as_array(matrix)
    if values.size == 0:
        return values.reshape(0, 0)
    column_sums = values.sum(axis=0)
    normalized = np.zeros_like(values, dtype=float)
    for idx in range(values.shape[1]):
        if column_sums[idx] != 0:
            normalized[:, idx] = values[:, idx] / column_sums[idx]
    return normalized


def derive_weights(matrix: PairwiseMatrix | np.ndarray) -> List[float]:
    """Approximate the priority vector by averaging the rows of the column-normalised matrix."""
    normalized = normalize_columns(matrix)
    if normalized.size == 0:
        return []
    weights = normalized.mean(axis=1)
    logger.debug("Derived weights %s", np.round(weights, 6).tolist())
    return weights.tolist()
