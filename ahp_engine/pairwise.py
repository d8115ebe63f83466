from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

import numpy as np

from ahp_engine.config import AHP_SCALE, DEFAULT_RATIO

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]


def coerce_ratio(value) -> float:
    """Return ``value`` as a positive finite float, or 1 for anything else."""
    try:
        ratio = float(value)
    except (TypeError, ValueError):
        logger.warning("Ratio %r is not a number, using %s", value, DEFAULT_RATIO)
        return DEFAULT_RATIO
    if not math.isfinite(ratio) or ratio <= 0:
        logger.warning("Ratio %r is not positive and finite, using %s", value, DEFAULT_RATIO)
        return DEFAULT_RATIO
    return ratio


def is_on_scale(value: float, tolerance: float = 1e-6) -> bool:
    return any(abs(value - candidate) <= tolerance for candidate in AHP_SCALE)


def nearest_scale_value(value: float) -> float:
    # Distance in log space keeps 1/9 and 9 symmetric around 1.
    ratio = coerce_ratio(value)
    return min(AHP_SCALE, key=lambda candidate: abs(math.log(candidate) - math.log(ratio)))


def parse_pair_key(key) -> Pair:
    if isinstance(key, str):
        parts = key.split("-")
        if len(parts) != 2:
            raise ValueError(f"Ratio key {key!r} must look like 'i-j'")
        try:
            return int(parts[0]), int(parts[1])
        except ValueError as exc:
            raise ValueError(f"Ratio key {key!r} must look like 'i-j'") from exc
    i, j = key
    return int(i), int(j)


class PairwiseMatrix:
    """Reciprocal judgment matrix backed by its strict upper triangle.

    ``ratio(i, j) > 1`` means criterion ``i`` (the row) is more important than
    criterion ``j`` (the column). Only pairs with ``i < j`` are stored; the
    diagonal and the lower triangle are derived on access.
    """

    def __init__(self, size: int, upper: Mapping[Pair, float] | None = None, snap: bool = False) -> None:
        if size < 0:
            raise ValueError("Matrix size must not be negative")
        self._size = size
        self._upper: Dict[Pair, float] = {pair: DEFAULT_RATIO for pair in self._pairs(size)}
        for key, value in (upper or {}).items():
            i, j = self._check_pair(*parse_pair_key(key))
            ratio = coerce_ratio(value)
            if i > j:
                i, j, ratio = j, i, 1.0 / ratio
            if snap:
                ratio = nearest_scale_value(ratio)
            elif not is_on_scale(ratio):
                logger.warning("Ratio %.6g for pair (%d, %d) is off the 1-9 scale", ratio, i, j)
            self._upper[(i, j)] = ratio

    @classmethod
    def from_array(cls, matrix: Iterable[Iterable[float]], snap: bool = False) -> "PairwiseMatrix":
        """Build from a full square matrix, keeping only its upper triangle."""
        rows = [list(row) for row in matrix]
        size = len(rows)
        for row in rows:
            if len(row) != size:
                raise ValueError("Pairwise matrix must be square")
        upper = {(i, j): rows[i][j] for i, j in cls._pairs(size)}
        return cls(size, upper, snap=snap)

    @staticmethod
    def _pairs(size: int) -> Iterator[Pair]:
        for i in range(size):
            for j in range(i + 1, size):
                yield i, j

    def _check_pair(self, i: int, j: int) -> Pair:
        if not (0 <= i < self._size and 0 <= j < self._size):
            raise IndexError(f"Pair ({i}, {j}) is outside a {self._size}x{self._size} matrix")
        if i == j:
            raise ValueError("Diagonal entries are fixed at 1")
        return i, j

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairwiseMatrix):
            return NotImplemented
        return self._size == other._size and self._upper == other._upper

    def __repr__(self) -> str:
        return f"PairwiseMatrix(size={self._size}, upper={self._upper!r})"

    def ratio(self, i: int, j: int) -> float:
        if i == j:
            if not 0 <= i < self._size:
                raise IndexError(f"Index {i} is outside a {self._size}x{self._size} matrix")
            return 1.0
        self._check_pair(i, j)
        if i < j:
            return self._upper[(i, j)]
        return 1.0 / self._upper[(j, i)]

    def upper(self) -> Dict[Pair, float]:
        return dict(self._upper)

    def with_ratio(self, i: int, j: int, value: float) -> "PairwiseMatrix":
        self._check_pair(i, j)
        upper = dict(self._upper)
        upper[(i, j)] = value
        return PairwiseMatrix(self._size, upper)

    def to_array(self) -> np.ndarray:
        matrix = np.ones((self._size, self._size), dtype=float)
        for (i, j), ratio in self._upper.items():
            matrix[i, j] = ratio
            matrix[j, i] = 1.0 / ratio
        return matrix

    def to_list(self) -> List[List[float]]:
        return self.to_array().tolist()
