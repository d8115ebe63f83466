from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

AHP_SCALE: List[float] = [1.0 / value for value in range(9, 1, -1)] + [float(value) for value in range(1, 10)]

RANDOM_INDEX: Dict[int, float] = {
    1: 0.0,
    2: 0.0,
    3: 0.58,
    4: 0.90,
    5: 1.12,
    6: 1.24,
    7: 1.32,
    8: 1.41,
    9: 1.45,
    10: 1.49,
}

CONSISTENCY_THRESHOLD = 0.1
EPSILON = 1e-12
DEFAULT_RATIO = 1.0
DEFAULT_SCORE = 1.0


@dataclass(frozen=True)
class EngineSettings:
    consistency_threshold: float = CONSISTENCY_THRESHOLD
    epsilon: float = EPSILON


DEFAULT_SETTINGS = EngineSettings()
