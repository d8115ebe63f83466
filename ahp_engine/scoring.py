from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ahp_engine.core import Alternative, DimensionMismatchError, ScoredAlternative


def score_alternative(alternative: Alternative, weights: Sequence[float], position: int = 0) -> ScoredAlternative:
    if len(alternative.scores) != len(weights):
        raise DimensionMismatchError(alternative.name, len(weights), len(alternative.scores))
    contributions = np.asarray(alternative.scores, dtype=float) * np.asarray(weights, dtype=float)
    return ScoredAlternative(
        alternative=alternative,
        contributions=tuple(contributions.tolist()),
        total=float(contributions.sum()),
        position=position,
    )


def score_alternatives(alternatives: Sequence[Alternative], weights: Sequence[float]) -> List[ScoredAlternative]:
    return [
        score_alternative(alternative, weights, position=index)
        for index, alternative in enumerate(alternatives)
    ]


def rank(scored: Sequence[ScoredAlternative]) -> List[ScoredAlternative]:
    # sorted() is stable, so equal totals keep their input order.
    return sorted(scored, key=lambda item: item.total, reverse=True)
