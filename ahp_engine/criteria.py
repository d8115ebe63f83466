"""Index remapping for edits to the criteria and alternatives.

Criteria order defines the index space of both the stored ratios and every
score vector, so each edit here rewrites all of them at once.
"""
from __future__ import annotations

import math
from typing import Dict, List, Mapping, Sequence, Tuple

from ahp_engine.config import DEFAULT_RATIO, DEFAULT_SCORE
from ahp_engine.core import Alternative
from ahp_engine.pairwise import Pair

Ratios = Dict[Pair, float]
Edit = Tuple[Tuple[str, ...], Ratios, Tuple[Alternative, ...]]


def _check_index(index: int, size: int, what: str) -> None:
    if not 0 <= index < size:
        raise IndexError(f"{what} index {index} is out of range for {size} items")


def remove_criterion(
    criteria: Sequence[str],
    ratios: Mapping[Pair, float],
    alternatives: Sequence[Alternative],
    index: int,
) -> Edit:
    _check_index(index, len(criteria), "Criterion")
    if len(criteria) <= 1:
        raise ValueError("At least one criterion is required")

    def shift(value: int) -> int:
        return value - 1 if value > index else value

    remaining = tuple(name for pos, name in enumerate(criteria) if pos != index)
    remapped: Ratios = {}
    for (i, j), ratio in ratios.items():
        if index in (i, j):
            continue
        remapped[(shift(i), shift(j))] = ratio
    spliced = tuple(
        Alternative(alt.name, alt.scores[:index] + alt.scores[index + 1:]) for alt in alternatives
    )
    return remaining, remapped, spliced


def add_criterion(
    criteria: Sequence[str],
    ratios: Mapping[Pair, float],
    alternatives: Sequence[Alternative],
    name: str,
    default_score: float = DEFAULT_SCORE,
) -> Edit:
    new_index = len(criteria)
    extended = tuple(criteria) + (name,)
    updated: Ratios = dict(ratios)
    for i in range(new_index):
        updated[(i, new_index)] = DEFAULT_RATIO
    padded = tuple(Alternative(alt.name, alt.scores + (float(default_score),)) for alt in alternatives)
    return extended, updated, padded


def rename_criterion(criteria: Sequence[str], index: int, name: str) -> Tuple[str, ...]:
    _check_index(index, len(criteria), "Criterion")
    renamed = list(criteria)
    renamed[index] = name
    return tuple(renamed)


def add_alternative(
    alternatives: Sequence[Alternative],
    name: str,
    criteria_count: int,
    scores: Sequence[float] | None = None,
) -> Tuple[Alternative, ...]:
    values = list(scores) if scores is not None else [DEFAULT_SCORE] * criteria_count
    return tuple(alternatives) + (Alternative(name, values),)


def remove_alternative(alternatives: Sequence[Alternative], index: int) -> Tuple[Alternative, ...]:
    _check_index(index, len(alternatives), "Alternative")
    return tuple(alt for pos, alt in enumerate(alternatives) if pos != index)


def rename_alternative(alternatives: Sequence[Alternative], index: int, name: str) -> Tuple[Alternative, ...]:
    _check_index(index, len(alternatives), "Alternative")
    updated: List[Alternative] = list(alternatives)
    updated[index] = Alternative(name, updated[index].scores)
    return tuple(updated)


def set_score(
    alternatives: Sequence[Alternative],
    index: int,
    criterion: int,
    value: float,
) -> Tuple[Alternative, ...]:
    _check_index(index, len(alternatives), "Alternative")
    target = alternatives[index]
    _check_index(criterion, len(target.scores), "Criterion")
    scores = list(target.scores)
    # Non-numeric or non-finite input is stored as 0, matching an empty score cell.
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = float("nan")
    scores[criterion] = number if math.isfinite(number) else 0.0
    updated: List[Alternative] = list(alternatives)
    updated[index] = Alternative(target.name, scores)
    return tuple(updated)
