"""Descriptive statistics over weighted totals.

The normal CDF is built on the Abramowitz and Stegun 7.1.26 approximation of
the error function, which has a maximum absolute error of about 1.5e-7.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from ahp_engine.config import EPSILON
from ahp_engine.core import StatsRow, StatsSummary

logger = logging.getLogger(__name__)

_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911


def erf(x):
    """Error function, vectorised over numpy arrays."""
    values = np.asarray(x, dtype=float)
    sign = np.sign(values)
    magnitude = np.abs(values)
    t = 1.0 / (1.0 + _P * magnitude)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    result = sign * (1.0 - poly * np.exp(-magnitude * magnitude))
    if result.ndim == 0:
        return float(result)
    return result


def normal_cdf(z):
    values = np.asarray(z, dtype=float)
    result = 0.5 * (1.0 + erf(values / math.sqrt(2.0)))
    if np.ndim(result) == 0:
        return float(result)
    return result


def summarize(
    totals: Sequence[float],
    sample: bool = True,
    names: Sequence[str] | None = None,
    epsilon: float = EPSILON,
) -> StatsSummary:
    values = np.asarray(totals, dtype=float)
    count = values.size
    if count == 0:
        return StatsSummary(mean=0.0, standard_deviation=0.0, sample=sample, rows=[])

    mean = float(values.mean())
    denominator = max(1, count - 1) if sample else count
    variance = float(np.sum((values - mean) ** 2) / denominator)
    standard_deviation = math.sqrt(variance)

    scale = standard_deviation if standard_deviation > 0 else epsilon
    z_scores = (values - mean) / scale
    cdf = normal_cdf(z_scores)

    labels = list(names or [])
    rows = []
    for idx in range(count):
        name = labels[idx] if idx < len(labels) else f"Opt {idx + 1}"
        rows.append(
            StatsRow(
                name=name,
                value=float(values[idx]),
                z=float(z_scores[idx]),
                cdf=float(cdf[idx]),
                upper=float(1.0 - cdf[idx]),
            )
        )
    logger.debug("mean=%.6g sd=%.6g (%s)", mean, standard_deviation, "sample" if sample else "population")
    return StatsSummary(mean=mean, standard_deviation=standard_deviation, sample=sample, rows=rows)
