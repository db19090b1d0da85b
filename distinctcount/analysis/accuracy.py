"""Accuracy measurement for HyperLogLog estimates.

Inserts a known sequence of distinct 32-bit integers and records the
estimate at chosen cardinalities, so the observed error can be compared
with the theoretical 1.04/sqrt(m) standard error.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable

import pandas as pd

from distinctcount.sketching.encoding import encode_u32
from distinctcount.sketching.hyperloglog import HyperLogLog


@dataclass(frozen=True)
class AccuracyPoint:
    """Estimate observed at one true cardinality.

    Attributes:
        precision: Estimator precision.
        true_count: Number of distinct values inserted so far.
        estimate: HyperLogLog estimate at that point.
        relative_error: |estimate - true_count| / true_count.
        standard_error: Theoretical relative standard error.
        linear_counting: Whether the small-range correction was applied.
    """

    precision: int
    true_count: int
    estimate: float
    relative_error: float
    standard_error: float
    linear_counting: bool


def uses_linear_counting(hll: HyperLogLog) -> bool:
    """Whether hll.estimate() currently takes the linear counting branch."""
    return hll.raw_estimate() <= 2.5 * hll.num_registers and hll.zero_count > 0


def measure_accuracy(
    cardinalities: Iterable[int],
    precision: int = 14,
    start: int = 0,
) -> list[AccuracyPoint]:
    """Record estimates while inserting start, start+1, ... as u32 values.

    A single estimator is filled incrementally, so each checkpoint reuses
    the values inserted for the previous ones.

    Args:
        cardinalities: True counts at which to record a point.
        precision: Estimator precision (4-16).
        start: First integer inserted.

    Returns:
        One AccuracyPoint per cardinality, in ascending order.

    Raises:
        ValueError: If a cardinality is not positive.
    """
    checkpoints = sorted(set(cardinalities))
    if checkpoints and checkpoints[0] <= 0:
        raise ValueError(f"cardinalities must be positive, got {checkpoints[0]}")

    hll = HyperLogLog(precision=precision)
    points: list[AccuracyPoint] = []
    inserted = 0
    for target in checkpoints:
        while inserted < target:
            hll.insert(encode_u32(start + inserted))
            inserted += 1
        estimate = hll.estimate()
        points.append(AccuracyPoint(
            precision=precision,
            true_count=target,
            estimate=estimate,
            relative_error=abs(estimate - target) / target,
            standard_error=hll.standard_error(),
            linear_counting=uses_linear_counting(hll),
        ))
    return points


def accuracy_frame(points: Iterable[AccuracyPoint]) -> pd.DataFrame:
    """Tabulate accuracy points.

    Adds a `within_3_sigma` column flagging points whose relative error is
    below three theoretical standard errors.
    """
    columns = [
        "precision",
        "true_count",
        "estimate",
        "relative_error",
        "standard_error",
        "linear_counting",
    ]
    df = pd.DataFrame([asdict(p) for p in points], columns=columns)
    df["within_3_sigma"] = df["relative_error"] < 3 * df["standard_error"]
    return df
