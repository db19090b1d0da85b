"""Accuracy analysis for cardinality estimates."""

from distinctcount.analysis.accuracy import (
    AccuracyPoint,
    accuracy_frame,
    measure_accuracy,
    uses_linear_counting,
)

__all__ = [
    "AccuracyPoint",
    "accuracy_frame",
    "measure_accuracy",
    "uses_linear_counting",
]
