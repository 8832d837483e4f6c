"""Layer implementations."""

from .binary_classification import DECISION_THRESHOLD, BinaryClassificationLayer

__all__ = ["BinaryClassificationLayer", "DECISION_THRESHOLD"]
