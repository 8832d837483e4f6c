"""L1 and L2 weight penalties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from ..core.backend import backend_for
from ..core.types import Matrix
from .base import FactorRegularizer


@dataclass(frozen=True)
class L1Regularizer(FactorRegularizer):
    """Gradient of ``factor * sum(|W|)``: ``factor * sign(W)``."""

    name: ClassVar[str] = "l1"

    def evaluate(self, weight: Matrix) -> Matrix:
        backend = backend_for(weight)
        return backend.scale(backend.transform(weight, np.sign), self.factor)


@dataclass(frozen=True)
class L2Regularizer(FactorRegularizer):
    """Gradient of ``factor / 2 * ||W||^2``: ``factor * W``."""

    name: ClassVar[str] = "l2"

    def evaluate(self, weight: Matrix) -> Matrix:
        return backend_for(weight).scale(weight, self.factor)


__all__ = ["L1Regularizer", "L2Regularizer"]
