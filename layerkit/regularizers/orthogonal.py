"""Orthogonality penalty for weight matrices.

Multiplying by an orthogonal matrix leaves vector norms unchanged, which makes
orthogonality a useful structural prior for weights (Brock et al., "Neural
Photo Editing with Introspective Adversarial Networks", ICLR 2017).  The
penalty ``||W W^T - I||^2`` has gradient proportional to ``(W W^T - I) W``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.backend import backend_for
from ..core.types import Matrix, ShapeMismatchError
from .base import FactorRegularizer


@dataclass(frozen=True)
class OrthogonalRegularizer(FactorRegularizer):
    """Push ``W`` towards ``W W^T = I``."""

    name: ClassVar[str] = "orthogonal"

    def evaluate(self, weight: Matrix) -> Matrix:
        """Return ``factor * 2 * (W W^T - I_n) W`` for an ``n x m`` weight.

        The result is zero exactly when the rows of ``W`` are orthonormal.
        """

        backend = backend_for(weight)
        shape = backend.shape(weight)
        if len(shape) != 2:
            raise ShapeMismatchError(f"weight must be a 2-D matrix, got shape {shape}")
        gram = backend.matmul(weight, backend.transpose(weight))
        deviation = backend.subtract(gram, backend.identity(shape[0], like=weight))
        return backend.scale(backend.matmul(deviation, weight), 2.0 * self.factor)


__all__ = ["OrthogonalRegularizer"]
