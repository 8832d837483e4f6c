"""Binary classification output layer."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.backend import DENSE, backend_for, to_dense
from ..core.traits import register_traits
from ..core.types import Array, Matrix, ShapeMismatchError

# Decision boundary at the midpoint of the [0, 1] probability range.
DECISION_THRESHOLD = 0.5


def _threshold(values: Array) -> Array:
    return (values > DECISION_THRESHOLD).astype(values.dtype)


@register_traits(is_binary=True, is_output_layer=True)
@dataclass(frozen=True)
class BinaryClassificationLayer:
    """Output layer turning activations into a 0/1 decision.

    The layer carries no state; one instance can be shared freely.
    """

    def calculate_error(self, activations: Matrix, target: Matrix) -> Matrix:
        """Return ``activations - target`` element-wise.

        A dense operand paired with a sparse one yields a dense result.  Raises
        :class:`ShapeMismatchError` when the operand shapes differ.
        """

        backend = backend_for(activations)
        target_backend = backend_for(target)
        a_shape = backend.shape(activations)
        t_shape = target_backend.shape(target)
        if a_shape != t_shape:
            raise ShapeMismatchError(
                f"activations shape {a_shape} does not match target shape {t_shape}"
            )
        if backend is not target_backend:
            return DENSE.subtract(to_dense(activations), to_dense(target))
        return backend.subtract(activations, target)

    def output_class(self, activations: Matrix) -> Matrix:
        """Map every entry to ``1`` if it is above 0.5, else ``0``."""

        return backend_for(activations).transform(activations, _threshold)


__all__ = ["BinaryClassificationLayer", "DECISION_THRESHOLD"]
