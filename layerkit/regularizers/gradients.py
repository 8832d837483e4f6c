"""Fold regularizer terms into a gradient mapping."""

from __future__ import annotations

from scipy import sparse

from ..core.backend import as_csr, to_dense
from ..core.types import Gradients, ShapeMismatchError, Weights
from .base import Regularizer


def regularize_gradients(
    weights: Weights, grads: Gradients, regularizer: Regularizer
) -> Gradients:
    """Return ``grads`` with ``regularizer.evaluate(W)`` added per weight.

    Keys follow the ``"W{idx}"`` convention of the weight mapping.  Weights
    without a gradient entry receive the regularizer term alone; gradient
    entries without a matching weight pass through unchanged.
    """

    out: Gradients = dict(grads)
    for key, weight in weights.items():
        term = regularizer.evaluate(weight)
        grad = out.get(key)
        if grad is None:
            out[key] = term
            continue
        if tuple(grad.shape) != tuple(term.shape):
            raise ShapeMismatchError(
                f"gradient {key} has shape {tuple(grad.shape)}, weight has {tuple(term.shape)}"
            )
        out[key] = _add(grad, term)
    return out


def _add(grad, term):
    if sparse.issparse(grad) and sparse.issparse(term):
        return as_csr(grad + term, like=grad)
    return to_dense(grad) + to_dense(term)


__all__ = ["regularize_gradients"]
