"""Core typing contracts for layerkit."""

from __future__ import annotations

from typing import Dict, Mapping, Union

import numpy as np
from scipy import sparse

Array = np.ndarray

# Any matrix a registered backend understands: a dense ndarray or a
# ``scipy.sparse`` matrix/array.
Matrix = Union[np.ndarray, sparse.spmatrix, sparse.sparray]

Gradients = Dict[str, Matrix]
Weights = Mapping[str, Matrix]


class ShapeMismatchError(ValueError):
    """Raised when operand shapes are incompatible with an operation."""


__all__ = ["Array", "Gradients", "Matrix", "ShapeMismatchError", "Weights"]
