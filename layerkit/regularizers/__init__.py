"""Weight regularizers.

Each regularizer exposes ``evaluate(weight) -> gradient`` returning an
additive gradient term, plus ``state_dict()`` / ``from_state()`` for
persistence.
"""

from .base import STATE_VERSION, FactorRegularizer, NoRegularizer, Regularizer
from .gradients import regularize_gradients
from .lnorm import L1Regularizer, L2Regularizer
from .orthogonal import OrthogonalRegularizer
from .registry import REGISTRY, RegularizerRegistry

__all__ = [
    "FactorRegularizer",
    "L1Regularizer",
    "L2Regularizer",
    "NoRegularizer",
    "OrthogonalRegularizer",
    "REGISTRY",
    "Regularizer",
    "RegularizerRegistry",
    "STATE_VERSION",
    "regularize_gradients",
]
