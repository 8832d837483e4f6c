"""layerkit public API."""

from .config import build_regularizer, load_config
from .core import backend, traits, types  # noqa: F401
from .core.traits import (
    DEFAULT_DESCRIPTOR,
    CapabilityDescriptor,
    descriptor_for,
    has_capability,
    register_traits,
)
from .core.types import ShapeMismatchError
from .layers import BinaryClassificationLayer
from .persistence import load_regularizer, save_regularizer
from .regularizers import (
    REGISTRY,
    L1Regularizer,
    L2Regularizer,
    NoRegularizer,
    OrthogonalRegularizer,
    regularize_gradients,
)

__all__ = [
    "BinaryClassificationLayer",
    "CapabilityDescriptor",
    "DEFAULT_DESCRIPTOR",
    "L1Regularizer",
    "L2Regularizer",
    "NoRegularizer",
    "OrthogonalRegularizer",
    "REGISTRY",
    "ShapeMismatchError",
    "backend",
    "build_regularizer",
    "descriptor_for",
    "has_capability",
    "load_config",
    "load_regularizer",
    "register_traits",
    "regularize_gradients",
    "save_regularizer",
    "traits",
    "types",
]
