"""Static capability descriptors for layer types.

Network-composition code needs a few structural answers about a layer type
before any instance exists: is it the terminal output layer, is it a bias layer
that must be paired, and so on.  Those answers live in a
:class:`CapabilityDescriptor` registered once per layer *type*::

    @register_traits(is_binary=True, is_output_layer=True)
    class BinaryClassificationLayer:
        ...

    descriptor_for(BinaryClassificationLayer).is_output_layer  # True

Types that never registered a descriptor receive :data:`DEFAULT_DESCRIPTOR`,
with every flag ``False``.  Lookup is keyed on the exact type, so subclasses
do not inherit their parent's descriptor.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Callable, Dict, List, MutableMapping, TypeVar

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class CapabilityDescriptor:
    """Five independent structural flags describing a layer type."""

    is_binary: bool = False
    is_output_layer: bool = False
    is_bias_layer: bool = False
    is_recurrent_layer: bool = False
    is_connection: bool = False

    def as_dict(self) -> Dict[str, bool]:
        return asdict(self)


DEFAULT_DESCRIPTOR = CapabilityDescriptor()

FLAG_NAMES = tuple(f.name for f in fields(CapabilityDescriptor))

_REGISTRY: MutableMapping[type, CapabilityDescriptor] = {}


def register_traits(
    layer_type: T | None = None,
    *,
    descriptor: CapabilityDescriptor | None = None,
    **flags: bool,
) -> T | Callable[[T], T]:
    """Associate a :class:`CapabilityDescriptor` with ``layer_type``.

    ``register_traits`` can be used as a class decorator::

        @register_traits(is_bias_layer=True)
        class Bias:
            ...

    or directly::

        register_traits(Bias, is_bias_layer=True)

    Pass either ``descriptor`` or keyword flags, not both.  Registering a type
    again replaces its previous descriptor.
    """

    if descriptor is not None and flags:
        raise TypeError("register_traits accepts either a descriptor or flags, not both")
    unknown = set(flags) - set(FLAG_NAMES)
    if unknown:
        names = ", ".join(sorted(unknown))
        raise TypeError(f"Unknown capability flags: {names}")
    resolved = descriptor or CapabilityDescriptor(**{k: bool(v) for k, v in flags.items()})

    def _decorator(cls: T) -> T:
        if not isinstance(cls, type):
            raise TypeError("register_traits expects a class")
        _REGISTRY[cls] = resolved
        return cls

    if layer_type is not None:
        return _decorator(layer_type)
    return _decorator


def descriptor_for(layer_type: object) -> CapabilityDescriptor:
    """Return the descriptor registered for ``layer_type``.

    Instances are accepted and resolved through their type.  Unregistered
    types get :data:`DEFAULT_DESCRIPTOR`.
    """

    key = layer_type if isinstance(layer_type, type) else type(layer_type)
    return _REGISTRY.get(key, DEFAULT_DESCRIPTOR)


def has_capability(layer_type: object, flag: str) -> bool:
    """Return a single flag of the descriptor for ``layer_type``."""

    if flag not in FLAG_NAMES:
        available = ", ".join(FLAG_NAMES)
        raise KeyError(f"Unknown capability flag {flag!r}. Available flags: {available}")
    return bool(getattr(descriptor_for(layer_type), flag))


def registered_layer_types() -> List[type]:
    """Return every layer type with a registered descriptor."""

    return sorted(_REGISTRY, key=lambda cls: f"{cls.__module__}.{cls.__qualname__}")


__all__ = [
    "CapabilityDescriptor",
    "DEFAULT_DESCRIPTOR",
    "FLAG_NAMES",
    "descriptor_for",
    "has_capability",
    "register_traits",
    "registered_layer_types",
]
