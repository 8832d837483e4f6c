"""Name-based registry for weight regularizers."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping

from .base import NoRegularizer, Regularizer
from .lnorm import L1Regularizer, L2Regularizer
from .orthogonal import OrthogonalRegularizer

RegularizerFactory = Callable[..., Regularizer]


class RegularizerRegistry:
    """Central registry mapping names to regularizer classes."""

    def __init__(self) -> None:
        self._registry: Dict[str, RegularizerFactory] = {}

    def register(self, name: str, factory: RegularizerFactory) -> None:
        self._registry[name] = factory

    def get(self, name: str) -> RegularizerFactory:
        try:
            return self._registry[name]
        except KeyError as exc:
            available = ", ".join(self.names())
            raise KeyError(
                f"Unknown regularizer {name!r}. Available regularizers: {available}"
            ) from exc

    def names(self) -> Iterable[str]:
        return sorted(self._registry)

    def create(self, name: str, **kwargs: Any) -> Regularizer:
        return self.get(name)(**kwargs)

    def from_state(self, state: Mapping[str, object]) -> Regularizer:
        """Restore a regularizer from :meth:`Regularizer.state_dict` output."""

        if "name" not in state:
            raise KeyError("Regularizer state is missing 'name'")
        factory = self.get(str(state["name"]))
        return factory.from_state(state)  # type: ignore[attr-defined]


REGISTRY = RegularizerRegistry()

REGISTRY.register("orthogonal", OrthogonalRegularizer)
REGISTRY.register("l1", L1Regularizer)
REGISTRY.register("l2", L2Regularizer)
REGISTRY.register("none", NoRegularizer)

__all__ = ["REGISTRY", "RegularizerFactory", "RegularizerRegistry"]
