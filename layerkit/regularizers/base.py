"""Shared contract and persistence hook for weight regularizers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Mapping, Protocol

from ..core.backend import backend_for
from ..core.types import Matrix

STATE_VERSION = 1


class Regularizer(Protocol):
    """Protocol implemented by weight regularizers."""

    name: ClassVar[str]

    def evaluate(self, weight: Matrix) -> Matrix:
        """Return the additive gradient term for ``weight``."""

    def state_dict(self) -> Dict[str, object]:
        """Return the persisted configuration."""


def _check_state(state: Mapping[str, object], name: str) -> None:
    stored = state.get("name", name)
    if stored != name:
        raise ValueError(f"Cannot restore {name!r} regularizer from {stored!r} state")
    version = int(state.get("version", STATE_VERSION))  # type: ignore[arg-type]
    if version > STATE_VERSION:
        raise ValueError(
            f"Unsupported regularizer state version {version} (max {STATE_VERSION})"
        )


@dataclass(frozen=True)
class FactorRegularizer:
    """Base for regularizers parameterised by a single strength ``factor``.

    ``factor`` is fixed at construction.  Zero disables the penalty, negative
    values reverse it; both are allowed.
    """

    name: ClassVar[str] = "factor"

    factor: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "factor", float(self.factor))

    def evaluate(self, weight: Matrix) -> Matrix:  # pragma: no cover - abstract
        raise NotImplementedError

    def state_dict(self) -> Dict[str, object]:
        return {"name": self.name, "version": STATE_VERSION, "factor": self.factor}

    @classmethod
    def from_state(cls, state: Mapping[str, object]) -> "FactorRegularizer":
        _check_state(state, cls.name)
        if "factor" not in state:
            raise KeyError(f"Missing 'factor' in {cls.name!r} regularizer state")
        return cls(factor=float(state["factor"]))  # type: ignore[arg-type]


@dataclass(frozen=True)
class NoRegularizer:
    """Regularizer that contributes nothing to the gradient."""

    name: ClassVar[str] = "none"

    def evaluate(self, weight: Matrix) -> Matrix:
        return backend_for(weight).zeros_like(weight)

    def state_dict(self) -> Dict[str, object]:
        return {"name": self.name, "version": STATE_VERSION}

    @classmethod
    def from_state(cls, state: Mapping[str, object]) -> "NoRegularizer":
        _check_state(state, cls.name)
        return cls()


__all__ = ["FactorRegularizer", "NoRegularizer", "Regularizer", "STATE_VERSION"]
