"""Core primitives for layerkit."""

from . import backend, traits, types

__all__ = ["backend", "traits", "types"]
