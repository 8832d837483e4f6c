"""Configuration loading for regularizers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from .regularizers.base import NoRegularizer, Regularizer
from .regularizers.registry import REGISTRY


def load_config(path: str | Path) -> Mapping[str, object]:
    """Read a JSON or YAML config file into a mapping."""

    path = Path(path)
    text = path.read_text()
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to load YAML configs") from exc
        data = yaml.safe_load(text) or {}
    elif suffix == ".json":
        data = json.loads(text or "{}")
    else:
        raise ValueError(f"Unsupported config file type: {path.suffix}")

    if not isinstance(data, Mapping):
        raise TypeError(f"Config {path.name} must decode to a mapping")
    return data


def build_regularizer(config: Mapping[str, object] | str | None) -> Regularizer:
    """Build a regularizer from ``config``.

    ``config`` may be a registered name (``"orthogonal"``), a mapping such as
    ``{"name": "orthogonal", "factor": 2.5}``, or a full config holding that
    mapping under a ``"regularizer"`` key.  ``None`` yields
    :class:`NoRegularizer`.
    """

    if config is None:
        return NoRegularizer()
    if isinstance(config, str):
        return REGISTRY.create(config)
    if "regularizer" in config:
        section = config["regularizer"]
        if section is None or isinstance(section, str):
            return build_regularizer(section)
        if not isinstance(section, Mapping):
            raise TypeError("Config 'regularizer' section must be a mapping or a name")
        config = section
    options = dict(config)
    if "name" not in options:
        raise KeyError("Regularizer config requires a 'name'")
    name = str(options.pop("name"))
    return REGISTRY.create(name, **options)


__all__ = ["build_regularizer", "load_config"]
