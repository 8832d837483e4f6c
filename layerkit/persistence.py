"""Save and restore regularizer configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

import numpy as np

from .regularizers.base import Regularizer
from .regularizers.registry import REGISTRY


def save_regularizer(path: str | Path, regularizer: Regularizer) -> Path:
    """Write ``regularizer.state_dict()`` to ``path`` (``.npz`` or ``.json``)."""

    path = Path(path)
    state = regularizer.state_dict()
    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()
    if suffix == ".json":
        path.write_text(json.dumps(state, indent=2, sort_keys=True))
    elif suffix == ".npz":
        payload = {
            "name": np.array(str(state["name"])),
            "version": np.array(int(state["version"]), dtype=np.int64),  # type: ignore[arg-type]
        }
        if "factor" in state:
            payload["factor"] = np.array(state["factor"], dtype=np.float64)
        with path.open("wb") as handle:
            np.savez_compressed(handle, **payload)
    else:
        raise ValueError(f"Unsupported regularizer file type: {path.suffix}")
    return path


def load_regularizer(path: str | Path) -> Regularizer:
    """Restore a regularizer written by :func:`save_regularizer`."""

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        state = json.loads(path.read_text())
        if not isinstance(state, dict):
            raise TypeError(f"Regularizer file {path.name} must decode to a mapping")
    elif suffix == ".npz":
        state = _read_npz(path)
    else:
        raise ValueError(f"Unsupported regularizer file type: {path.suffix}")
    return REGISTRY.from_state(state)


def _read_npz(path: Path) -> Dict[str, object]:
    with np.load(path, allow_pickle=False) as data:
        state: Dict[str, object] = {
            "name": str(data["name"]),
            "version": int(data["version"]),
        }
        if "factor" in data.files:
            state["factor"] = float(data["factor"])
    return state


__all__ = ["load_regularizer", "save_regularizer"]
