import json

import pytest

from layerkit.config import build_regularizer, load_config
from layerkit.regularizers import L2Regularizer, NoRegularizer, OrthogonalRegularizer


def test_build_from_name_mapping_and_section():
    assert build_regularizer("orthogonal") == OrthogonalRegularizer(1.0)
    assert build_regularizer({"name": "l2", "factor": 0.01}) == L2Regularizer(0.01)
    full = {"model": {"hidden": [4]}, "regularizer": {"name": "orthogonal", "factor": 2.5}}
    assert build_regularizer(full) == OrthogonalRegularizer(2.5)
    assert build_regularizer(None) == NoRegularizer()
    assert build_regularizer({"regularizer": None}) == NoRegularizer()


def test_build_requires_name():
    with pytest.raises(KeyError):
        build_regularizer({"factor": 1.0})
    with pytest.raises(KeyError):
        build_regularizer({"name": "spectral"})


def test_load_json_and_yaml(tmp_path):
    json_path = tmp_path / "run.json"
    json_path.write_text(json.dumps({"regularizer": {"name": "orthogonal", "factor": 0.5}}))
    assert build_regularizer(load_config(json_path)) == OrthogonalRegularizer(0.5)

    yaml_path = tmp_path / "run.yaml"
    yaml_path.write_text("regularizer:\n  name: l2\n  factor: 0.25\n")
    assert build_regularizer(load_config(yaml_path)) == L2Regularizer(0.25)


def test_load_rejects_unknown_suffix_and_non_mapping(tmp_path):
    bad = tmp_path / "run.toml"
    bad.write_text("")
    with pytest.raises(ValueError):
        load_config(bad)
    listed = tmp_path / "run.json"
    listed.write_text("[1, 2]")
    with pytest.raises(TypeError):
        load_config(listed)
