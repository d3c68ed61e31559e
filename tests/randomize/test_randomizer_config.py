from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from randomize.config import (
    RandomizerConfig,
    apply_overrides,
    build_randomizer,
    config_from_dict,
    import_class,
    load_randomizer_config,
)
from randomize.gaussian import GaussianRandomizer
from randomize.uniform import RangeRandomizer


def test_config_from_dict_defaults() -> None:
    config = config_from_dict({"name": "range"})
    assert config == RandomizerConfig(name="range", params={}, seed=None)


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"name": ""},
        {"name": "range", "params": [1, 2]},
        {"name": "range", "seed": "seven"},
        {"name": "range", "seed": True},
    ],
)
def test_config_from_dict_invalid(data: dict) -> None:
    with pytest.raises(ValueError):
        config_from_dict(data)


def test_apply_overrides_updates_nested() -> None:
    config = {"name": "range", "params": {"low": -1.0}}
    updated = apply_overrides(config, ["params.high=2.5", "seed=3", "name=gaussian"])
    assert updated == {"name": "gaussian", "params": {"low": -1.0, "high": 2.5}, "seed": 3}
    assert config == {"name": "range", "params": {"low": -1.0}}


def test_apply_overrides_invalid() -> None:
    with pytest.raises(ValueError):
        apply_overrides({"name": "range"}, ["invalid"])


def test_load_randomizer_config(tmp_path: Path) -> None:
    path = tmp_path / "randomizer.json"
    path.write_text(json.dumps({"name": "gaussian", "params": {"std": 0.1}, "seed": 1}))
    config = load_randomizer_config(path, overrides=["params.mean=0.5"])
    assert config.name == "gaussian"
    assert dict(config.params) == {"std": 0.1, "mean": 0.5}
    assert config.seed == 1


def test_build_randomizer_from_registry(caplog: pytest.LogCaptureFixture) -> None:
    config = RandomizerConfig(name="range", params={"low": 0.0, "high": 0.5}, seed=4)
    with caplog.at_level(logging.INFO, logger="netrandomize"):
        r = build_randomizer(config)
    assert isinstance(r, RangeRandomizer)
    assert (r.low, r.high) == (0.0, 0.5)
    assert "RangeRandomizer" in caplog.text
    assert r.randomize_scalar(0.0) == build_randomizer(config).randomize_scalar(0.0)


def test_build_randomizer_from_import_path() -> None:
    r = build_randomizer(RandomizerConfig(name="randomize.gaussian:GaussianRandomizer", params={"std": 2.0}))
    assert isinstance(r, GaussianRandomizer)
    assert r.std == 2.0


def test_build_randomizer_rejects_non_randomizer() -> None:
    with pytest.raises(TypeError):
        build_randomizer(RandomizerConfig(name="models.matrix.Matrix"))


def test_build_randomizer_unknown_name() -> None:
    with pytest.raises(KeyError):
        build_randomizer(RandomizerConfig(name="nope"))


def test_import_class_with_colon_path() -> None:
    assert import_class("randomize.uniform:RangeRandomizer") is RangeRandomizer
    assert import_class("randomize.uniform.RangeRandomizer") is RangeRandomizer

