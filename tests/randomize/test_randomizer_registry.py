from __future__ import annotations

import pytest

from randomize import registry
from randomize.gaussian import DistortRandomizer, GaussianRandomizer
from randomize.uniform import ConstRandomizer, RangeRandomizer


def test_register_randomizer_duplicate() -> None:
    def _factory(_config, rng):
        return ConstRandomizer(0.0, rng=rng)

    name = "_tmp_randomizer"
    registry.register_randomizer(name, _factory)
    try:
        with pytest.raises(ValueError):
            registry.register_randomizer(name, _factory)
        assert isinstance(registry.get_randomizer(name), ConstRandomizer)
    finally:
        registry.RANDOMIZERS.pop(name, None)


def test_get_randomizer_unknown_lists_available() -> None:
    with pytest.raises(KeyError, match="range"):
        registry.get_randomizer("missing_randomizer", {})


@pytest.mark.parametrize(
    "name,cls",
    [
        ("range", RangeRandomizer),
        ("const", ConstRandomizer),
        ("gaussian", GaussianRandomizer),
        ("distort", DistortRandomizer),
    ],
)
def test_builtin_randomizers(name: str, cls: type) -> None:
    assert isinstance(registry.get_randomizer(name, rng=0), cls)


def test_get_randomizer_passes_params_and_seed() -> None:
    r = registry.get_randomizer("range", {"low": 2.0, "high": 3.0}, rng=8)
    assert (r.low, r.high) == (2.0, 3.0)
    same = registry.get_randomizer("range", {"low": 2.0, "high": 3.0}, rng=8)
    assert r.randomize_scalar(0.0) == same.randomize_scalar(0.0)
