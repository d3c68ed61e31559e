"""Config loading for randomizers.

A randomizer config is a JSON object::

    {"name": "range", "params": {"low": -0.5, "high": 0.5}, "seed": 7}

``name`` is either a registered randomizer name or an import path to a
BasicRandomizer subclass (``"pkg.module.Class"`` or ``"pkg.module:Class"``),
in which case ``params`` are passed as keyword arguments.
"""

from __future__ import annotations

import importlib
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from core.logging import get_logger
from randomize.basic import BasicRandomizer
from randomize.registry import RANDOMIZERS, get_randomizer

__all__ = [
    "RandomizerConfig",
    "load_json",
    "import_class",
    "apply_overrides",
    "config_from_dict",
    "load_randomizer_config",
    "build_randomizer",
]

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RandomizerConfig:
    """Configuration for building a randomizer.

    Attributes:
        name: Registered name or import path of the randomizer.
        params: Strategy parameters.
        seed: Fixed seed, or None for a time-based seed.
    """

    name: str
    params: Mapping[str, Any] = field(default_factory=dict)
    seed: int | None = None


def load_json(path: Path) -> dict[str, Any]:
    """Read a JSON object from ``path``."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def import_class(path: str) -> type[Any]:
    """Import a class from ``"pkg.module.Class"`` or ``"pkg.module:Class"``.

    Raises:
        ImportError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
    """
    if ":" in path:
        module_name, class_name = path.split(":", 1)
    else:
        module_name, class_name = path.rsplit(".", 1)
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def apply_overrides(config: dict[str, Any], overrides: list[str]) -> dict[str, Any]:
    """Apply dotted ``key=value`` overrides to a copy of ``config``.

    Values are parsed as JSON when possible, otherwise kept as strings.

    Raises:
        ValueError: If an override is not of the form key=value.
    """
    result = json.loads(json.dumps(config))
    for item in overrides:
        if "=" not in item:
            raise ValueError(f"Override must be key=value, got: {item}")
        path, raw_val = item.split("=", 1)
        keys = path.split(".")
        target = result
        for key in keys[:-1]:
            if key not in target or not isinstance(target[key], dict):
                target[key] = {}
            target = target[key]
        target[keys[-1]] = _parse_value(raw_val)
    return result


def config_from_dict(data: Mapping[str, Any]) -> RandomizerConfig:
    """Validate a raw mapping and build a RandomizerConfig.

    Raises:
        ValueError: If ``name`` is missing, ``params`` is not a mapping, or
            ``seed`` is not an integer.
    """
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError(f"Randomizer config needs a non-empty 'name', got: {name!r}")
    params = data.get("params", {})
    if not isinstance(params, Mapping):
        raise ValueError(f"'params' must be an object, got {type(params).__name__}")
    seed = data.get("seed")
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
        raise ValueError(f"'seed' must be an integer or null, got {seed!r}")
    return RandomizerConfig(name=name, params=dict(params), seed=seed)


def load_randomizer_config(path: Path, overrides: list[str] | None = None) -> RandomizerConfig:
    """Load a RandomizerConfig from a JSON file, applying optional overrides."""
    data = load_json(path)
    if overrides:
        data = apply_overrides(data, overrides)
    return config_from_dict(data)


def build_randomizer(config: RandomizerConfig) -> BasicRandomizer:
    """Instantiate the randomizer a config describes.

    Raises:
        KeyError: If the name is neither registered nor an import path.
        TypeError: If an imported class is not a BasicRandomizer subclass.
    """
    if config.name in RANDOMIZERS or ("." not in config.name and ":" not in config.name):
        randomizer = get_randomizer(config.name, dict(config.params), rng=config.seed)
    else:
        cls = import_class(config.name)
        if not (isinstance(cls, type) and issubclass(cls, BasicRandomizer)):
            raise TypeError(f"{config.name} is not a BasicRandomizer subclass")
        randomizer = cls(**dict(config.params), rng=config.seed)
    logger.info(
        "Built randomizer %s (params=%s, seed=%s)",
        type(randomizer).__name__,
        dict(config.params),
        config.seed,
    )
    return randomizer
