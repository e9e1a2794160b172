"""
Service settings for the REST API and the CLI.

Resolution order (later wins):
    1. defaults below
    2. optional YAML file (`load_settings(path)` or $SORTCOMPARE_CONFIG)
    3. environment variables

Environment variables:
    SORTCOMPARE_HOST, PORT / SORTCOMPARE_PORT, LOG_LEVEL,
    SORTCOMPARE_QUADRATIC_THRESHOLD, SORTCOMPARE_MAX_ARRAY_SIZE
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

__all__ = ["Settings", "load_settings", "LOG_LEVELS"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_KEYS: Dict[str, Tuple[str, ...]] = {
    "host": ("SORTCOMPARE_HOST",),
    "port": ("SORTCOMPARE_PORT", "PORT"),
    "log_level": ("LOG_LEVEL",),
    "quadratic_threshold": ("SORTCOMPARE_QUADRATIC_THRESHOLD",),
    "max_array_size": ("SORTCOMPARE_MAX_ARRAY_SIZE",),
}


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"
    quadratic_threshold: int = 1000
    max_array_size: int = 1_000_000
    default_benchmark_sizes: Tuple[int, ...] = field(default=(100, 500, 1000, 5000, 10000))

    def __post_init__(self) -> None:
        if not (0 < self.port < 65536):
            raise ValueError(f"port must be in 1..65535; got {self.port}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}; got {self.log_level!r}")
        if self.quadratic_threshold < 0:
            raise ValueError("quadratic_threshold must be nonnegative")
        if self.max_array_size < 1:
            raise ValueError("max_array_size must be positive")
        if not self.default_benchmark_sizes or any(s <= 0 for s in self.default_benchmark_sizes):
            raise ValueError("default_benchmark_sizes must be a non-empty list of positive ints")


def _coerce(name: str, raw: Any) -> Any:
    try:
        if name in ("port", "quadratic_threshold", "max_array_size"):
            return int(raw)
        if name == "log_level":
            return str(raw).upper()
        if name == "default_benchmark_sizes":
            return tuple(int(s) for s in raw)
        return str(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid value for setting {name!r}: {raw!r}") from e


def _from_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"settings file {path} must contain a mapping")
    known = {f.name for f in fields(Settings)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"unknown settings in {path}: {sorted(unknown)}")
    return {k: _coerce(k, v) for k, v in data.items()}


def load_settings(
    path: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build Settings from defaults, an optional YAML file and the environment."""
    env = os.environ if env is None else env
    if path is None:
        path = env.get("SORTCOMPARE_CONFIG") or None

    overrides: Dict[str, Any] = {}
    if path is not None:
        overrides.update(_from_yaml(Path(path)))

    for name, keys in _ENV_KEYS.items():
        for key in keys:
            if env.get(key):
                overrides[name] = _coerce(name, env[key])
                break

    return replace(Settings(), **overrides)
