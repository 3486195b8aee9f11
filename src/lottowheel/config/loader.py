"""Resource ceilings read from disk."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TextIO

import yaml

from .schema import WheelLimits


class ConfigLoadError(ValueError):
    """Limits file has an unknown suffix, bad syntax or a non-mapping root."""


def _read_yaml(stream: TextIO) -> Any:
    try:
        return yaml.safe_load(stream)
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Invalid YAML: {exc}") from exc


def _read_json(stream: TextIO) -> Any:
    try:
        return json.load(stream)
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(f"Invalid JSON: {exc}") from exc


_READERS: dict[str, Callable[[TextIO], Any]] = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}


def load_limits(path: str | Path) -> WheelLimits:
    """Read ceilings from a .yaml/.yml or .json file into WheelLimits.

    Missing keys keep their defaults; out-of-range values raise pydantic's
    ValidationError.
    """
    limits_path = Path(path)
    if not limits_path.is_file():
        raise FileNotFoundError(f"Limits file not found: {limits_path}")

    reader = _READERS.get(limits_path.suffix.lower())
    if reader is None:
        raise ConfigLoadError(
            f"Unsupported limits format '{limits_path.suffix}'. Use .yaml/.yml or .json."
        )

    with limits_path.open("r", encoding="utf-8") as stream:
        data = reader(stream)

    if data is None:
        return WheelLimits()
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Limits root in {limits_path} must be a JSON/YAML object.")
    return WheelLimits.model_validate(data)
