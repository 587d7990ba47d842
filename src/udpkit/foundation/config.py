"""
Settings for numerical differentiation and their loaders.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from udpkit.foundation.exceptions import ConfigurationError

DEFAULT_FD_STEP = 1e-8
DEFAULT_FD_METHOD = "central"
FD_METHODS = ("forward", "central")


def _env_step() -> float:
    raw = os.environ.get("UDPKIT_FD_STEP")
    if raw is None:
        return DEFAULT_FD_STEP
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"UDPKIT_FD_STEP must be a number, got {raw!r}.") from exc


@dataclass
class GradientSettings:
    # Environment is read per instance, not at import.
    step: float = field(default_factory=_env_step)
    method: str = field(default_factory=lambda: os.environ.get("UDPKIT_FD_METHOD", DEFAULT_FD_METHOD))

    def validate(self) -> "GradientSettings":
        if not self.step > 0.0:
            raise ConfigurationError(
                f"Finite-difference step must be positive, got {self.step!r}.",
                suggestion=f"Use a small positive value such as {DEFAULT_FD_STEP:g}",
            )
        if self.method not in FD_METHODS:
            raise ConfigurationError(
                f"Unknown finite-difference method '{self.method}'.",
                suggestion=f"Available methods: {', '.join(FD_METHODS)}",
            )
        return self

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "GradientSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown gradient settings: {', '.join(unknown)}.",
                suggestion=f"Supported keys: {', '.join(sorted(known))}",
                details={"unknown": unknown},
            )
        settings = cls()
        if "step" in data:
            settings.step = float(data["step"])
        if "method" in data:
            settings.method = str(data["method"])
        return settings.validate()


def _read_mapping(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise ImportError("YAML settings requested but PyYAML is not installed. Install with 'pip install udpkit[yaml]'.") from exc
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh) or {}
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def load_settings(path: str | os.PathLike[str]) -> GradientSettings:
    """
    Load gradient settings from a YAML or JSON file.

    The file holds a mapping, optionally nested under a ``gradient`` key.
    """
    settings_path = Path(path).expanduser().resolve()
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file '{settings_path}' does not exist.")
    data = _read_mapping(settings_path)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file '{settings_path}' must contain a mapping.")
    section = data.get("gradient", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"'gradient' section in '{settings_path}' must be a mapping.")
    return GradientSettings.from_mapping(section)


__all__ = ["DEFAULT_FD_METHOD", "DEFAULT_FD_STEP", "FD_METHODS", "GradientSettings", "load_settings"]
