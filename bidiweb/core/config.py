"""
Configuration for bidiweb
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_THRESHOLD = 0.4
DEFAULT_SAMPLE_SIZE = 10
DEFAULT_MIN_SAMPLE_TO_COMPARE = 6
DEFAULT_MIN_RATIO = 0.4

DEFAULT_CLASSES: Dict[str, str] = {"rtl": "rtl", "ltr": "ltr"}

CONFIG_ENV_VAR = "BIDIWEB_CONFIG"


class ConfigurationError(ValueError):
    """Raised when a settings file cannot be read as a mapping."""


class Strategy(str, Enum):
    weighted = "weighted"
    first_strong = "first_strong"
    first_n_words = "first_n_words"


class ProcessorMode(str, Enum):
    style = "style"
    css = "css"


def clamp_unit(value: float) -> float:
    """Clamp `value` into [0, 1]."""
    return min(max(float(value), 0.0), 1.0)


class EstimationSettings(BaseModel):
    strategy: Strategy = Strategy.weighted
    # Minimum share of RTL tokens among strong tokens; clamped, never rejected
    threshold: float = DEFAULT_THRESHOLD
    sample_size: int = Field(default=DEFAULT_SAMPLE_SIZE, ge=1)
    min_sample_to_compare: int = Field(default=DEFAULT_MIN_SAMPLE_TO_COMPARE, ge=1)
    min_ratio: float = Field(default=DEFAULT_MIN_RATIO, ge=0.0)

    @model_validator(mode="after")
    def clamp_threshold(self) -> "EstimationSettings":
        if self.threshold != self.threshold:  # NaN
            self.threshold = DEFAULT_THRESHOLD
        self.threshold = clamp_unit(self.threshold)
        return self


class ProcessorSettings(BaseModel):
    mode: ProcessorMode = ProcessorMode.style
    align: bool = True
    classes: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_CLASSES))
    prune: bool = False

    @field_validator("classes")
    @classmethod
    def require_both_classes(cls, value: Dict[str, str]) -> Dict[str, str]:
        missing = [key for key in ("rtl", "ltr") if not value.get(key)]
        if missing:
            raise ValueError(f"classes mapping is missing: {', '.join(missing)}")
        return value


class BidiSettings(BaseModel):
    estimation: EstimationSettings = Field(default_factory=EstimationSettings)
    processor: ProcessorSettings = Field(default_factory=ProcessorSettings)
    log_preview_chars: int = Field(default=40, ge=0)


def _read_env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    value_normalized = value.strip().lower()
    return value_normalized in {"1", "true", "yes", "on"}


def _read_settings_file(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping at top level")
    return data


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    estimation = dict(data.get("estimation") or {})
    processor = dict(data.get("processor") or {})

    if os.environ.get("BIDIWEB_STRATEGY"):
        estimation["strategy"] = os.environ["BIDIWEB_STRATEGY"].strip().lower()
    if os.environ.get("BIDIWEB_THRESHOLD"):
        estimation["threshold"] = os.environ["BIDIWEB_THRESHOLD"].strip()
    if os.environ.get("BIDIWEB_MODE"):
        processor["mode"] = os.environ["BIDIWEB_MODE"].strip().lower()
    if "BIDIWEB_ALIGN" in os.environ:
        processor["align"] = _read_env_flag("BIDIWEB_ALIGN", True)
    if "BIDIWEB_PRUNE" in os.environ:
        processor["prune"] = _read_env_flag("BIDIWEB_PRUNE", False)

    merged = dict(data)
    merged["estimation"] = estimation
    merged["processor"] = processor
    return merged


def load_settings(path: Optional[Union[str, Path]] = None) -> BidiSettings:
    """
    Build settings from an optional YAML file and the environment.

    Args:
        path: YAML file; defaults to $BIDIWEB_CONFIG when set

    Returns:
        BidiSettings with environment overrides applied last
    """
    source = path or os.environ.get(CONFIG_ENV_VAR)
    data: Dict[str, Any] = {}
    if source:
        data = _read_settings_file(Path(source))
    return BidiSettings.model_validate(_apply_env_overrides(data))


__all__ = [
    "DEFAULT_THRESHOLD",
    "DEFAULT_SAMPLE_SIZE",
    "DEFAULT_MIN_SAMPLE_TO_COMPARE",
    "DEFAULT_MIN_RATIO",
    "DEFAULT_CLASSES",
    "ConfigurationError",
    "Strategy",
    "ProcessorMode",
    "EstimationSettings",
    "ProcessorSettings",
    "BidiSettings",
    "clamp_unit",
    "load_settings",
]
