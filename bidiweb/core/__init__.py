"""Core types and settings for bidiweb."""

from .types import CharacterSetProfile, Direction, DirectionAnalysis
from .config import (
    BidiSettings,
    ConfigurationError,
    EstimationSettings,
    ProcessorMode,
    ProcessorSettings,
    Strategy,
    load_settings,
)

__all__ = [
    "Direction",
    "CharacterSetProfile",
    "DirectionAnalysis",
    "BidiSettings",
    "ConfigurationError",
    "EstimationSettings",
    "ProcessorMode",
    "ProcessorSettings",
    "Strategy",
    "load_settings",
]
