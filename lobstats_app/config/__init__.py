"""
Configuration module.

Frozen dataclass defaults, YAML overrides and parameter validation.
"""
from .defaults import (
    AnalysisParams,
    DefaultConfig,
    GeneratorParams,
    LoaderParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "AnalysisParams",
    "LoaderParams",
    "GeneratorParams",
    "DefaultConfig",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
