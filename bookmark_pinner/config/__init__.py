"""
Configuration package for Bookmark Pinner.
"""

from .pydantic_config import (
    ConfigurationManager,
    NetworkConfig,
    PinboardConfig,
    PinnerConfig,
    PreferencesConfig,
    ResolverConfig,
    format_config_error,
)

__all__ = [
    "ConfigurationManager",
    "NetworkConfig",
    "PinboardConfig",
    "PinnerConfig",
    "PreferencesConfig",
    "ResolverConfig",
    "format_config_error",
]
