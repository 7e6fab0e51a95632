"""
Runtime Configuration Module

Provides configuration loading and logging setup.
"""

from .log import setup_logging, setup_logging_from_config
from .runtime import HashConfig, RuntimeConfig, get_default_config, set_default_config

__all__ = [
    "RuntimeConfig",
    "HashConfig",
    "get_default_config",
    "set_default_config",
    "setup_logging",
    "setup_logging_from_config",
]
