"""
Runtime Configuration

Central configuration for hash selection and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from merkle_core.crypto.hashing import (
    SUPPORTED_ALGORITHMS,
    HashFunction,
    domain_separated,
    get_hash_function,
)
from merkle_core.schemas.errors import ConfigurationException

load_dotenv()


_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class HashConfig:
    """Configuration for the inner-node hash function."""
    algorithm: str = "sha256"
    domain_separation: bool = False

    def __post_init__(self):
        if not isinstance(self.algorithm, str):
            raise ConfigurationException(
                f"Hash algorithm should be a string, got {type(self.algorithm).__name__}",
                setting="hash.algorithm",
            )
        name = self.algorithm.lower().replace("-", "_")
        if name not in SUPPORTED_ALGORITHMS:
            raise ConfigurationException(
                f"Unknown hash algorithm: {self.algorithm}",
                setting="hash.algorithm",
                details={"supported": sorted(SUPPORTED_ALGORITHMS)},
            )
        self.algorithm = name

    def resolve(self) -> HashFunction:
        """Return the hash function a tree should use for inner nodes."""
        base = get_hash_function(self.algorithm)
        if self.domain_separation:
            _, inner_hash = domain_separated(base)
            return inner_hash
        return base

    def resolve_leaf_hash(self) -> HashFunction:
        """Return the function callers should use to prepare leaves."""
        base = get_hash_function(self.algorithm)
        if self.domain_separation:
            leaf_hash, _ = domain_separated(base)
            return leaf_hash
        return base


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables (a .env file is read on import)
    - YAML file
    - Programmatic construction
    """
    hash: HashConfig = field(default_factory=HashConfig)
    debug: bool = False
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MERKLE_HASH_ALGORITHM: hash algorithm name (sha256, sha3_256, ...)
        - MERKLE_DOMAIN_SEPARATION: prefix leaf/inner preimages (true/false)
        - MERKLE_DEBUG: enable debug logging (true/false)
        - MERKLE_LOG_LEVEL: log level name
        """
        overrides: dict[str, Any] = {}

        if os.getenv("MERKLE_HASH_ALGORITHM"):
            overrides.setdefault("hash", {})["algorithm"] = os.getenv("MERKLE_HASH_ALGORITHM")
        if os.getenv("MERKLE_DOMAIN_SEPARATION"):
            overrides.setdefault("hash", {})["domain_separation"] = _parse_bool(
                os.getenv("MERKLE_DOMAIN_SEPARATION", "false")
            )

        if os.getenv("MERKLE_DEBUG"):
            overrides["debug"] = _parse_bool(os.getenv("MERKLE_DEBUG", "false"))
        if os.getenv("MERKLE_LOG_LEVEL"):
            overrides["log_level"] = os.getenv("MERKLE_LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        hash_data = data.get("hash", {})
        if not isinstance(hash_data, dict):
            raise ConfigurationException(
                "'hash' section must be a mapping",
                setting="hash",
            )

        try:
            hash_config = HashConfig(**hash_data) if hash_data else HashConfig()
        except TypeError as e:
            raise ConfigurationException(
                f"Invalid hash configuration: {e}",
                setting="hash",
            ) from e

        return cls(
            hash=hash_config,
            debug=bool(data.get("debug", False)),
            log_level=str(data.get("log_level", "INFO")),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        Allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "hash" in overrides:
            merged = {
                "algorithm": new_config.hash.algorithm,
                "domain_separation": new_config.hash.domain_separation,
                **overrides["hash"],
            }
            new_config.hash = HashConfig(**merged)

        if "debug" in overrides:
            new_config.debug = overrides["debug"]
        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"]

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "hash": {
                "algorithm": self.hash.algorithm,
                "domain_separation": self.hash.domain_separation,
            },
            "debug": self.debug,
            "log_level": self.log_level,
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration. None resets to env on next get."""
    global _default_config
    _default_config = config
