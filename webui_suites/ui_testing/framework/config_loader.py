"""
================================================================================
Configuration Loader
================================================================================

Layered YAML configuration for the UI harness.

Features:
    - Environment selection (ENV override > `env` in base file > DEV)
    - Base file merged with the environment file (environment wins)
    - Strict typed accessors (no silent defaulting)
    - One immutable snapshot per process

Files (flat key-value YAML):
    config/config.yaml      base configuration
    config/<env>.yaml       environment overlay, e.g. config/qa.yaml

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import re
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from .exceptions import (
    ConfigParseError,
    MissingKeyError,
    SourceUnavailableError,
    TypeMismatchError,
    UnknownEnvironmentError,
)


# Default configuration directory (repository root /config)
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "config"

BASE_CONFIG_FILE = "config.yaml"

# Process-level override variables, checked in order
ENV_OVERRIDE_VARS = ("ENV", "env")

_INT_PATTERN = re.compile(r"[+-]?\d+")


class Environment(str, Enum):
    """Deployment targets selectable as configuration overlays."""

    DEV = "DEV"
    QA = "QA"
    PROD = "PROD"

    @classmethod
    def parse(cls, name: str) -> "Environment":
        """Case-insensitive lookup; unknown names raise UnknownEnvironmentError."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise UnknownEnvironmentError(name) from None

    @property
    def config_file(self) -> str:
        return f"{self.value.lower()}.yaml"


@dataclass(frozen=True)
class Configuration:
    """
    Immutable configuration snapshot.

    Attributes:
        environment: Resolved deployment environment
        values: Flat string-to-string mapping (read-only)
    """
    environment: Environment
    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def resolve_environment(self) -> Environment:
        return self.environment

    def get_string(self, key: str) -> str:
        """
        Get a required value.

        Raises:
            MissingKeyError: If the key is absent
        """
        try:
            return self.values[key]
        except KeyError:
            raise MissingKeyError(key) from None

    def get_bool(self, key: str) -> bool:
        """Get a value that must be the literal 'true' or 'false'."""
        raw = self.get_string(key)
        normalized = raw.strip().lower()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
        raise TypeMismatchError(key, raw, "boolean literal 'true' or 'false'")

    def get_int(self, key: str) -> int:
        """Get a value that must be a (optionally signed) decimal integer."""
        raw = self.get_string(key)
        if not _INT_PATTERN.fullmatch(raw.strip()):
            raise TypeMismatchError(key, raw, "integer")
        return int(raw.strip())

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get an optional value."""
        return self.values.get(key, default)

    def as_dict(self) -> Dict[str, str]:
        """Plain-dict copy, e.g. for report attachments."""
        return {"environment": self.environment.value, **self.values}

    def __contains__(self, key: object) -> bool:
        return key in self.values


class ConfigLoader:
    """
    Builds a Configuration from the layered YAML sources.

    Resolution order for the environment (highest first):
        1. Explicit override (argument, or ENV / env process variable)
        2. `env` key in the base configuration file
        3. DEV

    Usage:
        >>> config = ConfigLoader(env_override="qa").load()
        >>> config.get_string("baseURL")
        'https://qa.example.com'
    """

    def __init__(
        self,
        config_dir: Optional[Path] = None,
        env_override: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Initialize configuration loader.

        Args:
            config_dir: Directory holding config.yaml and <env>.yaml.
                        Uses WEBUI_CONFIG_DIR or DEFAULT_CONFIG_DIR if not given.
            env_override: Explicit environment name; beats process variables
            overrides: Key overrides applied after both files
        """
        if config_dir is None:
            config_dir = Path(os.environ.get("WEBUI_CONFIG_DIR", DEFAULT_CONFIG_DIR))
        self._config_dir = Path(config_dir)
        self._env_override = env_override
        self._overrides = {
            key: _normalize_value(self._config_dir, key, value)
            for key, value in (overrides or {}).items()
        }

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    def load(self) -> Configuration:
        """
        Load and merge the base and environment files.

        Raises:
            SourceUnavailableError: A required file is missing
            ConfigParseError: A file is malformed
            UnknownEnvironmentError: Environment name is not supported
        """
        base = self._read(self._config_dir / BASE_CONFIG_FILE)
        environment = self.resolve_environment(base)
        env_values = self._read(self._config_dir / environment.config_file)

        merged = {**base, **env_values, **self._overrides}
        logger.debug(
            f"Loaded configuration for {environment.value} from {self._config_dir} "
            f"({len(merged)} keys)"
        )
        return Configuration(environment=environment, values=merged)

    def resolve_environment(self, base: Optional[Mapping[str, str]] = None) -> Environment:
        """
        Resolve the active environment.

        Args:
            base: Already-read base values; read from disk when omitted
        """
        override = self._env_override
        if override is None:
            for var in ENV_OVERRIDE_VARS:
                if os.environ.get(var):
                    override = os.environ[var]
                    break

        if override:
            return Environment.parse(override)

        if base is None:
            base = self._read(self._config_dir / BASE_CONFIG_FILE)
        return Environment.parse(base.get("env") or Environment.DEV.value)

    @staticmethod
    def _read(path: Path) -> Dict[str, str]:
        """Read one flat YAML mapping, normalizing scalars to strings."""
        if not path.is_file():
            raise SourceUnavailableError(path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigParseError(path, f"invalid YAML: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigParseError(path, "top-level value must be a mapping")

        return {
            str(key): _normalize_value(path, str(key), value)
            for key, value in data.items()
        }


def _normalize_value(source: Any, key: str, value: Any) -> str:
    if isinstance(value, (dict, list)):
        raise ConfigParseError(source, f"key {key!r} must map to a scalar value")
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


# =============================================================================
# Process-wide Snapshot
# =============================================================================

_configuration: Optional[Configuration] = None
_configuration_lock = threading.Lock()


def init_configuration(
    config_dir: Optional[Path] = None,
    env_override: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Configuration:
    """
    Load the process-wide configuration once.

    Later calls return the existing snapshot unchanged.
    """
    global _configuration
    with _configuration_lock:
        if _configuration is None:
            _configuration = ConfigLoader(config_dir, env_override, overrides).load()
            logger.info(f"Configuration initialized for environment {_configuration.environment.value}")
        return _configuration


def get_configuration() -> Configuration:
    """Return the process-wide configuration, loading defaults on first access."""
    if _configuration is None:
        return init_configuration()
    return _configuration


def reset_configuration() -> None:
    """
    Drop the cached snapshot.

    Only for tests that need to load different configuration directories.
    """
    global _configuration
    with _configuration_lock:
        _configuration = None


__all__ = [
    "DEFAULT_CONFIG_DIR",
    "Environment",
    "Configuration",
    "ConfigLoader",
    "init_configuration",
    "get_configuration",
    "reset_configuration",
]
