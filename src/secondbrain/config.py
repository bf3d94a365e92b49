# src/secondbrain/config.py
"""Configuration loading utilities for SecondBrain.

This module is the application layer used by the CLI. It handles:
- Finding and loading secondbrain.yaml config files
- Loading .env files for API keys
- Building Settings objects from YAML and SECONDBRAIN_* env vars
- Creating SecondBrain instances from configuration
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
import yaml  # type: ignore[import-untyped]

from secondbrain.configuration import LiteLLMProvider
from secondbrain.settings import Settings

if TYPE_CHECKING:
    from secondbrain.secondbrain import SecondBrain

logger = structlog.get_logger()

CONFIG_FILES = ["secondbrain.yaml", "secondbrain.yml"]
ENV_FILE = ".env"

# Valid configuration keys for validation
VALID_ROOT_KEYS = {
    "llm_model",
    "embedding_model",
    "timeout",
    "settings",
}

VALID_SETTINGS_KEYS = set(Settings.model_fields)

ENV_INT_SETTINGS = {
    "SECONDBRAIN_USER_ID": "user_id",
    "SECONDBRAIN_CHUNK_MAX_TOKENS": "chunk_max_tokens",
    "SECONDBRAIN_DEFAULT_K": "default_k",
    "SECONDBRAIN_MAX_CONCURRENT_EMBEDDINGS": "max_concurrent_embeddings",
    "SECONDBRAIN_NUM_RETRIES": "num_retries",
}


class ConfigError(Exception):
    """The configuration file could not be used."""


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from a .env file if it exists.

    Existing environment variables are never overridden.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("\"'")
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in the start directory or its parents.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)

    Raises:
        ConfigError: If the file is missing, unparsable, or not a mapping.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        return {}
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    for warning in validate_config(config, path):
        logger.warning("config_warning", message=warning)
    return config


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from SECONDBRAIN_* environment variables.

    Only explicitly set, parsable values are returned so they can override
    YAML settings.
    """
    result: dict[str, Any] = {}
    for env_key, settings_key in ENV_INT_SETTINGS.items():
        raw = os.environ.get(env_key)
        if raw is None:
            continue
        try:
            result[settings_key] = int(raw)
        except ValueError:
            logger.warning("invalid_env_setting", key=env_key, value=raw)
    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Settings class defaults
    """
    values: dict[str, Any] = {}
    yaml_settings = (config or {}).get("settings") or {}
    values.update({k: v for k, v in yaml_settings.items() if k in VALID_SETTINGS_KEYS})
    values.update(env_settings if env_settings is not None else get_settings_from_env())
    return Settings(**values)


def build_provider(config: dict[str, Any] | None = None) -> LiteLLMProvider:
    """Build the LiteLLM provider from config, with env var overrides."""
    config = config or {}
    defaults = LiteLLMProvider()
    return LiteLLMProvider(
        llm=os.environ.get("SECONDBRAIN_LLM_MODEL") or config.get("llm_model") or defaults.llm,
        embedding=(
            os.environ.get("SECONDBRAIN_EMBEDDING_MODEL")
            or config.get("embedding_model")
            or defaults.embedding
        ),
        timeout=config.get("timeout"),
    )


def create_second_brain(config: dict[str, Any] | None = None) -> SecondBrain:
    """Create a SecondBrain instance from a loaded configuration."""
    from secondbrain.secondbrain import SecondBrain

    return SecondBrain(provider=build_provider(config), settings=build_settings(config))
