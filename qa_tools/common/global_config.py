"""
================================================================================
Global Configuration for QA Tools
================================================================================

This module provides centralized configuration management for the toolkit
and the test suites, including logging setup and configuration file loading.

Features:
    - YAML-based configuration loading
    - Environment-specific overlays (config/{ENVIRONMENT}.yaml)
    - Environment variable support
    - Centralized Loguru logging configuration
    - Explicit LoggerSettings built once from the environment

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from .logger import LogLevel, LoggerSettings

# Global configuration storage
_config: Dict[str, Any] = {}
_config_dir: Optional[Path] = None
_logger_initialized: bool = False

# Environment variables mapped onto configuration keys
ENV_MAPPING: Dict[str, str] = {
    "LOG_LEVEL": "logging.level",
    "LOG_FILE": "logging.file",
    "BASE_URL": "ui.base_url",
    "UI_BASE_URL": "ui.base_url",
    "HEADLESS": "ui.headless",
    "BROWSER": "ui.browser",
}

_FALSY = {"", "0", "false", "no", "off"}


def is_truthy(value: Optional[str]) -> bool:
    """Interpret an environment flag such as CI=true or HEADLESS=0."""
    return value is not None and value.strip().lower() not in _FALSY


def init_logger(level: str = None, format_str: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Records produced by ``qa_tools.common.logger.Logger`` are already fully
    formatted, so the default format only writes the message.

    Args:
        level: Loguru handler level. Defaults to config value or DEBUG.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()

    log_level = level or get_config("logging.handler_level", "DEBUG")
    log_format = format_str or get_config("logging.format", "{message}")

    # Remove default logger and add configured one
    logger.remove()
    logger.add(
        sys.stderr,
        level=str(log_level).upper(),
        format=log_format,
        colorize=False,
        backtrace=True,
        diagnose=False,
    )

    # Optional: Add file logging
    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=str(log_level).upper(),
            format=log_format,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True


def load_logger_settings(environ: Optional[Mapping[str, str]] = None) -> LoggerSettings:
    """
    Build the LoggerSettings for this process.

    Level precedence: LOG_LEVEL env var, then ``logging.level`` from the
    configuration files, then the CI default (warn under CI, else info).

    Args:
        environ: Environment mapping. Defaults to ``os.environ``.
    """
    environ = os.environ if environ is None else environ

    raw_level = environ.get("LOG_LEVEL") or _file_config_get("logging.level")
    level = LogLevel.parse(raw_level) if raw_level else None

    structured = get_config("logging.structured", True)
    if isinstance(structured, str):
        structured = is_truthy(structured)

    return LoggerSettings(
        level=level,
        ci=is_truthy(environ.get("CI")),
        structured=bool(structured),
    )


def _ensure_config_loaded() -> None:
    """
    Ensures the configuration is loaded.
    """
    if not _config:
        _load_config()


def _find_config_dir() -> Optional[Path]:
    possible_config_dirs = [
        Path(os.environ["QA_CONFIG_DIR"]) if os.environ.get("QA_CONFIG_DIR") else None,
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]
    for dir_path in possible_config_dirs:
        if dir_path is not None and dir_path.is_dir():
            return dir_path
    return None


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_config(config_dir: Optional[Path] = None) -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Built-in defaults
        2. Default configuration file (config/config.yaml)
        3. Environment-specific configuration (config/{ENVIRONMENT}.yaml)
        4. Environment variables (override YAML settings)
    """
    global _config, _config_dir

    _config = _get_defaults()
    _config_dir = Path(config_dir) if config_dir else _find_config_dir()

    if not _config_dir:
        logger.warning("No configuration directory found. Using defaults.")
    else:
        default_config_path = _config_dir / "config.yaml"
        if default_config_path.exists():
            _config = _deep_merge(_config, _read_yaml(default_config_path))
            logger.debug(f"Loaded configuration from {default_config_path}")

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_config_path = _config_dir / f"{env}.yaml"
        if env_config_path.exists():
            _config = _deep_merge(_config, _read_yaml(env_config_path))
            logger.debug(f"Merged environment config: {env_config_path}")

    _apply_env_overrides()


def _get_defaults() -> Dict[str, Any]:
    """
    Returns default configuration values.

    ``logging.level`` is intentionally absent so the CI default applies.
    """
    return {
        "logging": {
            "structured": True,
            "format": "{message}",
            "handler_level": "DEBUG",
        },
        "ui": {
            "base_url": "https://www.saucedemo.com",
            "browser": "chromium",
            "headless": True,
            "default_timeout": 10.0,
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Environment variable naming convention:
        - Explicit names from ENV_MAPPING (e.g. BASE_URL -> ui.base_url)
        - Double underscore separates nested keys: UI__BROWSER=firefox
    """
    for env_key, config_key in ENV_MAPPING.items():
        if os.environ.get(env_key):
            _set_nested(_config, config_key.split("."), os.environ[env_key])

    for key, value in os.environ.items():
        if "__" in key and not key.startswith("_"):
            # Convert UI__BROWSER to ["ui", "browser"]
            parts = [p.lower() for p in key.split("__")]
            _set_nested(_config, parts, value)


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """
    Sets a nested dictionary value using a list of keys.
    """
    for key in keys[:-1]:
        if not isinstance(d.get(key), dict):
            d[key] = {}
        d = d[key]
    d[keys[-1]] = value


def _lookup(data: Dict[str, Any], key: str, default: Any) -> Any:
    value: Any = data
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value


def _file_config_get(key: str) -> Any:
    _ensure_config_loaded()
    return _lookup(_config, key, None)


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "logging.level", "ui.base_url").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("ui.base_url")
        'https://www.saucedemo.com'
        >>> get_config("ui.default_timeout", 10.0)
        10.0
    """
    _ensure_config_loaded()
    return _lookup(_config, key, default)


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.

    Args:
        key: Dot-separated key path.
        value: Value to set.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config(config_dir: Optional[Path] = None) -> None:
    """
    Reloads the configuration from files and the environment.

    Args:
        config_dir: Directory holding config.yaml. Defaults to auto-discovery.
    """
    _load_config(config_dir)
    logger.debug("Configuration reloaded.")


__all__ = [
    "ENV_MAPPING",
    "is_truthy",
    "init_logger",
    "load_logger_settings",
    "get_config",
    "set_config",
    "reload_config",
]
