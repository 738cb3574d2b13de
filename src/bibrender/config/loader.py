"""Configuration loader for bibrender.

Loads the JSON configuration file and returns a validated RenderConfig
instance. Uses module-level caching so each file is only parsed once per
process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from bibrender.config.models import RenderConfig
from bibrender.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level cache
_config_cache: dict[str, RenderConfig] = {}

# Default config path, next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "bibrender_default.json"


def load_config(path: Optional[Union[str, Path]] = None) -> RenderConfig:
    """Load and validate the configuration from a JSON file.

    Parameters
    ----------
    path : str | Path | None
        Path to a custom JSON config file.
        If ``None``, the built-in ``bibrender_default.json`` is used.

    Returns
    -------
    RenderConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist or is not valid JSON.
    pydantic.ValidationError
        If the JSON content does not match the expected schema.
    """
    config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {exc}") from exc

    config = RenderConfig.model_validate(raw)
    logger.debug("Loaded configuration from %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_config() -> RenderConfig:
    """Get the default configuration (cached).

    This is the main entry point used by the rest of the application.
    """
    return load_config()


def clear_cache() -> None:
    """Clear the config cache (used by tests)."""
    _config_cache.clear()
