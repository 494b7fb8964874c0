"""Persistent configuration and API key resolution.

Settings live in ``~/.config/massive/config.json``::

    {
      "api_key": "...",
      "base_url": "https://api.massive.com"
    }

Environment variables:
    MASSIVE_API_KEY: Takes precedence over the key stored in the file.
    MASSIVE_BASE_URL: Overrides the stored base URL when building a client.
    MASSIVE_CONFIG_DIR: Use another directory instead of ``~/.config/massive``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from .client import DEFAULT_BASE_URL, RESTClient
from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"

API_KEY_ENV = "MASSIVE_API_KEY"
BASE_URL_ENV = "MASSIVE_BASE_URL"
CONFIG_DIR_ENV = "MASSIVE_CONFIG_DIR"


@dataclass
class Config:
    """Stored client settings."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL


def config_dir(override: str | Path | None = None) -> Path:
    """Return the configuration directory.

    Resolution order is the explicit ``override``, then ``MASSIVE_CONFIG_DIR``,
    then ``~/.config/massive``.
    """
    if override is not None:
        return Path(override)
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".config" / "massive"


def config_path(override: str | Path | None = None) -> Path:
    return config_dir(override) / CONFIG_FILE


def load(directory: str | Path | None = None) -> Config:
    """Load the configuration, falling back to defaults when no file exists.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    path = config_path(directory)
    try:
        text = path.read_text()
    except FileNotFoundError:
        return Config()
    except OSError as e:
        raise ConfigError(f"failed to read config: {e}", {"path": str(path)}) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse config: {e}", {"path": str(path)}) from e

    if not isinstance(data, dict):
        raise ConfigError("failed to parse config: expected a JSON object", {"path": str(path)})

    cfg = Config()
    if isinstance(data.get("api_key"), str):
        cfg.api_key = data["api_key"]
    if isinstance(data.get("base_url"), str) and data["base_url"]:
        cfg.base_url = data["base_url"]
    return cfg


def save(cfg: Config, directory: str | Path | None = None) -> Path:
    """Write the configuration and return the file path.

    The file is created with mode 0600 since it holds the API key.

    Raises:
        ConfigError: If the directory or file cannot be written.
    """
    dir_path = config_dir(directory)
    path = dir_path / CONFIG_FILE
    try:
        dir_path.mkdir(mode=0o755, parents=True, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            json.dump(asdict(cfg), f, indent=2)
        # O_CREAT leaves the mode of an existing file untouched
        os.chmod(path, 0o600)
    except OSError as e:
        raise ConfigError(f"failed to write config: {e}", {"path": str(path)}) from e

    logger.info(f"Saved config to {path}")
    return path


def get_api_key(directory: str | Path | None = None) -> str:
    """Return the API key from ``MASSIVE_API_KEY`` or the config file.

    Raises:
        ConfigError: If neither source provides a key.
    """
    key = os.environ.get(API_KEY_ENV)
    if key:
        return key

    cfg = load(directory)
    if not cfg.api_key:
        raise ConfigError(
            "API key not configured. Run 'massive config init' "
            f"or set {API_KEY_ENV} environment variable"
        )
    return cfg.api_key


def client_from_config(directory: str | Path | None = None, **kwargs) -> RESTClient:
    """Build a RESTClient from the environment and the stored configuration."""
    api_key = get_api_key(directory)
    base_url = os.environ.get(BASE_URL_ENV) or load(directory).base_url
    return RESTClient(api_key, base_url=base_url, **kwargs)
