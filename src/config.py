"""Configuration loaded from .provisioner.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".provisioner.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG_PATH = Path.home() / ".config" / "provisioner" / "config.toml"

DEFAULT_LINK_EXPIRATION_SECONDS = 3600
DEFAULT_LINK = "http://default.com"


class ProvisionSectionConfig(BaseModel):
    """[provision] section."""

    link_expiration_seconds: int = Field(default=DEFAULT_LINK_EXPIRATION_SECONDS, gt=0)
    default_link: str = DEFAULT_LINK


class StoreSectionConfig(BaseModel):
    """[store] section."""

    directory: str = "."


class ProvisionerConfig(BaseModel):
    """Top-level configuration model."""

    provision: ProvisionSectionConfig = Field(default_factory=ProvisionSectionConfig)
    store: StoreSectionConfig = Field(default_factory=StoreSectionConfig)


def load_config(path: str | Path | None = None) -> ProvisionerConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .provisioner.toml in CWD
    3. ~/.config/provisioner/config.toml

    Then overlay environment variables.

    Args:
        path: Explicit path to a TOML file.

    Returns:
        Merged ProvisionerConfig.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        if not data and GLOBAL_CONFIG_PATH.exists():
            data = _load_toml(GLOBAL_CONFIG_PATH)
            logger.info("Loaded config from %s", GLOBAL_CONFIG_PATH)

    config = ProvisionerConfig.model_validate(data) if data else ProvisionerConfig()

    return _apply_env_vars(config)


def merge_cli_overrides(config: ProvisionerConfig, **cli_kwargs: object) -> ProvisionerConfig:
    """Overlay explicitly-set CLI flags onto the config.

    Only overrides values where the CLI flag was explicitly provided
    (i.e., not None).
    """
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "store_directory": ("store", "directory"),
        "link_expiration_seconds": ("provision", "link_expiration_seconds"),
        "default_link": ("provision", "default_link"),
    }

    for key, value in cli_kwargs.items():
        if value is None:
            continue
        if key in mapping:
            section, field = mapping[key]
            data[section][field] = value

    return ProvisionerConfig.model_validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: ProvisionerConfig) -> ProvisionerConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "PROVISIONER_LINK_EXPIRATION_SECONDS": ("provision", "link_expiration_seconds"),
        "PROVISIONER_DEFAULT_LINK": ("provision", "default_link"),
        "PROVISIONER_STORE_DIR": ("store", "directory"),
    }

    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    return ProvisionerConfig.model_validate(data)
