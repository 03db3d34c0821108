"""Gateway: YAML configuration loader.

Lookup order when no explicit path is given: ``$HIPAT_CONFIG``, then
``hipat.yaml`` in the working directory, then the per-user config directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from hipat_chat.l1_entities.config import AppConfig
from hipat_chat.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('hipat.config')

CONFIG_ENV_VAR = 'HIPAT_CONFIG'
LOCAL_CONFIG_NAME = 'hipat.yaml'


def resolve_config_path(config_path: str | None = None) -> Path | None:
    """First config file that applies, or None when running on defaults.

    An explicit path (argument or env var) must exist; implicit locations are optional.
    """
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f'Config file not found: {path}')
        return path
    for candidate in [Path.cwd() / LOCAL_CONFIG_NAME, *DEFAULT_CONFIG_PATHS]:
        if candidate.is_file():
            return candidate
    return None


def read_yaml_mapping(path: Path) -> dict:
    data = yaml.safe_load(path.read_text(encoding='utf-8'))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f'{path} must contain a YAML mapping, got {type(data).__name__}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class YamlConfigLoader:
    """Reads one YAML config file and layers CLI overrides on top."""

    def load_raw(self, config_path: str | None = None, overrides: dict | None = None) -> dict:
        """Merged data as a plain dict, before defaults and validation."""
        path = resolve_config_path(config_path)
        data = read_yaml_mapping(path) if path else {}
        log.debug('Config source: %s', path or '(built-in defaults)')
        if overrides:
            deep_merge(data, overrides)
        return data

    def load(self, config_path: str | None = None, overrides: dict | None = None) -> AppConfig:
        return AppConfig.model_validate(self.load_raw(config_path, overrides))
