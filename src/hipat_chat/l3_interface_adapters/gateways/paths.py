"""Shared path constants for configuration, user rule sets and agents."""

from __future__ import annotations

from platformdirs import user_config_path

CONFIG_DIR = user_config_path('hipat-chat')
USER_RULES_DIR = CONFIG_DIR / 'rules'
USER_AGENTS_PATH = CONFIG_DIR / 'agents.yaml'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
