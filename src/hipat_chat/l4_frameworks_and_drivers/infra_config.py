"""Application defaults and infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy
from typing import Literal

from pydantic import BaseModel, Field

from hipat_chat.l1_entities.config import AppConfig
from hipat_chat.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'router': {
        'backend': 'keyword',
        'delay': 0.8,
        'timeout': 30.0,
        'rules': 'default',
    },
    'agent': {
        'role': 'Manager',
        'model': 'llama3.2',
        'modality': 'text',
    },
    'output': {
        'directory': './output',
        'persist': True,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class OllamaProviderConfig(BaseModel):
    host: str = 'http://localhost:11434'


class OpenAIProviderConfig(BaseModel):
    api_key: str | None = None  # None → SDK reads OPENAI_API_KEY env
    base_url: str = 'https://api.openai.com/v1'


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    llm_provider: Literal['ollama', 'openai'] = 'ollama'
    request_timeout: float | None = 60.0
    ollama: OllamaProviderConfig = Field(default_factory=OllamaProviderConfig)
    openai: OpenAIProviderConfig = Field(default_factory=OpenAIProviderConfig)
