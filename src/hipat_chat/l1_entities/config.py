"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from hipat_chat.l1_entities.input_modality import InputModality


class RouterConfig(BaseModel):
    backend: Literal['keyword', 'agent']
    delay: float = Field(ge=0.0)
    timeout: float | None = None  # None = wait indefinitely
    rules: str


class AgentConfig(BaseModel):
    role: str
    model: str
    modality: InputModality = InputModality.TEXT


class OutputConfig(BaseModel):
    directory: str
    persist: bool


class AppConfig(BaseModel):
    router: RouterConfig
    agent: AgentConfig
    output: OutputConfig
