"""Agent profile entity — a selectable assistant persona."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hipat_chat.l1_entities.input_modality import InputModality


class AgentProfile(BaseModel):
    name: str
    role: str
    category: str = 'General'
    description: str = ''
    prompt: str = ''
    default_api_model: str = ''
    linked_api_models: list[str] = Field(default_factory=list)
    input_types: list[InputModality] = Field(default_factory=lambda: [InputModality.TEXT])
    status: str = 'active'

    def supports(self, modality: InputModality) -> bool:
        """Only declared input types are accepted; an empty list accepts nothing."""
        return modality in self.input_types

    def model_to_use(self, fallback: str) -> str:
        """Default model, else the first linked model, else *fallback*."""
        if self.default_api_model:
            return self.default_api_model
        if self.linked_api_models:
            return self.linked_api_models[0]
        return fallback
