"""Pure functions for building agent prompts."""

from __future__ import annotations

from hipat_chat.l1_entities.agent import AgentProfile
from hipat_chat.l1_entities.chat_message import ChatMessage
from hipat_chat.l1_entities.input_modality import InputModality

DEFAULT_SYSTEM_PROMPT = (
    "You are Pat, the user's personal assistant for fitness and nutrition. "
    'Answer briefly and concretely. If a question is outside fitness, nutrition '
    'or general wellbeing, give general guidance and say so.'
)

_MODALITY_PREFIX = {
    InputModality.TEXT: '',
    InputModality.VOICE: '[Voice Transcription] ',
    InputModality.PHOTO: '[Photo Analysis] ',
}


def modality_prefix(modality: InputModality) -> str:
    return _MODALITY_PREFIX[modality]


def build_system_prompt(agent: AgentProfile | None) -> str:
    """Agent's own prompt if it has one, otherwise a persona line built from its metadata."""
    if agent is None:
        return DEFAULT_SYSTEM_PROMPT
    if agent.prompt.strip():
        return agent.prompt.strip()
    persona = f'You are {agent.name}, acting as the {agent.role} agent.'
    if agent.description:
        persona += f' {agent.description}.'
    return f'{persona} {DEFAULT_SYSTEM_PROMPT}'


def build_user_prompt(text: str, modality: InputModality = InputModality.TEXT) -> str:
    return f'{modality_prefix(modality)}{text.strip()}'


def build_agent_messages(
    agent: AgentProfile | None,
    text: str,
    modality: InputModality = InputModality.TEXT,
) -> list[ChatMessage]:
    """System + user message pair for a single agent turn."""
    return [
        ChatMessage(role='system', content=build_system_prompt(agent)),
        ChatMessage(role='user', content=build_user_prompt(text, modality)),
    ]


def unsupported_modality_reply(agent: AgentProfile, modality: InputModality) -> str:
    return (
        f"Sorry, the {agent.name} agent doesn't support {modality.value} input. "
        'Please try using text instead.'
    )
