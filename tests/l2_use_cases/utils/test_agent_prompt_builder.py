"""Tests for prompt builder utilities."""

from hipat_chat.l1_entities.agent import AgentProfile
from hipat_chat.l1_entities.input_modality import InputModality
from hipat_chat.l2_use_cases.utils.prompt_builder import (
    DEFAULT_SYSTEM_PROMPT,
    build_agent_messages,
    build_system_prompt,
    build_user_prompt,
    modality_prefix,
)


class TestBuildSystemPrompt:
    def test_no_agent(self):
        assert build_system_prompt(None) == DEFAULT_SYSTEM_PROMPT

    def test_agent_prompt_wins(self):
        agent = AgentProfile(name='Coach', role='Support', prompt='  Be kind.  ')
        assert build_system_prompt(agent) == 'Be kind.'

    def test_persona_from_metadata(self):
        agent = AgentProfile(name='Workout Analyzer', role='Fitness', description='Reviews routines')
        prompt = build_system_prompt(agent)
        assert prompt.startswith('You are Workout Analyzer, acting as the Fitness agent. Reviews routines.')
        assert prompt.endswith(DEFAULT_SYSTEM_PROMPT)


class TestUserPrompt:
    def test_prefixes(self):
        assert modality_prefix(InputModality.TEXT) == ''
        assert build_user_prompt(' squats ', InputModality.VOICE) == '[Voice Transcription] squats'

    def test_messages_pair(self):
        messages = build_agent_messages(None, 'hello')
        assert [m.role for m in messages] == ['system', 'user']
        assert messages[1].content == 'hello'
