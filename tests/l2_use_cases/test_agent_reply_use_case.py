"""Tests for AgentResponder — L2 use case with fake directory and LLM."""

import pytest

from hipat_chat.l1_entities.agent import AgentProfile
from hipat_chat.l1_entities.errors import RoutingError
from hipat_chat.l1_entities.input_modality import InputModality
from hipat_chat.l2_use_cases.agent_reply_use_case import AgentResponder
from hipat_chat.l2_use_cases.utils.prompt_builder import DEFAULT_SYSTEM_PROMPT
from tests.conftest import FakeAgentDirectory, FakeLLMClient

MANAGER = AgentProfile(name='Manager', role='Manager', prompt='You are Pat.', input_types=list(InputModality))
NUTRITION = AgentProfile(
    name='Nutrition Assistant',
    role='Nutrition',
    input_types=[InputModality.TEXT, InputModality.PHOTO],
    default_api_model='food-model',
)


def _responder(llm: FakeLLMClient, agents=None) -> AgentResponder:
    directory = FakeAgentDirectory([MANAGER, NUTRITION] if agents is None else agents)
    return AgentResponder(directory, llm, default_role='Manager', default_model='llama3.2')


class TestAgentResponder:
    @pytest.mark.asyncio
    async def test_uses_agent_prompt_and_model(self):
        llm = FakeLLMClient('Eat more greens.')
        reply = await _responder(llm).respond('lunch ideas', agent_role='Nutrition')

        assert reply == 'Eat more greens.'
        model, messages = llm.chat_calls[0]
        assert model == 'food-model'
        assert messages[0].role == 'system'
        assert 'Nutrition Assistant' in messages[0].content
        assert messages[1].content == 'lunch ideas'

    @pytest.mark.asyncio
    async def test_role_lookup_ignores_case(self):
        llm = FakeLLMClient()
        await _responder(llm).respond('x', agent_role='nutrition')
        assert llm.chat_calls[0][0] == 'food-model'

    @pytest.mark.asyncio
    async def test_unknown_role_falls_back_to_default(self):
        llm = FakeLLMClient()
        await _responder(llm).respond('x', agent_role='Astrology')
        _, messages = llm.chat_calls[0]
        assert messages[0].content == 'You are Pat.'

    @pytest.mark.asyncio
    async def test_no_agents_uses_generic_persona(self):
        llm = FakeLLMClient()
        await _responder(llm, agents=[]).respond('x')
        model, messages = llm.chat_calls[0]
        assert model == 'llama3.2'
        assert messages[0].content == DEFAULT_SYSTEM_PROMPT

    @pytest.mark.asyncio
    async def test_unsupported_modality_skips_llm(self):
        llm = FakeLLMClient()
        reply = await _responder(llm).respond('x', agent_role='Nutrition', modality=InputModality.VOICE)
        assert reply == (
            "Sorry, the Nutrition Assistant agent doesn't support voice input. Please try using text instead."
        )
        assert llm.chat_calls == []

    @pytest.mark.asyncio
    async def test_agent_without_input_types_rejects_text(self):
        llm = FakeLLMClient()
        mute = AgentProfile(name='Mute', role='Mute', input_types=[])
        reply = await _responder(llm, agents=[mute]).respond('hello', agent_role='Mute')
        assert "doesn't support text input" in reply
        assert llm.chat_calls == []

    @pytest.mark.asyncio
    async def test_photo_prefix(self):
        llm = FakeLLMClient()
        await _responder(llm).respond('salad', agent_role='Nutrition', modality=InputModality.PHOTO)
        assert llm.chat_calls[0][1][1].content == '[Photo Analysis] salad'

    @pytest.mark.asyncio
    async def test_llm_error_wrapped(self):
        llm = FakeLLMClient()
        llm.set_error(ConnectionError('refused'))
        with pytest.raises(RoutingError, match='LLM error'):
            await _responder(llm).respond('x')

    @pytest.mark.asyncio
    async def test_empty_reply_raises(self):
        llm = FakeLLMClient('   ')
        with pytest.raises(RoutingError, match='Empty response'):
            await _responder(llm).respond('x')

    @pytest.mark.asyncio
    async def test_reply_is_stripped(self):
        reply = await _responder(FakeLLMClient('  ok \n')).respond('x')
        assert reply == 'ok'
