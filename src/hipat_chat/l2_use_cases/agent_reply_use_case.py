"""Use case: answer a message through an agent profile and an LLM."""

from __future__ import annotations

import logging

from hipat_chat.l1_entities.agent import AgentProfile
from hipat_chat.l1_entities.errors import AgentNotFoundError, RoutingError
from hipat_chat.l1_entities.input_modality import InputModality
from hipat_chat.l2_use_cases.ports.agent_directory import AgentDirectory
from hipat_chat.l2_use_cases.ports.llm_client import LLMClient
from hipat_chat.l2_use_cases.utils.prompt_builder import build_agent_messages, unsupported_modality_reply

log = logging.getLogger('hipat.agent')


class AgentResponder:
    """ResponseBackend that looks up an agent by role and asks the LLM with its prompt.

    Unknown roles fall back to the default role, then to a generic persona.
    """

    def __init__(
        self,
        directory: AgentDirectory,
        llm_client: LLMClient,
        *,
        default_role: str,
        default_model: str,
    ) -> None:
        self._directory = directory
        self._llm = llm_client
        self._default_role = default_role
        self._default_model = default_model

    def resolve_agent(self, role: str | None) -> AgentProfile | None:
        for candidate in dict.fromkeys([role or self._default_role, self._default_role]):
            try:
                return self._directory.get_by_role(candidate)
            except AgentNotFoundError:
                log.warning('No agent with role %r', candidate)
        return None

    async def respond(
        self,
        text: str,
        agent_role: str | None = None,
        modality: InputModality = InputModality.TEXT,
    ) -> str:
        agent = self.resolve_agent(agent_role)
        if agent is not None and not agent.supports(modality):
            log.info('Agent %s rejected %s input', agent.name, modality.value)
            return unsupported_modality_reply(agent, modality)

        model = agent.model_to_use(self._default_model) if agent else self._default_model
        messages = build_agent_messages(agent, text, modality)
        log.info('Agent request: agent=%s, model=%s', agent.name if agent else '(default)', model)

        try:
            resp = await self._llm.chat(model=model, messages=messages)
        except Exception as e:
            raise RoutingError(f'LLM error: {type(e).__name__}: {e}') from e

        content = resp.content.strip()
        if not content:
            raise RoutingError('Empty response from LLM')
        return content
