"""Gateway: YAML agent directory — implements AgentDirectory port."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

import yaml
from pydantic import TypeAdapter

from hipat_chat.l1_entities.agent import AgentProfile
from hipat_chat.l1_entities.errors import AgentNotFoundError
from hipat_chat.l3_interface_adapters.gateways.paths import USER_AGENTS_PATH

log = logging.getLogger('hipat.agent')

_BUILTIN_AGENTS = resources.files('hipat_chat') / 'agents' / 'default.yaml'
_AGENT_LIST = TypeAdapter(list[AgentProfile])


def _parse_agents(text: str) -> list[AgentProfile]:
    data = yaml.safe_load(text) or {}
    return _AGENT_LIST.validate_python(data.get('agents', []))


class YamlAgentDirectory:
    """Built-in agents, overridden role-by-role by the user's agents file."""

    def __init__(self, user_path: Path | None = USER_AGENTS_PATH, *, include_builtin: bool = True) -> None:
        self._agents: dict[str, AgentProfile] = {}
        if include_builtin:
            for agent in _parse_agents(_BUILTIN_AGENTS.read_text(encoding='utf-8')):
                self._agents[agent.role.lower()] = agent
        if user_path is not None and user_path.is_file():
            user_agents = _parse_agents(user_path.read_text(encoding='utf-8'))
            log.debug('Loaded %d user agents from %s', len(user_agents), user_path)
            for agent in user_agents:
                self._agents[agent.role.lower()] = agent

    def get_by_role(self, role: str) -> AgentProfile:
        try:
            return self._agents[role.lower()]
        except KeyError:
            raise AgentNotFoundError(f"No agent with role '{role}'") from None

    def list_agents(self) -> list[AgentProfile]:
        return sorted(self._agents.values(), key=lambda a: a.name)
