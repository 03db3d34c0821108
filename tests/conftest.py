"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from hipat_chat.l1_entities.agent import AgentProfile
from hipat_chat.l1_entities.chat_message import ChatMessage
from hipat_chat.l1_entities.config import AppConfig
from hipat_chat.l1_entities.errors import AgentNotFoundError, RoutingError
from hipat_chat.l1_entities.input_modality import InputModality
from hipat_chat.l1_entities.routing_rule import RuleSet
from hipat_chat.l1_entities.stored_message import StoredMessage
from hipat_chat.l2_use_cases.ports.llm_client import ChatResponse
from hipat_chat.l3_interface_adapters.gateways.yaml_rule_loader import YamlRuleLoader
from hipat_chat.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeLLMClient:
    """Fake LLM client for L2 use case tests."""

    def __init__(self, response: str = 'Fake LLM response', prompt_tokens: int = 100):
        self._response = response
        self._prompt_tokens = prompt_tokens
        self._error: Exception | None = None
        self.chat_calls: list[tuple[str, list[ChatMessage]]] = []
        self._connectivity = (True, '')
        self._missing_models: list[str] = []

    async def chat(self, model: str, messages: list[ChatMessage]) -> ChatResponse:
        self.chat_calls.append((model, list(messages)))
        if self._error is not None:
            raise self._error
        return ChatResponse(content=self._response, prompt_tokens=self._prompt_tokens)

    def check_connectivity(self) -> tuple[bool, str]:
        return self._connectivity

    def check_models(self, models: list[str]) -> list[str]:
        return [m for m in models if m in self._missing_models]

    def set_response(self, response: str, prompt_tokens: int = 100) -> None:
        self._response = response
        self._prompt_tokens = prompt_tokens

    def set_error(self, error: Exception) -> None:
        self._error = error

    def set_connectivity(self, ok: bool, msg: str = '') -> None:
        self._connectivity = (ok, msg)

    def set_missing_models(self, models: list[str]) -> None:
        self._missing_models = list(models)


class FakeBackend:
    """ResponseBackend that replies with a fixed string and records calls."""

    def __init__(self, reply: str = 'Fake reply', delay: float = 0.0):
        self._reply = reply
        self._delay = delay
        self.calls: list[tuple[str, str | None, InputModality]] = []

    async def respond(
        self,
        text: str,
        agent_role: str | None = None,
        modality: InputModality = InputModality.TEXT,
    ) -> str:
        self.calls.append((text, agent_role, modality))
        if self._delay:
            await asyncio.sleep(self._delay)
        return self._reply


class FailingBackend:
    """ResponseBackend that always raises."""

    def __init__(self, error: Exception | None = None):
        self._error = error or RoutingError('backend exploded')
        self.calls = 0

    async def respond(
        self,
        text: str,
        agent_role: str | None = None,
        modality: InputModality = InputModality.TEXT,
    ) -> str:
        self.calls += 1
        raise self._error


class FakeMessageStore:
    """In-memory MessageStore."""

    def __init__(self, fail: bool = False):
        self.records: list[StoredMessage] = []
        self._fail = fail

    def save(self, record: StoredMessage) -> None:
        if self._fail:
            raise OSError('disk full')
        self.records.append(record)

    def load(self, session_id: str) -> list[StoredMessage]:
        return [r for r in self.records if r.session_id == session_id]


class FakeAgentDirectory:
    """AgentDirectory over a fixed list of profiles."""

    def __init__(self, agents: list[AgentProfile] | None = None):
        self._agents = {a.role.lower(): a for a in (agents or [])}
        self.lookups: list[str] = []

    def get_by_role(self, role: str) -> AgentProfile:
        self.lookups.append(role)
        try:
            return self._agents[role.lower()]
        except KeyError:
            raise AgentNotFoundError(role) from None

    def list_agents(self) -> list[AgentProfile]:
        return sorted(self._agents.values(), key=lambda a: a.name)


# --- Standard Fixtures ---


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'output'
    d.mkdir()
    return d


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def default_rule_set() -> RuleSet:
    return YamlRuleLoader().load('default')


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
router:
  backend: "agent"
  delay: 0.1
  timeout: 5
  rules: "default"
agent:
  role: "Nutrition"
  model: "llama3:8b"
output:
  directory: "./test_output"
  persist: false
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def fake_store() -> FakeMessageStore:
    return FakeMessageStore()
