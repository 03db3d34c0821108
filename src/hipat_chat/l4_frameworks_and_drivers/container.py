"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from hipat_chat.l1_entities.config import AppConfig
from hipat_chat.l1_entities.routing_rule import RuleSet
from hipat_chat.l2_use_cases.agent_reply_use_case import AgentResponder
from hipat_chat.l2_use_cases.ports.agent_directory import AgentDirectory
from hipat_chat.l2_use_cases.ports.llm_client import LLMClient
from hipat_chat.l2_use_cases.ports.message_store import MessageStore
from hipat_chat.l2_use_cases.ports.response_backend import ResponseBackend
from hipat_chat.l2_use_cases.ports.rule_loader import RuleLoader
from hipat_chat.l2_use_cases.route_message_use_case import KeywordResponder, MessageRouter
from hipat_chat.l3_interface_adapters.controllers.chat_controller import ChatController
from hipat_chat.l3_interface_adapters.gateways.jsonl_message_store import JsonlMessageStore
from hipat_chat.l3_interface_adapters.gateways.ollama_llm_client import OllamaLLMClient
from hipat_chat.l3_interface_adapters.gateways.openai_llm_client import OpenAICompatLLMClient
from hipat_chat.l3_interface_adapters.gateways.yaml_agent_directory import YamlAgentDirectory
from hipat_chat.l3_interface_adapters.gateways.yaml_rule_loader import YamlRuleLoader
from hipat_chat.l4_frameworks_and_drivers.infra_config import InfraConfig


def build_llm_client(infra: InfraConfig) -> LLMClient:
    if infra.llm_provider == 'openai':
        return OpenAICompatLLMClient(
            api_key=infra.openai.api_key,
            base_url=infra.openai.base_url,
            timeout=infra.request_timeout,
        )
    return OllamaLLMClient(host=infra.ollama.host, timeout=infra.request_timeout)


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        output_dir: Path,
        infra: InfraConfig | None = None,
        session_id: str | None = None,
    ) -> None:
        self.config = config
        self.output_dir = output_dir

        _infra = infra or InfraConfig()
        self.rule_set: RuleSet = self.rule_loader().load(config.router.rules)
        self.store: MessageStore | None = JsonlMessageStore(output_dir) if config.output.persist else None
        self.agent_directory: AgentDirectory = YamlAgentDirectory()
        self.llm_client: LLMClient = build_llm_client(_infra)
        self.backend: ResponseBackend = self._build_backend()

        self.router = MessageRouter(
            self.backend,
            apology=self.rule_set.apology,
            timeout=config.router.timeout,
            agent_role=config.agent.role,
            modality=config.agent.modality,
        )
        self.controller = ChatController(router=self.router, store=self.store, session_id=session_id)

    def _build_backend(self) -> ResponseBackend:
        if self.config.router.backend == 'agent':
            return AgentResponder(
                self.agent_directory,
                self.llm_client,
                default_role=self.config.agent.role,
                default_model=self.config.agent.model,
            )
        return KeywordResponder(self.rule_set, delay=self.config.router.delay)

    @staticmethod
    def rule_loader() -> RuleLoader:
        return YamlRuleLoader()
