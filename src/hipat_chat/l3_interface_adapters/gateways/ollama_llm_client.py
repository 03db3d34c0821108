"""Gateway: Ollama LLM client — implements LLMClient port."""

from __future__ import annotations

import ollama

from hipat_chat.l1_entities.chat_message import ChatMessage
from hipat_chat.l2_use_cases.ports.llm_client import ChatResponse, to_wire


class OllamaLLMClient:
    """Wraps ollama.AsyncClient to implement the LLMClient protocol.

    The async client is created on first use so constructing the gateway never
    touches the network.
    """

    def __init__(self, host: str = 'http://localhost:11434', timeout: float | None = None) -> None:
        self._host = host
        self._timeout = timeout
        self._async_client: ollama.AsyncClient | None = None

    def _client(self) -> ollama.AsyncClient:
        if self._async_client is None:
            self._async_client = ollama.AsyncClient(host=self._host, timeout=self._timeout)
        return self._async_client

    async def chat(self, model: str, messages: list[ChatMessage]) -> ChatResponse:
        resp = await self._client().chat(model=model, messages=to_wire(messages))
        return ChatResponse(
            content=resp.message.content or '',
            prompt_tokens=getattr(resp, 'prompt_eval_count', 0) or 0,
        )

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            ollama.Client(host=self._host).list()
        except Exception as e:
            return False, f'Cannot connect to Ollama at {self._host}: {e}'
        return True, ''

    def check_models(self, models: list[str]) -> list[str]:
        """Return models not pulled locally. Empty list if Ollama is unreachable."""
        client = ollama.Client(host=self._host)
        missing = []
        for model in models:
            try:
                client.show(model)
            except ollama.ResponseError:
                missing.append(model)
            except Exception:
                return []
        return missing
