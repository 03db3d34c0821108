"""Gateway: OpenAI-compatible LLM client — implements LLMClient port.

Any OpenAI-compatible endpoint works (OpenAI, Groq, Together, vLLM, ...).
"""

from __future__ import annotations

import openai

from hipat_chat.l1_entities.chat_message import ChatMessage
from hipat_chat.l2_use_cases.ports.llm_client import ChatResponse, to_wire


class OpenAICompatLLMClient:
    """Wraps openai.AsyncOpenAI to implement the LLMClient protocol."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = 'https://api.openai.com/v1',
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key  # None → SDK reads OPENAI_API_KEY
        self._base_url = base_url
        self._timeout = timeout
        self._async_client: openai.AsyncOpenAI | None = None

    def _client(self) -> openai.AsyncOpenAI:
        if self._async_client is None:
            self._async_client = openai.AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
            )
        return self._async_client

    def _sync_client(self) -> openai.OpenAI:
        return openai.OpenAI(api_key=self._api_key, base_url=self._base_url, timeout=self._timeout)

    async def chat(self, model: str, messages: list[ChatMessage]) -> ChatResponse:
        resp = await self._client().chat.completions.create(
            model=model,
            messages=to_wire(messages),  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
        )
        content = (resp.choices[0].message.content or '') if resp.choices else ''
        prompt_tokens = resp.usage.prompt_tokens if resp.usage else 0
        return ChatResponse(content=content, prompt_tokens=prompt_tokens)

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            self._sync_client().models.list()
        except openai.AuthenticationError as e:
            return False, f'Authentication failed: {e}'
        except Exception as e:
            return False, f'Cannot connect to {self._base_url}: {e}'
        return True, ''

    def check_models(self, models: list[str]) -> list[str]:
        """Models the endpoint reports as missing. Empty if the endpoint can't be asked."""
        client = self._sync_client()
        missing = []
        for model in models:
            try:
                client.models.retrieve(model)
            except openai.NotFoundError:
                missing.append(model)
            except Exception:
                return []
        return missing
