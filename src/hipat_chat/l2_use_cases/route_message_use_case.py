"""Use case: route a user message to a reply, failing soft."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from hipat_chat.l1_entities.input_modality import InputModality
from hipat_chat.l1_entities.routing_rule import RuleSet
from hipat_chat.l2_use_cases.ports.response_backend import ResponseBackend

log = logging.getLogger('hipat.router')

DEFAULT_APOLOGY = RuleSet.model_fields['apology'].default


@dataclass(frozen=True)
class RouteResult:
    """Reply text plus the failure reason when the backend did not answer.

    On failure *text* is the user-safe apology and *error* holds the diagnostic.
    """

    text: str
    error: str = ''

    @property
    def ok(self) -> bool:
        return not self.error


class KeywordResponder:
    """Placeholder backend: canned replies chosen by substring match after a simulated delay."""

    def __init__(self, rule_set: RuleSet, delay: float = 0.8) -> None:
        self._rules = rule_set
        self._delay = delay

    @property
    def rule_set(self) -> RuleSet:
        return self._rules

    async def respond(
        self,
        text: str,
        agent_role: str | None = None,
        modality: InputModality = InputModality.TEXT,
    ) -> str:
        if self._delay > 0:
            await asyncio.sleep(self._delay)
        rule = self._rules.first_match(text)
        log.debug('Keyword route: %r -> %s', text[:80], rule.name if rule else 'fallback')
        return self._rules.respond(text)


class MessageRouter:
    """Maps input text to a reply through a ResponseBackend.

    ``route`` never raises: blank input, backend errors and timeouts are
    logged and replaced by the apology text.
    """

    def __init__(
        self,
        backend: ResponseBackend,
        *,
        apology: str = DEFAULT_APOLOGY,
        timeout: float | None = None,
        agent_role: str | None = None,
        modality: InputModality = InputModality.TEXT,
    ) -> None:
        self._backend = backend
        self._apology = apology
        self._timeout = timeout
        self.agent_role = agent_role
        self.modality = modality

    @property
    def backend(self) -> ResponseBackend:
        return self._backend

    async def execute(self, text: str) -> RouteResult:
        """Route *text*. Failures come back as a RouteResult carrying the apology."""
        if not text.strip():
            log.warning('Blank input reached the router')
            return RouteResult(text=self._apology, error='blank input')

        log.info('Route request: %d chars, agent=%s, modality=%s', len(text), self.agent_role, self.modality.value)
        try:
            call = self._backend.respond(text, agent_role=self.agent_role, modality=self.modality)
            if self._timeout is not None:
                reply = await asyncio.wait_for(call, timeout=self._timeout)
            else:
                reply = await call
        except asyncio.TimeoutError:
            err = f'Backend timed out after {self._timeout}s'
            log.warning(err)
            return RouteResult(text=self._apology, error=err)
        except Exception as e:
            err = f'Backend error: {type(e).__name__}: {e}'
            log.error(err, exc_info=True)
            return RouteResult(text=self._apology, error=err)

        log.debug('Route reply (%d chars): %s', len(reply), reply[:200])
        return RouteResult(text=reply)

    async def route(self, text: str) -> str:
        """Reply text for *text*; the apology when the backend failed."""
        result = await self.execute(text)
        return result.text
