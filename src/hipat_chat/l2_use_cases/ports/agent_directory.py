"""Port: agent directory."""

from __future__ import annotations

from typing import Protocol

from hipat_chat.l1_entities.agent import AgentProfile


class AgentDirectory(Protocol):
    """Abstract lookup of agent profiles."""

    def get_by_role(self, role: str) -> AgentProfile:
        """Return the agent for *role*. Raises AgentNotFoundError."""
        ...

    def list_agents(self) -> list[AgentProfile]:
        """All known agents, sorted by name."""
        ...
