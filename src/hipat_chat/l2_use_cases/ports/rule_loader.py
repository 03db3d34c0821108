"""Port: routing rule loader."""

from __future__ import annotations

from typing import Protocol

from hipat_chat.l1_entities.routing_rule import RuleSet, RuleSetMetadata


class RuleLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract rule-set loader."""

    def load(self, ref: str) -> RuleSet:
        """Load a rule set by name or file path."""
        ...

    def list_rule_sets(self) -> list[RuleSetMetadata]:
        """List available rule sets (built-in and user)."""
        ...
