"""Routing rule models — pure data, no I/O."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator


class RuleSetMetadata(BaseModel):
    name: str = ''
    description: str = ''
    key: str = ''  # file key (set by loader, not stored in YAML)


class RoutingRule(BaseModel):
    """One keyword group. Matches when any keyword occurs in the input, ignoring case."""

    name: str
    keywords: list[str]
    response: str

    @field_validator('keywords')
    @classmethod
    def _normalize_keywords(cls, value: list[str]) -> list[str]:
        cleaned = [k.strip().lower() for k in value if k.strip()]
        if not cleaned:
            raise ValueError('A routing rule needs at least one non-blank keyword')
        return cleaned

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return any(k in lowered for k in self.keywords)

    def render(self, text: str) -> str:
        return self.response.replace('{text}', text)


class RuleSet(BaseModel):
    """Ordered rule table. First matching rule wins; otherwise the fallback echoes the input."""

    metadata: RuleSetMetadata = Field(default_factory=RuleSetMetadata)
    rules: list[RoutingRule] = Field(default_factory=list)
    fallback: str = "I understand you're asking about: {text}. I'm still learning but I'll do my best to help!"
    apology: str = 'Sorry, something went wrong while processing your message. Please try again.'

    @model_validator(mode='after')
    def _validate_fallback(self) -> RuleSet:
        if '{text}' not in self.fallback:
            raise ValueError('fallback must contain the {text} placeholder')
        return self

    def first_match(self, text: str) -> RoutingRule | None:
        for rule in self.rules:
            if rule.matches(text):
                return rule
        return None

    def respond(self, text: str) -> str:
        rule = self.first_match(text)
        if rule is None:
            return self.fallback.replace('{text}', text)
        return rule.render(text)
