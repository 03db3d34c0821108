"""Gateway: YAML routing-rule loader — implements RuleLoader port."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import yaml

from hipat_chat.l1_entities.routing_rule import RuleSet, RuleSetMetadata
from hipat_chat.l3_interface_adapters.gateways.paths import USER_RULES_DIR

_RULES_DIR = resources.files('hipat_chat') / 'rules'


def builtin_names() -> set[str]:
    """Discover built-in rule set names from the package rules directory."""
    return {p.name.removesuffix('.yaml') for p in _RULES_DIR.iterdir() if p.name.endswith('.yaml')}


def user_rule_names() -> set[str]:
    if not USER_RULES_DIR.is_dir():
        return set()
    return {p.name.removesuffix('.yaml') for p in USER_RULES_DIR.iterdir() if p.name.endswith('.yaml')}


def all_rule_names() -> set[str]:
    return builtin_names() | user_rule_names()


class YamlRuleLoader:
    """Loads RuleSet from YAML files or built-in resources."""

    def load(self, ref: str) -> RuleSet:
        # 1. Explicit file path
        path = Path(ref)
        if path.exists() and path.is_file():
            return _parse(path.read_text(encoding='utf-8'), key=path.stem)
        # 2. User rule set (overrides built-in of the same name)
        if ref in user_rule_names():
            return _load_user(ref)
        # 3. Built-in rule set
        if ref in builtin_names():
            return _load_builtin(ref)
        available = sorted(all_rule_names())
        raise FileNotFoundError(f"Rule set not found: '{ref}'. Available rule sets: {', '.join(available)}")

    def list_rule_sets(self) -> list[RuleSetMetadata]:
        loaded: dict[str, RuleSetMetadata] = {}
        for name in builtin_names():
            loaded[name] = _load_builtin(name).metadata
        for name in user_rule_names():
            loaded[name] = _load_user(name).metadata
        return [loaded[k] for k in sorted(loaded)]


def _parse(text: str, key: str) -> RuleSet:
    rule_set = RuleSet.model_validate(yaml.safe_load(text) or {})
    rule_set.metadata.key = key
    return rule_set


def _load_builtin(name: str) -> RuleSet:
    return _parse((_RULES_DIR / f'{name}.yaml').read_text(encoding='utf-8'), key=name)


def _load_user(name: str) -> RuleSet:
    return _parse((USER_RULES_DIR / f'{name}.yaml').read_text(encoding='utf-8'), key=name)
