"""Tests for YAML config loader gateway."""

from unittest.mock import patch

import pytest

from hipat_chat.l3_interface_adapters.gateways.yaml_config_loader import (
    CONFIG_ENV_VAR,
    YamlConfigLoader,
    deep_merge,
    resolve_config_path,
)

_DEFAULT_PATHS = 'hipat_chat.l3_interface_adapters.gateways.yaml_config_loader.DEFAULT_CONFIG_PATHS'


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """No env var, empty cwd, no user config."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    with patch(_DEFAULT_PATHS, [tmp_path / 'user' / 'config.yaml']):
        yield tmp_path


class TestDeepMerge:
    def test_nested(self):
        base = {'router': {'backend': 'keyword', 'delay': 0.8}}
        deep_merge(base, {'router': {'delay': 0.0}})
        assert base == {'router': {'backend': 'keyword', 'delay': 0.0}}

    def test_replaces_non_dict(self):
        assert deep_merge({'a': 1}, {'a': {'b': 2}}) == {'a': {'b': 2}}


class TestResolveConfigPath:
    def test_nothing_found(self, isolated):
        assert resolve_config_path() is None

    def test_explicit_missing_raises(self, isolated):
        with pytest.raises(FileNotFoundError):
            resolve_config_path(str(isolated / 'nope.yaml'))

    def test_env_var(self, isolated, monkeypatch):
        cfg = isolated / 'env.yaml'
        cfg.write_text('{}', encoding='utf-8')
        monkeypatch.setenv(CONFIG_ENV_VAR, str(cfg))
        assert resolve_config_path() == cfg

    def test_env_var_missing_raises(self, isolated, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(isolated / 'gone.yaml'))
        with pytest.raises(FileNotFoundError):
            resolve_config_path()

    def test_local_file_beats_user_config(self, isolated):
        user = isolated / 'user'
        user.mkdir()
        (user / 'config.yaml').write_text('{}', encoding='utf-8')
        local = isolated / 'hipat.yaml'
        local.write_text('{}', encoding='utf-8')
        assert resolve_config_path() == local

    def test_user_config(self, isolated):
        user = isolated / 'user'
        user.mkdir()
        (user / 'config.yaml').write_text('{}', encoding='utf-8')
        assert resolve_config_path() == user / 'config.yaml'


class TestYamlConfigLoader:
    def test_explicit_path(self, sample_config_yaml):
        cfg = YamlConfigLoader().load(str(sample_config_yaml))
        assert cfg.router.backend == 'agent'
        assert cfg.agent.role == 'Nutrition'
        assert cfg.output.persist is False

    def test_overrides_applied(self, sample_config_yaml):
        raw = YamlConfigLoader().load_raw(str(sample_config_yaml), overrides={'agent': {'role': 'Fitness'}})
        assert raw['agent'] == {'role': 'Fitness', 'model': 'llama3:8b'}

    def test_no_config_anywhere(self, isolated):
        assert YamlConfigLoader().load_raw() == {}

    def test_empty_file(self, isolated):
        (isolated / 'hipat.yaml').write_text('', encoding='utf-8')
        assert YamlConfigLoader().load_raw(overrides={'router': {'delay': 0}}) == {'router': {'delay': 0}}

    def test_non_mapping_rejected(self, isolated):
        (isolated / 'hipat.yaml').write_text('- just\n- a list\n', encoding='utf-8')
        with pytest.raises(ValueError, match='YAML mapping'):
            YamlConfigLoader().load_raw()
