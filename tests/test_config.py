"""Tests for src/config.py — ProvisionerConfig, TOML loading, overrides."""

import pytest
from pydantic import ValidationError

from provisioner import config as config_module
from provisioner.config import (
    ProvisionerConfig,
    ProvisionSectionConfig,
    load_config,
    merge_cli_overrides,
)

ENV_VARS = (
    "PROVISIONER_LINK_EXPIRATION_SECONDS",
    "PROVISIONER_DEFAULT_LINK",
    "PROVISIONER_STORE_DIR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Isolate tests from real env vars and the user's global config."""
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config_module, "GLOBAL_CONFIG_PATH", tmp_path / "no-global.toml")


class TestDefaults:
    def test_provision_section(self):
        cfg = ProvisionerConfig()
        assert cfg.provision.link_expiration_seconds == 3600
        assert cfg.provision.default_link == "http://default.com"

    def test_store_section(self):
        assert ProvisionerConfig().store.directory == "."

    def test_rejects_non_positive_expiration(self):
        with pytest.raises(ValidationError):
            ProvisionSectionConfig(link_expiration_seconds=0)


class TestLoadConfig:
    def test_load_from_explicit_path(self, tmp_path):
        toml_path = tmp_path / ".provisioner.toml"
        toml_path.write_text(
            '[provision]\nlink_expiration_seconds = 120\ndefault_link = "https://fallback.test"\n'
            '[store]\ndirectory = "/srv/content"\n'
        )
        cfg = load_config(toml_path)
        assert cfg.provision.link_expiration_seconds == 120
        assert cfg.provision.default_link == "https://fallback.test"
        assert cfg.store.directory == "/srv/content"

    def test_load_missing_path_returns_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "nonexistent.toml")
        assert cfg.provision.link_expiration_seconds == 3600

    def test_load_searches_cwd(self, tmp_path, monkeypatch):
        (tmp_path / ".provisioner.toml").write_text("[provision]\nlink_expiration_seconds = 30\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().provision.link_expiration_seconds == 30

    def test_load_falls_back_to_global_config(self, tmp_path, monkeypatch):
        global_path = tmp_path / "global.toml"
        global_path.write_text('[store]\ndirectory = "/global"\n')
        monkeypatch.setattr(config_module, "GLOBAL_CONFIG_PATH", global_path)
        monkeypatch.chdir(tmp_path)
        assert load_config().store.directory == "/global"

    def test_invalid_toml_returns_defaults(self, tmp_path):
        toml_path = tmp_path / "bad.toml"
        toml_path.write_text("this is [not valid toml")
        assert load_config(toml_path).provision.default_link == "http://default.com"


class TestEnvVars:
    def test_env_overrides_toml(self, tmp_path, monkeypatch):
        toml_path = tmp_path / "cfg.toml"
        toml_path.write_text("[provision]\nlink_expiration_seconds = 120\n")
        monkeypatch.setenv("PROVISIONER_LINK_EXPIRATION_SECONDS", "900")
        monkeypatch.setenv("PROVISIONER_DEFAULT_LINK", "https://env.test")
        monkeypatch.setenv("PROVISIONER_STORE_DIR", "/env/store")

        cfg = load_config(toml_path)
        assert cfg.provision.link_expiration_seconds == 900
        assert cfg.provision.default_link == "https://env.test"
        assert cfg.store.directory == "/env/store"

    def test_invalid_env_value_raises(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PROVISIONER_LINK_EXPIRATION_SECONDS", "-1")
        with pytest.raises(ValidationError):
            load_config(tmp_path / "missing.toml")


class TestMergeCliOverrides:
    def test_overrides_only_set_values(self):
        cfg = merge_cli_overrides(
            ProvisionerConfig(),
            store_directory="/cli",
            link_expiration_seconds=None,
        )
        assert cfg.store.directory == "/cli"
        assert cfg.provision.link_expiration_seconds == 3600

    def test_ignores_unknown_keys(self):
        cfg = merge_cli_overrides(ProvisionerConfig(), unknown="value")
        assert cfg == ProvisionerConfig()
