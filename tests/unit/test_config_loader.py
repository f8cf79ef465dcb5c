"""Unit tests for configuration loading."""

import pytest
import yaml
from pydantic import ValidationError

from jiraassets_provider.utils import env_defaults, load_provider_config


class TestLoadProviderConfig:
    """Tests for load_provider_config."""

    def test_loads_provider_block(self, tmp_path):
        path = tmp_path / "provider.yaml"
        path.write_text("workspace_id: ws-9\nuser: bot@example.com\n", encoding="utf-8")

        config = load_provider_config(path)

        assert config.workspace_id == "ws-9"
        assert config.user == "bot@example.com"
        assert config.password is None

    def test_empty_file(self, tmp_path):
        path = tmp_path / "provider.yaml"
        path.write_text("", encoding="utf-8")

        config = load_provider_config(path)

        assert config.model_dump(exclude_none=True) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_provider_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "provider.yaml"
        path.write_text("workspace_id: [unclosed\n", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            load_provider_config(path)

    def test_unknown_keys_rejected(self, tmp_path):
        path = tmp_path / "provider.yaml"
        path.write_text("host: https://example.atlassian.net\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_provider_config(path)


def test_env_defaults():
    environ = {"JIRAASSETS_WORKSPACE_ID": "ws", "JIRAASSETS_PASSWORD": "tok", "OTHER": "x"}

    assert env_defaults(environ) == {"workspace_id": "ws", "user": "", "password": "tok"}


def test_env_defaults_reads_os_environ(monkeypatch):
    monkeypatch.setenv("JIRAASSETS_USER", "from-env")

    assert env_defaults()["user"] == "from-env"
