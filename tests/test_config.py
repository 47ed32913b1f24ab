"""Tests for ghstatus.config."""

from __future__ import annotations

import pytest

from ghstatus.config import (
    DEFAULT_API_URL,
    DEFAULT_REMOTE,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    Config,
)


class TestConfigDefaults:
    def test_default_values(self):
        config = Config()
        assert config.token == ""
        assert config.owner == ""
        assert config.repo == ""
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.api_url == DEFAULT_API_URL
        assert config.remote == DEFAULT_REMOTE
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.debug is False

    def test_is_immutable(self):
        config = Config()
        with pytest.raises(AttributeError):
            config.token = "changed"


class TestConfigLoad:
    def test_load_from_env(self, clean_env):
        clean_env.setenv("GITHUB_STATUS_ACCESS_TOKEN", "ghp_test123")
        clean_env.setenv("GITHUB_STATUS_REPO_OWNER", "acme")
        clean_env.setenv("GITHUB_STATUS_REPO_NAME", "widget")
        clean_env.setenv("GITHUB_STATUS_USER_AGENT", "acme-ci")
        clean_env.setenv("GITHUB_STATUS_API_URL", "https://ghe.acme.com/api/v3/")
        clean_env.setenv("GITHUB_STATUS_REMOTE", "upstream")
        clean_env.setenv("GITHUB_STATUS_TIMEOUT", "5")
        clean_env.setenv("DEBUG", "1")

        config = Config.load()
        assert config.token == "ghp_test123"
        assert config.owner == "acme"
        assert config.repo == "widget"
        assert config.user_agent == "acme-ci"
        assert config.api_url == "https://ghe.acme.com/api/v3"
        assert config.remote == "upstream"
        assert config.timeout == 5
        assert config.debug is True

    def test_load_defaults_when_env_empty(self, clean_env):
        config = Config.load()
        assert config == Config()

    def test_empty_user_agent_falls_back(self, clean_env):
        clean_env.setenv("GITHUB_STATUS_USER_AGENT", "")
        assert Config.load().user_agent == DEFAULT_USER_AGENT

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_bad_timeout_falls_back(self, clean_env, value):
        clean_env.setenv("GITHUB_STATUS_TIMEOUT", value)
        assert Config.load().timeout == DEFAULT_TIMEOUT

    @pytest.mark.parametrize("value", ["0", "false", "FALSE", "no", ""])
    def test_debug_off_values(self, clean_env, value):
        clean_env.setenv("DEBUG", value)
        assert Config.load().debug is False


class TestConfigValidate:
    def test_validate_missing_token(self):
        issues = Config().validate()
        assert len(issues) == 1
        assert "GITHUB_STATUS_ACCESS_TOKEN" in issues[0]

    def test_validate_present(self):
        assert Config(token="ghp_xxx").validate() == []

    def test_owner_and_repo_are_not_required_here(self):
        # They can come from flags, so the CLI checks them per command.
        assert Config(token="ghp_xxx", owner="", repo="").validate() == []
