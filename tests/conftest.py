"""Shared test fixtures for ghstatus."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from ghstatus.config import Config

from helpers import CREATE_SHA, GET_SHA

ENV_KEYS = [
    "GITHUB_STATUS_ACCESS_TOKEN",
    "GITHUB_STATUS_REPO_OWNER",
    "GITHUB_STATUS_REPO_NAME",
    "GITHUB_STATUS_USER_AGENT",
    "GITHUB_STATUS_API_URL",
    "GITHUB_STATUS_REMOTE",
    "GITHUB_STATUS_TIMEOUT",
    "DEBUG",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def token_env(clean_env: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    clean_env.setenv("GITHUB_STATUS_ACCESS_TOKEN", "ghp_test123")
    return clean_env


@pytest.fixture
def config() -> Config:
    return Config(token="ghp_test123", user_agent="ghstatus-tests")


@pytest.fixture
def combined_status_payload() -> dict:
    return {
        "state": "success",
        "repository": {"full_name": "acme/widget"},
        "sha": GET_SHA,
        "statuses": [
            {
                "state": "success",
                "context": "ci/x",
                "description": "ok",
                "target_url": "http://x",
            }
        ],
    }


@pytest.fixture
def created_status_payload() -> dict:
    return {
        "url": f"https://api.github.com/repos/acme/widget/statuses/{CREATE_SHA}",
        "id": 1,
        "state": "success",
        "description": "Good Job",
        "target_url": "http://x",
        "context": "ci",
    }


@pytest.fixture
def mock_github(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace PyGithub's Github class; configure ``requester.requestJson`` per test."""
    github_cls = MagicMock(name="Github")
    monkeypatch.setattr("ghstatus.github.client.Github", github_cls)
    return github_cls
