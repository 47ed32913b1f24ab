"""Configuration loading for ghstatus.

Config sources (in priority order):
1. Command-line flags (-owner, -repo)
2. Environment variables (GITHUB_STATUS_ACCESS_TOKEN, etc.)
3. .env file in current directory
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_USER_AGENT = "ghstatus"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_REMOTE = "origin"
DEFAULT_TIMEOUT = 30  # seconds


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() not in ("", "0", "false", "no")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Config:
    token: str = ""
    owner: str = ""
    repo: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    api_url: str = DEFAULT_API_URL
    remote: str = DEFAULT_REMOTE
    timeout: int = DEFAULT_TIMEOUT
    debug: bool = False

    @classmethod
    def load(cls) -> Config:
        return cls(
            token=os.getenv("GITHUB_STATUS_ACCESS_TOKEN", ""),
            owner=os.getenv("GITHUB_STATUS_REPO_OWNER", ""),
            repo=os.getenv("GITHUB_STATUS_REPO_NAME", ""),
            user_agent=os.getenv("GITHUB_STATUS_USER_AGENT") or DEFAULT_USER_AGENT,
            api_url=(os.getenv("GITHUB_STATUS_API_URL") or DEFAULT_API_URL).rstrip("/"),
            remote=os.getenv("GITHUB_STATUS_REMOTE") or DEFAULT_REMOTE,
            timeout=_env_int("GITHUB_STATUS_TIMEOUT", DEFAULT_TIMEOUT),
            debug=_env_flag("DEBUG"),
        )

    def validate(self) -> list[str]:
        """Return a list of missing config issues."""
        issues = []
        if not self.token:
            issues.append("Access token not set (GITHUB_STATUS_ACCESS_TOKEN)")
        return issues
