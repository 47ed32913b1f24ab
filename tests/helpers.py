"""Constants and stand-ins shared by the ghstatus tests."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from unittest.mock import MagicMock

GET_SHA = "82b84033e4a9c1f0d2b7a5e6c3d8f9a0b1c2d3e4"
CREATE_SHA = "2a6edbf2c9e1b4d7a0f3e6c8b5d2a9f1e4c7b0d3"


def respond(github_cls: MagicMock, status: int, payload: dict | str) -> MagicMock:
    """Make the mocked requester answer with ``status`` and ``payload``."""
    body = payload if isinstance(payload, str) else json.dumps(payload)
    request_json = github_cls.return_value.requester.requestJson
    request_json.return_value = (status, {}, body)
    return request_json


def fake_git(fetch_head: Path | None):
    """subprocess.run stand-in: fetch succeeds only when ``fetch_head`` is given."""

    def run(cmd, **kwargs):
        args = cmd[1:]
        if args[0] == "fetch":
            if fetch_head is None:
                return subprocess.CompletedProcess(
                    cmd, 128, stdout="", stderr="fatal: couldn't find remote ref"
                )
            return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")
        if args[:2] == ["rev-parse", "--git-path"]:
            return subprocess.CompletedProcess(cmd, 0, stdout=f"{fetch_head}\n", stderr="")
        return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="unexpected")

    return run


def write_fetch_head(path: Path, sha: str, pr: str = "1234") -> Path:
    path.write_text(f"{sha}\t\t'refs/pull/{pr}/head' of github.com:acme/widget\n")
    return path
