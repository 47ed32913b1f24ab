"""Builds the outbound request for each command.

Values are substituted literally. The create body is serialized with
``json.dumps`` by PyGithub's requester, so callers do not escape anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ghstatus.config import Config
from ghstatus.models import Command, FlagSet

ACCEPT_HEADER = "application/vnd.github.v3+json"

GET_STATUS_PATH = "/repos/{owner}/{repo}/commits/{sha}/status"
CREATE_STATUS_PATH = "/repos/{owner}/{repo}/statuses/{sha}"


@dataclass(frozen=True)
class StatusRequest:
    method: str
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, str] | None = None

    def redacted_headers(self) -> dict[str, str]:
        """Headers safe to log."""
        headers = dict(self.headers)
        if "Authorization" in headers:
            scheme = headers["Authorization"].split(" ", 1)[0]
            headers["Authorization"] = f"{scheme} (redacted)"
        return headers


def build_headers(config: Config, with_body: bool = False) -> dict[str, str]:
    headers = {
        "Accept": ACCEPT_HEADER,
        "Authorization": f"Bearer {config.token}",
        "User-Agent": config.user_agent,
    }
    if with_body:
        headers["Content-Type"] = "application/json"
    return headers


def build_status_body(flags: FlagSet) -> dict[str, str]:
    """Build the create payload; ``target_url`` is present only when supplied."""
    state = flags.state.value if flags.state is not None else ""
    body = {
        "state": state,
        "description": flags.description,
    }
    if flags.target_url is not None:
        body["target_url"] = flags.target_url
    body["context"] = flags.context
    return body


def build_request(command: Command, flags: FlagSet, sha: str, config: Config) -> StatusRequest:
    if command is Command.GET:
        return StatusRequest(
            method="GET",
            path=GET_STATUS_PATH.format(owner=flags.owner, repo=flags.repo, sha=sha),
            headers=build_headers(config),
        )
    return StatusRequest(
        method="POST",
        path=CREATE_STATUS_PATH.format(owner=flags.owner, repo=flags.repo, sha=sha),
        headers=build_headers(config, with_body=True),
        body=build_status_body(flags),
    )
