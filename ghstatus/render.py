"""Turns Status API responses into the fixed text report printed by the CLI."""

from __future__ import annotations

import json
from typing import Any

from ghstatus.errors import ParseError
from ghstatus.models import CreatedStatus, StatusEntry, StatusReport


def decode_body(body: str) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _require(payload: dict[str, Any], key: str, where: str = "response") -> Any:
    if not isinstance(payload, dict) or key not in payload:
        raise ParseError(f"Missing '{key}' in {where}")
    return payload[key]


def parse_status_report(payload: dict[str, Any]) -> StatusReport:
    """Parse a combined-status response (GET .../commits/{sha}/status)."""
    repository = _require(payload, "repository")
    statuses = _require(payload, "statuses")
    if not isinstance(statuses, list):
        raise ParseError("'statuses' is not a list")

    entries = []
    for i, status in enumerate(statuses):
        where = f"statuses[{i}]"
        entries.append(
            StatusEntry(
                state=_require(status, "state", where),
                context=_require(status, "context", where),
                description=_require(status, "description", where),
                target_url=_require(status, "target_url", where),
            )
        )

    return StatusReport(
        overall_state=_require(payload, "state"),
        repo_full_name=_require(repository, "full_name", "repository"),
        sha=_require(payload, "sha"),
        entries=entries,
    )


def parse_created_status(payload: dict[str, Any]) -> CreatedStatus:
    """Parse the response of POST .../statuses/{sha}."""
    return CreatedStatus(
        url=_require(payload, "url"),
        state=_require(payload, "state"),
        description=_require(payload, "description"),
        target_url=_require(payload, "target_url"),
        context=_require(payload, "context"),
    )


def _fmt(value: Any) -> str:
    # Match what `jq -r` would print for a JSON null.
    return "null" if value is None else str(value)


def render_status_report(identifier: str, report: StatusReport) -> list[str]:
    """Text report for ``get``. The first line echoes the identifier as given."""
    lines = [
        f"pr={identifier}",
        f"state: {_fmt(report.overall_state)}",
        f"repository: {_fmt(report.repo_full_name)}",
        f"sha: {_fmt(report.sha)}",
        f"statuses: {len(report.entries)}",
    ]
    for entry in report.entries:
        lines.extend([
            "---",
            f"  state: {_fmt(entry.state)}",
            f"  context: {_fmt(entry.context)}",
            f"  description: {_fmt(entry.description)}",
            f"  target_url: {_fmt(entry.target_url)}",
        ])
    return lines


def render_created_status(identifier: str, sha: str, created: CreatedStatus) -> list[str]:
    return [
        f"pr={identifier}, sha={sha}",
        f"url: {_fmt(created.url)}",
        f"state: {_fmt(created.state)}",
        f"description: {_fmt(created.description)}",
        f"target_url: {_fmt(created.target_url)}",
        f"context: {_fmt(created.context)}",
    ]


def render_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2)
