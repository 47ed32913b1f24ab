"""Manual verification: resolve a ref and read its statuses from a real repo.

Usage:
    GITHUB_STATUS_ACCESS_TOKEN=ghp_... uv run python scripts/check_status.py owner/repo 1234

Run inside a checkout of owner/repo so PR numbers can be fetched.
"""

from __future__ import annotations

import sys

from ghstatus.config import Config
from ghstatus.git.resolver import RefResolver
from ghstatus.github.client import StatusClient
from ghstatus.github.request import build_request
from ghstatus.models import Command, FlagSet
from ghstatus.render import decode_body, parse_status_report


def main() -> None:
    config = Config.load()

    if not config.token:
        print("ERROR: Set GITHUB_STATUS_ACCESS_TOKEN environment variable")
        sys.exit(1)

    if len(sys.argv) < 3 or "/" not in sys.argv[1]:
        print("ERROR: Provide owner/repo and a PR number or SHA")
        sys.exit(1)

    owner, repo = sys.argv[1].split("/", 1)
    identifier = sys.argv[2]

    with RefResolver(remote=config.remote, timeout=config.timeout) as resolver:
        ref = resolver.resolve(identifier)
    print(f"{identifier} -> {ref.sha} ({ref.source.value})")

    request = build_request(Command.GET, FlagSet(owner=owner, repo=repo), ref.sha, config)
    client = StatusClient(config)

    try:
        response = client.send(request)
        report = parse_status_report(decode_body(response.body))

        print(f"\n--- {report.repo_full_name} @ {report.sha[:12]} ---")
        print(f"  Overall: {report.overall_state}")
        for entry in report.entries:
            print(f"  {entry.context}: {entry.state}")
            print(f"    {entry.description or '(no description)'}")

        print(f"\nSummary: {len(report.entries)} status context(s)")

    finally:
        client.close()


if __name__ == "__main__":
    main()
