"""Core data models for ghstatus."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Command(str, Enum):
    GET = "get"
    CREATE = "create"


class StatusState(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"


class RefSource(str, Enum):
    FETCHED = "fetched"  # resolved through refs/pull/<n>/head
    LITERAL = "literal"  # identifier used as-is


@dataclass(frozen=True)
class FlagSet:
    owner: str = ""
    repo: str = ""
    state: StatusState | None = None  # create only
    description: str = ""  # create only
    context: str = ""  # create only
    target_url: str | None = None  # create only, omitted from the body when None

    def validate(self, command: Command) -> list[str]:
        """Return one issue per required field that is missing for ``command``."""
        issues = []
        if not self.owner:
            issues.append("Repository owner not set (-owner or GITHUB_STATUS_REPO_OWNER)")
        if not self.repo:
            issues.append("Repository name not set (-repo or GITHUB_STATUS_REPO_NAME)")
        if command is Command.CREATE:
            if self.state is None:
                issues.append("Status state not set (-state)")
            if not self.description:
                issues.append("Status description not set (-desc)")
            if not self.context:
                issues.append("Status context not set (-context)")
        return issues


@dataclass(frozen=True)
class CommandInvocation:
    command: Command
    identifier: str  # PR number or commit SHA
    flags: FlagSet


@dataclass(frozen=True)
class ResolvedRef:
    requested_identifier: str
    sha: str
    source: RefSource


@dataclass
class StatusEntry:
    state: str
    context: str
    description: str | None
    target_url: str | None


@dataclass
class StatusReport:
    overall_state: str
    repo_full_name: str
    sha: str
    entries: list[StatusEntry] = field(default_factory=list)


@dataclass
class CreatedStatus:
    url: str
    state: str
    description: str | None
    target_url: str | None
    context: str
