"""Resolves a PR number or commit SHA to the SHA statuses are attached to.

A pull request's head is fetched with ``git fetch <remote> refs/pull/<n>/head``,
which leaves the commit in the FETCH_HEAD pointer file:

    <sha>\t\t'refs/pull/<n>/head' of github.com:owner/repo

Anything that cannot be fetched that way (a raw SHA, a closed PR, no git
checkout at all) is passed through unchanged, so callers never need to know
which kind of identifier they were given.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from ghstatus.config import DEFAULT_REMOTE, DEFAULT_TIMEOUT
from ghstatus.models import RefSource, ResolvedRef

logger = logging.getLogger(__name__)

PULL_REF_TEMPLATE = "refs/pull/{identifier}/head"


@dataclass
class RefResolver:
    """Fetches PR heads from a remote and cleans up the pointer it leaves behind."""

    remote: str = DEFAULT_REMOTE
    repo_dir: Path = field(default_factory=Path.cwd)
    timeout: int = DEFAULT_TIMEOUT
    _pointer: Path | None = field(default=None, init=False, repr=False)

    def __enter__(self) -> RefResolver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()

    def resolve(self, identifier: str) -> ResolvedRef:
        """Return the SHA for ``identifier``. Never raises."""
        ref = PULL_REF_TEMPLATE.format(identifier=identifier)
        if self._git("fetch", "--quiet", self.remote, ref) is None:
            logger.debug(f"Could not fetch {ref} from {self.remote}, using {identifier!r} as a SHA")
            return self._literal(identifier)

        pointer = self._fetch_head_path()
        if pointer is None:
            return self._literal(identifier)
        self._pointer = pointer

        sha = self._read_pointer(pointer)
        if not sha:
            logger.debug(f"Empty fetch pointer at {pointer}, using {identifier!r} as a SHA")
            return self._literal(identifier)

        logger.debug(f"Resolved {ref} to {sha}")
        return ResolvedRef(requested_identifier=identifier, sha=sha, source=RefSource.FETCHED)

    def cleanup(self) -> None:
        """Remove the fetched pointer file. Safe to call more than once."""
        if self._pointer is None:
            return
        try:
            self._pointer.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove {self._pointer}: {e}")
        self._pointer = None

    def _literal(self, identifier: str) -> ResolvedRef:
        return ResolvedRef(requested_identifier=identifier, sha=identifier, source=RefSource.LITERAL)

    def _fetch_head_path(self) -> Path | None:
        """Locate FETCH_HEAD, which lives outside .git/ in worktrees."""
        result = self._git("rev-parse", "--git-path", "FETCH_HEAD")
        if not result or not result.strip():
            return None
        path = Path(result.strip())
        if not path.is_absolute():
            path = self.repo_dir / path
        return path

    @staticmethod
    def _read_pointer(pointer: Path) -> str:
        """Return the first tab-delimited field of the first line of ``pointer``."""
        try:
            content = pointer.read_text()
        except (OSError, UnicodeDecodeError):
            return ""
        first_line = content.splitlines()[0] if content else ""
        return first_line.split("\t", 1)[0].strip()

    def _git(self, *args: str) -> str | None:
        """Run a git command in the repo directory."""
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=self.repo_dir,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
            if result.returncode == 0:
                return result.stdout
            logger.debug(f"git {' '.join(args)} exited {result.returncode}: {result.stderr.strip()}")
            return None
        except (subprocess.TimeoutExpired, FileNotFoundError):
            return None
