"""Thin wrapper around PyGithub's requester for the commit Status API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

import requests
from github import Github
from github.Requester import Requester

from ghstatus.config import Config
from ghstatus.errors import TransportError
from ghstatus.github.request import StatusRequest

logger = logging.getLogger(__name__)


@dataclass
class RawResponse:
    status: int
    body: str


class StatusClient:
    """Sends a single StatusRequest per call.

    Usage:
        client = StatusClient(config)
        response = client.send(build_request(...))
        client.close()

    Authentication travels in the request's own headers, so the Github
    instance is built without ``auth``. ``retry=None`` keeps it to one attempt.
    """

    def __init__(self, config: Config, requester: Requester | None = None) -> None:
        self._gh: Github | None = None
        if requester is None:
            try:
                self._gh = Github(
                    base_url=config.api_url,
                    user_agent=config.user_agent,
                    timeout=config.timeout,
                    retry=None,
                )
            except (AssertionError, ValueError) as e:
                # PyGithub asserts on an unusable base_url (e.g. a non-http scheme)
                raise TransportError(f"Invalid API URL {config.api_url!r}: {e}") from e
            requester = self._gh.requester
        self._requester = requester

    def send(self, request: StatusRequest) -> RawResponse:
        logger.debug(f"{request.method} {request.path}")
        logger.debug(f"Request headers: {request.redacted_headers()}")
        if request.body is not None:
            logger.debug(f"Request body: {json.dumps(request.body)}")

        try:
            status, _headers, body = self._requester.requestJson(
                request.method,
                request.path,
                headers=dict(request.headers),
                input=request.body,
            )
        except requests.RequestException as e:
            raise TransportError(f"{request.method} {request.path} failed: {e}") from e

        body = body or ""
        logger.debug(f"HTTP {status}, {len(body)} bytes")
        if not 200 <= status < 300:
            raise TransportError(
                f"{request.method} {request.path} returned HTTP {status}: {_error_message(body)}",
                status=status,
            )
        return RawResponse(status=status, body=body)

    def close(self) -> None:
        if self._gh is not None:
            self._gh.close()


def _error_message(body: str) -> str:
    """Pull GitHub's ``message`` field out of an error body, if there is one."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return body.strip() or "(empty response)"
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return body.strip()
