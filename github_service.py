"""GitHub access: raw GETs against the repos API and JSON decoding."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests
from pydantic import TypeAdapter, ValidationError

import config
from models import Contributor, InvalidPathError, ParseError, TransportError


logger = logging.getLogger(__name__)

_CONTRIBUTORS = TypeAdapter(list[Contributor])


class GitHubService:
    def __init__(self) -> None:
        # Certificate verification stays on (requests default).
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "User-Agent": config.USER_AGENT,
            }
        )

    def check_url(self, url: str) -> None:
        if not url.startswith(config.GITHUB_REPOS_PREFIX):
            raise InvalidPathError(f"Invalid path, expected {config.GITHUB_REPOS_PREFIX}", url=url)

    def fetch(self, url: str) -> bytes:
        """Perform one GET and return the body whatever the upstream status was."""
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=config.TIMEOUT_GITHUB_SECONDS)
        except requests.RequestException as exc:
            logger.warning("GitHub request failed for %s: %s", url, exc)
            raise TransportError(str(exc), url=url) from exc
        return response.content

    def _load(self, url: str) -> Any:
        self.check_url(url)
        data = self.fetch(url)
        try:
            return json.loads(data)
        except ValueError as exc:
            raise ParseError(f"Invalid JSON from {url}: {exc}", url=url) from exc

    def get_json(self, url: str) -> dict[str, Any]:
        payload = self._load(url)
        if not isinstance(payload, dict):
            raise ParseError(f"Expected a JSON object from {url}, got {type(payload).__name__}", url=url)
        return payload

    def get_contributors(self, url: str) -> list[Contributor]:
        payload = self._load(url)
        if not isinstance(payload, list):
            raise ParseError(f"Expected a JSON array from {url}, got {type(payload).__name__}", url=url)
        try:
            return _CONTRIBUTORS.validate_python(payload)
        except ValidationError as exc:
            raise ParseError(f"Malformed contributor record from {url}", url=url) from exc

    def get_repo_document(self, repo_path: str) -> dict[str, Any]:
        return self.get_json(config.GITHUB_REPOS_PREFIX + repo_path)
