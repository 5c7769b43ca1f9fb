"""Builds the condensed project summary from GitHub repository documents."""

from __future__ import annotations

import logging
from typing import Any

import config
from github_service import GitHubService
from models import AppError, GitHubFetchError, ProjectSummary


logger = logging.getLogger(__name__)

_TYPE_NAMES = {str: "string", dict: "object"}


def require_field(document: dict[str, Any], key: str, expected: type) -> Any:
    """Return ``document[key]`` when present and of the expected JSON type.

    A missing key (or JSON null) is the caller's problem and maps to 400; a
    present value of the wrong type maps to 500.
    """
    value = document.get(key)
    if value is None:
        raise AppError.bad_request(f"malformed JSON, field '{key}' not found", field=key)
    if not isinstance(value, expected) or isinstance(value, bool):
        raise AppError.internal(
            f"unable to read '{key}' as {_TYPE_NAMES.get(expected, expected.__name__)}",
            field=key,
            actual=type(value).__name__,
        )
    return value


class ProjectSummarizer:
    def __init__(self, github: GitHubService | None = None) -> None:
        self.github = github or GitHubService()

    def summarize_project(self, repo_path: str) -> ProjectSummary:
        # Fetch errors on the primary document propagate to the handler unchanged.
        document = self.github.get_repo_document(repo_path)
        return self.build_summary(document)

    def build_summary(self, document: dict[str, Any]) -> ProjectSummary:
        full_name = require_field(document, "full_name", str)
        owner = require_field(require_field(document, "owner", dict), "login", str)

        committer, commits = "", 0
        contributors_url = require_field(document, "contributors_url", str)
        try:
            contributors = self.github.get_contributors(contributors_url)
        except GitHubFetchError as exc:
            raise AppError.internal("unable to fetch contributors", url=contributors_url, error=str(exc)) from exc
        if contributors:
            committer = contributors[0].login
            commits = contributors[0].contributions

        languages_url = require_field(document, "languages_url", str)
        try:
            language_map = self.github.get_json(languages_url)
        except GitHubFetchError as exc:
            raise AppError.internal("unable to fetch languages", url=languages_url, error=str(exc)) from exc

        summary = ProjectSummary(
            repo=config.PROJECT_HOST + full_name,
            owner=owner,
            committer=committer,
            commits=commits,
            languages=list(language_map),
        )
        logger.info("Summarized %s (%d languages)", summary.repo, len(summary.languages))
        return summary
