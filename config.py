"""Application configuration and fixed routes."""

from __future__ import annotations

import os


# GitHub REST base (override via environment to point at a mirror or a fake).
GITHUB_API_BASE = os.getenv("GITHUB_API_BASE", "https://api.github.com").rstrip("/")
GITHUB_REPOS_PREFIX = f"{GITHUB_API_BASE}/repos/"

TIMEOUT_GITHUB_SECONDS = float(os.getenv("TIMEOUT_GITHUB_SECONDS", "10"))
USER_AGENT = "projectinfo-api"

# Inbound route and the label prepended to upstream full names.
GITHUB_PATH_PREFIX = "/projectinfo/v1/github.com/"
PROJECT_HOST = "github.com/"

# Process listen address.
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT: str = os.getenv("LOG_FORMAT", "text").strip().lower()
