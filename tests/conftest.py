import json
import os
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep unit tests deterministic and independent from local shell configuration.
os.environ.setdefault("GITHUB_API_BASE", "https://api.github.com")
os.environ.setdefault("LOG_FORMAT", "text")

API = "https://api.github.com/repos"


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code


class FakeSession:
    """Stands in for requests.Session; routes GETs to canned bodies or exceptions."""

    def __init__(self, routes):
        self.routes = routes
        self.headers = {}
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        body = self.routes.get(url)
        if body is None:
            return FakeResponse(b'{"message": "Not Found"}', status_code=404)
        if isinstance(body, Exception):
            raise body
        if isinstance(body, bytes):
            return FakeResponse(body)
        return FakeResponse(json.dumps(body).encode())


def stb_routes():
    return {
        f"{API}/nothings/stb": {
            "full_name": "nothings/stb",
            "owner": {"login": "nothings"},
            "contributors_url": f"{API}/nothings/stb/contributors",
            "languages_url": f"{API}/nothings/stb/languages",
        },
        f"{API}/nothings/stb/contributors": [{"login": "sean", "contributions": 500}],
        f"{API}/nothings/stb/languages": {"C": 1000, "Lua": 20},
    }


@pytest.fixture
def github_routes():
    """Upstream fixtures keyed by URL; tests may add or replace entries."""
    return stb_routes()


@pytest.fixture
def fake_session(monkeypatch, github_routes):
    """Patch every GitHubService to use one FakeSession serving ``github_routes``."""
    import github_service

    session = FakeSession(github_routes)
    original_init = github_service.GitHubService.__init__

    def patched_init(self):
        original_init(self)
        self.session = session

    monkeypatch.setattr(github_service.GitHubService, "__init__", patched_init)
    return session


@pytest.fixture
def service(fake_session):
    import github_service

    return github_service.GitHubService()
