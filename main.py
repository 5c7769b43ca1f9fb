"""FastAPI entrypoint exposing GET /projectinfo/v1/github.com/{owner}/{repo}."""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

import config
from logging_config import setup_logging
from models import AppError, GitHubFetchError
from summarizer import ProjectSummarizer


logger = logging.getLogger(__name__)

setup_logging()

app = FastAPI(title="Project Info API", version="1.0.0")


def _status_text(status_code: int) -> str:
    return HTTPStatus(status_code).phrase


def handle(path: str) -> tuple[int, str]:
    """Answer one request path with ``(status_code, body)``."""
    if not path.startswith(config.GITHUB_PATH_PREFIX):
        logger.warning("Rejected path %s", path)
        return 400, _status_text(400)

    repo_path = path[len(config.GITHUB_PATH_PREFIX):]
    try:
        summary = ProjectSummarizer().summarize_project(repo_path)
    except AppError as err:
        logger.warning("Summary for %s failed: %s %s", repo_path, err, err.details, exc_info=err.__cause__)
        return err.status_code, _status_text(err.status_code)
    except GitHubFetchError as exc:
        logger.warning("Fetching %s failed: %s", repo_path, exc)
        return 500, _status_text(500)
    return 200, summary.to_json()


@app.exception_handler(Exception)
def unhandled_exception_handler(_request, exc: Exception):
    # Keep unexpected failures in the same plain-text contract.
    logger.exception("Unhandled server error: %s", exc)
    return PlainTextResponse(_status_text(500), status_code=500)


@app.get("/projectinfo/v1/{rest:path}")
def project_info(request: Request):
    status_code, body = handle(request.url.path)
    if status_code != 200:
        return PlainTextResponse(body, status_code=status_code)
    return Response(content=body, status_code=200, media_type="application/json")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
