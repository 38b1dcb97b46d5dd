"""FastAPI application exposing the download count endpoint."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from releasestats.handler import HandlerResponse, handle_count_request
from releasestats.service import DownloadStatsService


def _to_response(result: HandlerResponse) -> JSONResponse:
    return JSONResponse(content=result.body, status_code=result.status, headers=result.headers)


def create_app(service: DownloadStatsService | None = None) -> FastAPI:
    """
    Create the application.

    Args:
        service: Shared service; when None one is built from the environment
            at startup and closed at shutdown
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if service is not None:
            yield
            return
        async with DownloadStatsService.from_env() as owned:
            app.state.service = owned
            yield

    app = FastAPI(title="releasestats", lifespan=lifespan)
    if service is not None:
        app.state.service = service

    @app.get("/api/releases")
    async def releases_count(
        request: Request,
        owner: str | None = None,
        repo: str | None = None,
        suffix: str | None = None,
        suffixes: str | None = None,
    ) -> JSONResponse:
        result = await handle_count_request(
            request.app.state.service,
            {"owner": owner, "repo": repo, "suffix": suffix or suffixes},
        )
        return _to_response(result)

    @app.get("/api/{owner}/{repo}")
    async def repo_count(
        request: Request,
        owner: str,
        repo: str,
        suffix: str | None = None,
    ) -> JSONResponse:
        result = await handle_count_request(
            request.app.state.service,
            {"owner": owner, "repo": repo, "suffix": suffix},
        )
        return _to_response(result)

    return app
