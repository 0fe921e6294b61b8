# src/api/app.py

"""FastAPI application factory with the cross-origin header filter."""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from src.api.routes import router

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def add_cors_headers(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Stamp CORS headers on every response; answer OPTIONS directly."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


def create_app() -> FastAPI:
    """Build the API application."""
    app = FastAPI(
        title="QuickFind Search API",
        docs_url=None,
        redoc_url=None,
    )
    app.include_router(router)
    app.middleware("http")(add_cors_headers)
    return app


app = create_app()
