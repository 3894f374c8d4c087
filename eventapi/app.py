from __future__ import annotations

import os

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from auth.token_codec import TokenCodec
from auth.token_routes import TokenRoutes

from .constants import APP_VERSION, LOGGER
from .env import get_env_int, load_env, parse_csv_env, setup_logging


async def health_route(request: Request) -> Response:
    del request
    return JSONResponse(
        {
            "status": "ok",
            "version": APP_VERSION,
        }
    )


def create_app(
    codec: TokenCodec | None = None,
    *,
    cors_origins: set[str] | None = None,
) -> Starlette:
    if codec is None:
        load_env()
        setup_logging()
        codec = TokenCodec.from_env()

    if cors_origins is None:
        cors_origins = parse_csv_env("EVENTAPI_CORS_ORIGINS")

    token_routes = TokenRoutes(codec, cors_origins=cors_origins)
    routes = [Route("/health", health_route, methods=["GET"]), *token_routes.routes()]
    app = Starlette(routes=routes)
    app.state.token_codec = codec
    LOGGER.info("Event API %s ready (cors_origins=%s)", APP_VERSION, sorted(cors_origins))
    return app


def bind_address() -> tuple[str, int]:
    host = os.getenv("EVENTAPI_HOST", "127.0.0.1")
    port = get_env_int("EVENTAPI_PORT", 8000)
    return host, port
