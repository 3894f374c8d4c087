from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from auth.cors import apply_cors_response, cors_error_response, preflight_route
from auth.models import Err, TokenErrorKind
from auth.token_codec import TokenCodec
from eventapi.constants import TOKEN_LOGGER


class TokenRoutes:
    def __init__(
        self,
        codec: TokenCodec,
        *,
        cors_origins: set[str] | None = None,
    ) -> None:
        self.codec = codec
        self.cors_origins = set(cors_origins or ())

    def routes(self) -> list[Route]:
        routes = [
            Route("/token/encode", self._handle_encode, methods=["POST"]),
            Route("/token/decode", self._handle_decode, methods=["POST"]),
        ]
        for path in ("/token/encode", "/token/decode"):
            routes.append(preflight_route(path, self.cors_origins))
        return routes

    # -- handlers --------------------------------------------------------------

    async def _handle_encode(self, request: Request) -> Response:
        try:
            payload = await request.json()
        except (ValueError, RecursionError):
            return self._error(request, "encode", TokenErrorKind.INVALID_PARAMS)

        result = self.codec.encode(payload)
        if isinstance(result, Err):
            return self._error(request, "encode", result.kind)

        return apply_cors_response(
            request,
            JSONResponse(result.value.as_dict()),
            self.cors_origins,
        )

    async def _handle_decode(self, request: Request) -> Response:
        try:
            body = await request.json()
        except (ValueError, RecursionError):
            return self._error(request, "decode", TokenErrorKind.INVALID_PARAMS)

        if not isinstance(body, dict):
            return self._error(request, "decode", TokenErrorKind.MISSING_PARAMS)

        token = body.get("token")
        context = body.get("context")
        if not token or not context:
            return self._error(request, "decode", TokenErrorKind.MISSING_PARAMS)
        if not isinstance(token, str) or not isinstance(context, str):
            return self._error(request, "decode", TokenErrorKind.INVALID_PARAMS)

        result = self.codec.decode(token, context)
        if isinstance(result, Err):
            return self._error(request, "decode", result.kind)

        return apply_cors_response(
            request,
            JSONResponse(result.value),
            self.cors_origins,
        )

    # -- helpers ---------------------------------------------------------------

    def _error(self, request: Request, operation: str, kind: TokenErrorKind) -> Response:
        TOKEN_LOGGER.info("Token %s rejected: %s", operation, kind.value)
        return cors_error_response(
            request=request,
            allowed_origins=self.cors_origins,
            code=kind.value,
            status_code=400,
        )
