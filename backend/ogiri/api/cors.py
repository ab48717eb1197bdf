"""CORS — allow any origin and answer every OPTIONS request without a body.

Invariants:
    - OPTIONS never reaches a route: 200, CORS headers, empty body
    - Non-OPTIONS responses get Access-Control-Allow-Origin via CORSMiddleware

Design Decisions:
    - Preflight middleware is installed OUTERMOST, in front of CORSMiddleware, because
      CORSMiddleware answers preflights with a text body and ignores bare OPTIONS
"""

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def preflight_headers(origin: str) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
        "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
    }


def install_cors(app: FastAPI, origins: list[str]) -> None:
    """Add CORSMiddleware plus the bodiless OPTIONS responder."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )

    wildcard = "*" in origins

    async def preflight_middleware(request: Request, call_next):
        if request.method != "OPTIONS":
            return await call_next(request)
        origin = request.headers.get("origin", "")
        if wildcard:
            allow = "*"
        elif origin in origins:
            allow = origin
        else:
            return Response(status_code=200)
        return Response(status_code=200, headers=preflight_headers(allow))

    app.add_middleware(BaseHTTPMiddleware, dispatch=preflight_middleware)
