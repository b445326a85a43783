"""CORS — fixed cross-origin headers and the OPTIONS short-circuit.

Invariants:
    - Every OPTIONS request gets an empty 200 with the fixed headers, before routing
    - Responses built outside CORSMiddleware (catch-all 500) carry the same headers

Design Decisions:
    - answer_preflight is registered outermost: CORSMiddleware would reject
      preflights asking for methods or headers outside its allow-list
"""

from fastapi import Request, Response, status

from artist_catalog.config import get_settings

CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def allowed_origin(origins: list[str]) -> str:
    return "*" if "*" in origins or not origins else origins[0]


def cors_headers() -> dict[str, str]:
    """The header set attached to preflights and out-of-stack error responses."""
    return {
        "Access-Control-Allow-Origin": allowed_origin(get_settings().cors_origins),
        "Access-Control-Allow-Methods": ", ".join(CORS_ALLOW_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
    }


async def answer_preflight(request: Request, call_next):
    """HTTP middleware: OPTIONS on any path is an empty 200."""
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=cors_headers())
    return await call_next(request)
