"""HTTP Surface — CORS preflight, unrouted requests, error envelopes, health checks.

Invariants:
    - OPTIONS on any path returns 200 with an empty body
    - Unmatched method or path returns 404 {"error": "Route not found"}
    - Store failures return 500 with the driver message
    - Unhandled failures return 500 "Internal server error" and still carry CORS headers
"""

from uuid import uuid4

from httpx import ASGITransport, AsyncClient

import artist_catalog.infrastructure.database as db_module
from artist_catalog.config import get_settings
from artist_catalog.core.errors import DatabaseError
from artist_catalog.main import app
from artist_catalog.services.artist_catalog import ArtistCatalog

BASE = "/api/v1/artists"


async def test_cors_preflight_allows_any_origin(client):
    res = await client.options(
        BASE,
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
    assert "DELETE" in res.headers["access-control-allow-methods"]


async def test_preflight_for_disallowed_method_is_still_200(client):
    res = await client.options(
        BASE,
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "PATCH",
        },
    )
    assert res.status_code == 200
    assert res.content == b""
    assert res.headers["access-control-allow-origin"] == "*"


async def test_preflight_for_unlisted_header_is_still_200(client):
    res = await client.options(
        BASE,
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "x-custom",
        },
    )
    assert res.status_code == 200
    assert res.content == b""
    assert "content-type" in res.headers["access-control-allow-headers"]


async def test_bare_options_returns_empty_200(client):
    res = await client.options(f"{BASE}/{uuid4()}")
    assert res.status_code == 200
    assert res.content == b""


async def test_simple_request_carries_cors_header(client):
    res = await client.get(BASE, headers={"Origin": "http://example.com"})
    assert res.headers["access-control-allow-origin"] == "*"


async def test_unknown_path_returns_route_not_found(client):
    res = await client.get("/api/v1/albums")
    assert res.status_code == 404
    assert res.json() == {"error": "Route not found"}


async def test_unsupported_method_returns_route_not_found(client):
    res = await client.patch(f"{BASE}/{uuid4()}", json={})
    assert res.status_code == 404
    assert res.json() == {"error": "Route not found"}


async def test_store_failure_returns_500_with_message(client, monkeypatch):
    async def broken_list(self, filters, page, limit):
        raise DatabaseError("relation \"artists\" does not exist", "select")

    monkeypatch.setattr(ArtistCatalog, "list_artists", broken_list)
    res = await client.get(BASE)
    assert res.status_code == 500
    assert res.json() == {"error": 'relation "artists" does not exist'}


async def test_unhandled_failure_returns_generic_500_with_cors(client, monkeypatch):
    async def exploding_list(self, filters, page, limit):
        raise RuntimeError("connection pool exhausted")

    monkeypatch.setattr(ArtistCatalog, "list_artists", exploding_list)
    # The catch-all runs in ServerErrorMiddleware, which re-raises after responding
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as lenient:
        res = await lenient.get(BASE, headers={"Origin": "http://example.com"})
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    assert res.headers["access-control-allow-origin"] == "*"


async def test_liveness_check(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_liveness_reports_configured_service_and_version(client):
    settings = get_settings()
    body = (await client.get("/api/v1/health/")).json()
    assert body["service"] == settings.service_name
    assert body["version"] == settings.version


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
    assert res.json()["checks"]["backend"] == "sqlite"


async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_not_initialized"}
