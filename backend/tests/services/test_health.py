"""Health checks: liveness always 200, readiness follows database reachability."""

import roomfinder.infrastructure.database as db_module


async def test_liveness_returns_healthy(client):
    res = await client.get("/api/health/")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")

    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database_is_503(client):
    db_module.db_manager = None

    res = await client.get("/api/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
