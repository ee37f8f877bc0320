"""Edition Routes — HTTP surface of the lookup API.

Tests cover:
    - 200 bodies for basic, aliases, identifiers and relationships (camelCase)
    - 404 {"message": "Edition not found"} for unknown and malformed BBIDs
    - 503 DATABASE_ERROR when the store fails, never 404
    - the gate stores the resolved entity on request.state
    - a second kind added through bindings alone
    - health probes and OpenAPI operation ids
"""

import pytest
from fastapi import Depends, FastAPI, Request
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

import bookbrainz_api.infrastructure.database as database
from bookbrainz_api.api.entity_loader import make_entity_loader
from bookbrainz_api.api.error_handlers import register_error_handlers
from bookbrainz_api.api.route_bindings import (
    EDITION,
    Granularity,
    build_lookup_router,
    lookup_bindings,
)
from bookbrainz_api.core.projections import ALIASES_PROJECTION
from bookbrainz_api.core.relation_paths import IDENTIFIERS_RELATIONS
from bookbrainz_api.infrastructure.database import get_db
from bookbrainz_api.main import app
from bookbrainz_api.models import Work
from bookbrainz_api.services.entity_resolver import EntityKind
from tests.lookup_data import (
    BARE_EDITION_BBID, EDITION_BBID, TRANSLATION_BBID, UNKNOWN_BBID, WORK_BBID,
)

GRANULARITIES = [g.value for g in Granularity]


def _test_app(router) -> FastAPI:
    test_app = FastAPI()
    test_app.include_router(router)
    register_error_handlers(test_app)
    return test_app


async def _client_for(test_app: FastAPI, session_factory) -> AsyncClient:
    async def override_get_db():
        async with session_factory() as session:
            yield session

    test_app.dependency_overrides[get_db] = override_get_db
    return AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test")


# ─── 200 responses ───────────────────────────────────────────────

async def test_get_edition_basic_info(client, seed_lookup_data):
    response = await client.get(f"/edition/{EDITION_BBID}")
    assert response.status_code == 200
    assert response.json() == {
        "bbid": str(EDITION_BBID),
        "defaultAlias": {
            "name": "Zeta Edition",
            "sortName": "Edition, Zeta",
            "aliasLanguage": "English",
            "primary": True,
        },
        "depth": 40,
        "disambiguation": "first UK printing",
        "editionFormat": "eBook",
        "height": 250,
        "languages": ["English", "French"],
        "pages": 200,
        "releaseEventDates": ["2011-01-01", "2012-05-05"],
        "status": "Official",
        "weight": 300,
        "width": 80,
    }


async def test_get_bare_edition_uses_placeholders(client, seed_lookup_data):
    response = await client.get(f"/edition/{BARE_EDITION_BBID}")
    assert response.status_code == 200
    body = response.json()
    assert body["defaultAlias"] is None
    assert body["disambiguation"] is None
    assert body["languages"] == []
    assert body["releaseEventDates"] == []


async def test_get_edition_aliases_in_store_order(client, seed_lookup_data):
    response = await client.get(f"/edition/{EDITION_BBID}/aliases")
    assert response.status_code == 200
    assert response.json() == {
        "bbid": str(EDITION_BBID),
        "aliases": [
            {"name": "Zeta Edition", "sortName": "Edition, Zeta",
             "language": "eng", "primary": True},
            {"name": "Alpha Edition", "sortName": "Edition, Alpha",
             "language": "fra", "primary": False},
            {"name": "Mu Edition", "sortName": "Edition, Mu",
             "language": None, "primary": False},
        ],
    }


async def test_get_bare_edition_aliases_is_empty_list(client, seed_lookup_data):
    response = await client.get(f"/edition/{BARE_EDITION_BBID}/aliases")
    assert response.status_code == 200
    assert response.json() == {"bbid": str(BARE_EDITION_BBID), "aliases": []}


async def test_get_edition_identifiers(client, seed_lookup_data):
    response = await client.get(f"/edition/{EDITION_BBID}/identifiers")
    assert response.status_code == 200
    assert response.json()["identifiers"] == [
        {"type": "ISBN-13", "value": "9780747532699"},
        {"type": "Wikidata ID", "value": "Q43361"},
    ]


async def test_get_edition_relationships(client, seed_lookup_data):
    response = await client.get(f"/edition/{EDITION_BBID}/relationships")
    assert response.status_code == 200
    contains, translation = response.json()["relationships"]

    assert contains == {
        "id": 1,
        "type": "Contains",
        "linkPhrase": "contains",
        "direction": "forward",
        "sourceEntity": {
            "bbid": str(EDITION_BBID), "entityType": "Edition",
            "name": "Zeta Edition",
        },
        "targetEntity": {
            "bbid": str(WORK_BBID), "entityType": "Work", "name": "The Work",
        },
        "attributes": {"position": "1", "number": "I"},
    }
    assert translation["direction"] == "backward"
    assert translation["linkPhrase"] == "has translation"
    assert translation["sourceEntity"]["bbid"] == str(TRANSLATION_BBID)
    assert translation["sourceEntity"]["name"] == "L'Edition"
    assert translation["attributes"] == {}


async def test_repeated_lookup_is_identical(client, seed_lookup_data):
    first = await client.get(f"/edition/{EDITION_BBID}/relationships")
    second = await client.get(f"/edition/{EDITION_BBID}/relationships")
    assert first.content == second.content


# ─── 404 responses ───────────────────────────────────────────────

@pytest.mark.parametrize("suffix", GRANULARITIES)
async def test_unknown_bbid_is_404_for_every_granularity(client, seed_lookup_data, suffix):
    response = await client.get(f"/edition/{UNKNOWN_BBID}{suffix}")
    assert response.status_code == 404
    assert response.json() == {"message": "Edition not found"}


async def test_malformed_bbid_is_404(client, seed_lookup_data):
    response = await client.get("/edition/not-a-bbid")
    assert response.status_code == 404
    assert response.json() == {"message": "Edition not found"}


async def test_work_bbid_is_not_an_edition(client, seed_lookup_data):
    response = await client.get(f"/edition/{WORK_BBID}/aliases")
    assert response.status_code == 404
    assert response.json() == {"message": "Edition not found"}


# ─── Store failures ──────────────────────────────────────────────

class _FailingSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, ConnectionRefusedError("refused"))

    async def rollback(self):
        pass

    async def close(self):
        pass


async def test_store_failure_is_503_not_404(monkeypatch):
    manager = database.DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(manager, "_session_factory", _FailingSession)
    monkeypatch.setattr(database, "db_manager", manager)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            response = await c.get(f"/edition/{EDITION_BBID}")
    finally:
        await manager.dispose()

    assert response.status_code == 503
    error = response.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["category"] == "database"


# ─── Gate and bindings ───────────────────────────────────────────

async def test_gate_stores_entity_on_request_state(test_session_factory, seed_lookup_data):
    loader = make_entity_loader(EDITION, IDENTIFIERS_RELATIONS, "Edition not found")
    test_app = FastAPI()
    register_error_handlers(test_app)

    @test_app.get("/peek/{bbid}")
    async def peek(request: Request, entity=Depends(loader)):
        return {
            "same": request.state.entity is entity,
            "relations": entity.relations.name,
        }

    async with await _client_for(test_app, test_session_factory) as c:
        found = await c.get(f"/peek/{EDITION_BBID}")
        missing = await c.get(f"/peek/{UNKNOWN_BBID}")

    assert found.json() == {"same": True, "relations": "identifiers"}
    assert missing.status_code == 404
    assert missing.json() == {"message": "Edition not found"}


async def test_new_kind_is_added_through_bindings_only(test_session_factory, seed_lookup_data):
    work = EntityKind("Work", Work)
    router = build_lookup_router(
        "/work", "Lookup Requests",
        lookup_bindings(work, ALIASES_PROJECTION, "Work not found"),
    )

    async with await _client_for(_test_app(router), test_session_factory) as c:
        aliases = await c.get(f"/work/{WORK_BBID}/aliases")
        relationships = await c.get(f"/work/{WORK_BBID}/relationships")
        missing = await c.get(f"/work/{EDITION_BBID}/identifiers")

    assert [a["name"] for a in aliases.json()["aliases"]] == ["The Work"]
    rel = relationships.json()["relationships"][0]
    assert rel["direction"] == "backward"
    assert rel["linkPhrase"] == "is contained by"
    assert missing.status_code == 404
    assert missing.json() == {"message": "Work not found"}


def test_operation_ids_are_generated_from_bindings():
    paths = app.openapi()["paths"]
    operation_ids = {
        path: operation["get"]["operationId"] for path, operation in paths.items()
        if path.startswith("/edition")
    }
    assert operation_ids == {
        "/edition/{bbid}": "getEditionByBbid",
        "/edition/{bbid}/aliases": "getAliasesOfEditionByBbid",
        "/edition/{bbid}/identifiers": "getIdentifiersOfEditionByBbid",
        "/edition/{bbid}/relationships": "getRelationshipsOfEditionByBbid",
    }
    responses = paths["/edition/{bbid}"]["get"]["responses"]
    assert responses["404"]["description"] == "Edition not found"


# ─── Error handlers ──────────────────────────────────────────────

async def test_validation_error_is_400_with_details():
    test_app = FastAPI()
    register_error_handlers(test_app)

    @test_app.get("/items")
    async def items(limit: int):
        return {"limit": limit}

    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        response = await c.get("/items", params={"limit": "many"})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "query.limit"


async def test_unhandled_exception_does_not_leak_details():
    test_app = FastAPI()
    register_error_handlers(test_app)

    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string")

    async with AsyncClient(
        transport=ASGITransport(app=test_app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        response = await c.get("/boom")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in response.text


# ─── Health probes ───────────────────────────────────────────────

async def test_liveness_probe(client):
    response = await client.get("/api/v1/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["version"] == "0.1.0"


async def test_readiness_probe_without_database(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["reason"] == "database_unavailable"
