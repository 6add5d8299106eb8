import json

import httpx
import pytest


SAMPLE_REQUEST = {
    "v": "1",
    "id": "r1",
    "name": "Get user",
    "method": "GET",
    "endpoint": "https://echo.hoppscotch.io/users",
    "params": [{"key": "page", "value": "1", "active": True}],
    "headers": [{"key": "Authorization", "value": "Bearer {{token}}", "active": True}],
    "body": {"contentType": None, "body": None},
}


@pytest.fixture
def sample_request():
    return json.loads(json.dumps(SAMPLE_REQUEST))


@pytest.fixture
def canonical_collection(sample_request):
    """Export-file form of the collection served by ``workspace_collection``."""
    return {
        "v": 2,
        "id": "c1",
        "name": "Users API",
        "folders": [
            {
                "v": 2,
                "id": "f1",
                "name": "Admin",
                "folders": [],
                "requests": [],
                "auth": {"authType": "inherit", "authActive": True},
                "headers": [],
            }
        ],
        "requests": [sample_request],
        "auth": {"authType": "bearer", "authActive": True, "token": "{{token}}"},
        "headers": [{"key": "X-Team", "value": "core", "active": True}],
    }


@pytest.fixture
def workspace_collection(sample_request):
    return {
        "id": "c1",
        "title": "Users API",
        "parentID": None,
        "data": json.dumps(
            {
                "auth": {"authType": "bearer", "authActive": True, "token": "{{token}}"},
                "headers": [{"key": "X-Team", "value": "core", "active": True}],
            }
        ),
        "folders": [
            {
                "id": "f1",
                "title": "Admin",
                "parentID": "c1",
                "data": None,
                "folders": [],
                "requests": [],
            }
        ],
        "requests": [
            {
                "id": "r1",
                "collectionID": "c1",
                "teamID": "t1",
                "title": "Get user",
                "request": json.dumps(sample_request),
            }
        ],
    }


@pytest.fixture
def workspace_environment():
    return {
        "id": "e1",
        "teamID": "t1",
        "name": "Production",
        "variables": [
            {"key": "token", "value": "abc"},
            {"key": "api_key", "value": "s3cr3t", "secret": True},
        ],
    }


@pytest.fixture
def mock_http(monkeypatch):
    """Route every ``httpx.AsyncClient`` through a handler; returns the seen requests."""

    def install(handler):
        seen: list[httpx.Request] = []

        async def recording_handler(request: httpx.Request):
            seen.append(request)
            return await handler(request)

        transport = httpx.MockTransport(recording_handler)
        real_client = httpx.AsyncClient

        monkeypatch.setattr(
            httpx,
            "AsyncClient",
            lambda **kw: real_client(transport=transport, **kw),
        )
        return seen

    return install
