# hopp/cli/core/resources/workspace.py
"""
Conversion of workspace payloads into canonical documents.

The access-token endpoints serve team-workspace records: collections keep
their auth/headers in a JSON-encoded ``data`` column and each request as a
JSON-encoded string. The output matches what a local export file would
have produced.
"""
from __future__ import annotations

import json
from typing import Any

from hopp.cli.contracts.collection import (
    COLLECTION_SCHEMA_VERSION,
    HoppCollection,
    HoppRESTRequest,
)
from hopp.cli.contracts.environment import Environment
from hopp.cli.contracts.workspace import (
    WorkspaceCollection,
    WorkspaceEnvironment,
    WorkspaceRequest,
)


def _transform_request(request: WorkspaceRequest) -> HoppRESTRequest:
    raw = request.request
    if isinstance(raw, str):
        raw = json.loads(raw)
    return HoppRESTRequest.model_validate(raw)


def transform_workspace_collection(
    raw: WorkspaceCollection | dict[str, Any],
) -> HoppCollection:
    collection = (
        raw if isinstance(raw, WorkspaceCollection) else WorkspaceCollection.model_validate(raw)
    )
    data = json.loads(collection.data) if collection.data else None
    if not isinstance(data, dict):
        data = {}

    return HoppCollection(
        v=COLLECTION_SCHEMA_VERSION,
        id=collection.id,
        name=collection.title,
        folders=[transform_workspace_collection(f) for f in collection.folders],
        requests=[_transform_request(r) for r in collection.requests],
        auth=data.get("auth") or {"authType": "inherit", "authActive": True},
        headers=data.get("headers") or [],
    )


def transform_workspace_environment(
    raw: WorkspaceEnvironment | dict[str, Any],
) -> Environment:
    env = raw if isinstance(raw, WorkspaceEnvironment) else WorkspaceEnvironment.model_validate(raw)

    # Older servers omit `secret`
    variables = [
        var if "secret" in var else {"key": var.get("key"), "value": var.get("value"), "secret": False}
        for var in env.variables
    ]

    return Environment(v=1, id=env.id, name=env.name, variables=variables)
