# hopp/cli/contracts/workspace.py
"""
Payload shapes served by the workspace access-token endpoints.

These are the team-workspace representations; they are converted into
:class:`HoppCollection` / :class:`Environment` before leaving the loader.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WorkspaceRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    collectionID: str | None = None
    teamID: str | None = None
    title: str = ""
    # JSON-encoded HoppRESTRequest; some servers already send the object.
    request: str | dict[str, Any]


class WorkspaceCollection(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    data: str | None = None
    parentID: str | None = None
    folders: list[WorkspaceCollection] = Field(default_factory=list)
    requests: list[WorkspaceRequest] = Field(default_factory=list)


class WorkspaceEnvironment(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    teamID: str | None = None
    name: str = ""
    variables: list[dict[str, Any]] = Field(default_factory=list)
