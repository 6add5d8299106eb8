# hopp/cli/contracts/collection.py
"""
Collection contracts.

A collection is a tree: folders are collections themselves, leaves are
requests. Only the fields the CLI core reads are modelled; everything else
in the document is carried along untouched.
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from hopp.cli.contracts.environment import Environment
from hopp.cli.contracts.metadata import MetadataEntry

COLLECTION_SCHEMA_VERSION = 2

ResourceType = Literal["collection", "environment"]


def _inherit_auth() -> dict[str, Any]:
    return {"authType": "inherit", "authActive": True}


class HoppRESTRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    v: str | int | None = None
    id: str | None = None
    name: str = ""
    method: str = "GET"
    endpoint: str = ""
    params: list[MetadataEntry] = Field(default_factory=list)
    headers: list[MetadataEntry] = Field(default_factory=list)


class HoppCollection(BaseModel):
    """Collection document, identical whether read from disk or a workspace."""

    model_config = ConfigDict(extra="allow")

    v: int = COLLECTION_SCHEMA_VERSION
    id: str | None = None
    name: str
    folders: list[HoppCollection] = Field(default_factory=list)
    requests: list[HoppRESTRequest] = Field(default_factory=list)
    auth: dict[str, Any] = Field(default_factory=_inherit_auth)
    headers: list[MetadataEntry] = Field(default_factory=list)


CanonicalDocument = HoppCollection | Environment
