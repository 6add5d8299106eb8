"""Public contracts for the Hoppscotch CLI core."""
from hopp.cli.contracts.collection import (
    COLLECTION_SCHEMA_VERSION,
    CanonicalDocument,
    HoppCollection,
    HoppRESTRequest,
    ResourceType,
)
from hopp.cli.contracts.environment import Environment, EnvironmentVariable
from hopp.cli.contracts.metadata import MetadataEntry, ResolvedEntry
from hopp.cli.contracts.workspace import (
    WorkspaceCollection,
    WorkspaceEnvironment,
    WorkspaceRequest,
)

__all__ = [
    "COLLECTION_SCHEMA_VERSION", "CanonicalDocument",
    "HoppCollection", "HoppRESTRequest", "ResourceType",
    "Environment", "EnvironmentVariable",
    "MetadataEntry", "ResolvedEntry",
    "WorkspaceCollection", "WorkspaceEnvironment", "WorkspaceRequest",
]
