"""Resource loading: local files, workspace access tokens and conversion."""
from hopp.cli.core.resources.acquirer import (
    InvalidContentType,
    ResourceAcquirer,
    get_resource_contents,
)
from hopp.cli.core.resources.reader import file_exists, read_json_file
from hopp.cli.core.resources.workspace import (
    transform_workspace_collection,
    transform_workspace_environment,
)

__all__ = [
    "InvalidContentType", "ResourceAcquirer", "get_resource_contents",
    "file_exists", "read_json_file",
    "transform_workspace_collection", "transform_workspace_environment",
]
