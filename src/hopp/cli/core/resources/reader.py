# hopp/cli/core/resources/reader.py
"""
Local collection / environment files.
"""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hopp.cli.contracts.collection import CanonicalDocument, HoppCollection, ResourceType
from hopp.cli.contracts.environment import Environment, EnvironmentVariable
from hopp.cli.core.errors import ErrorCode, error

logger = logging.getLogger(__name__)


def _exists(path: str) -> bool:
    if not path:
        return False
    try:
        return Path(path).exists()
    except (OSError, ValueError):
        return False


async def file_exists(path: str) -> bool:
    """Whether ``path`` exists locally. Never raises."""
    return await asyncio.to_thread(_exists, path)


def _is_legacy_env(content: Any) -> bool:
    """Flat ``{"KEY": "value"}`` environment files predate named environments."""
    return (
        isinstance(content, dict)
        and "variables" not in content
        and all(isinstance(v, str) for v in content.values())
    )


def _to_document(content: Any, resource_type: ResourceType) -> CanonicalDocument:
    if resource_type == "collection":
        return HoppCollection.model_validate(content)

    if _is_legacy_env(content):
        return Environment(
            variables=[EnvironmentVariable(key=k, value=v) for k, v in content.items()]
        )
    return Environment.model_validate(content)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


async def read_json_file(
    path: str,
    file_exists_in_path: bool,
    resource_type: ResourceType = "collection",
) -> CanonicalDocument:
    """Read and parse a collection or environment document from disk.

    Args:
        path: Location of the ``.json`` file.
        file_exists_in_path: Result of an earlier existence probe, so a
            missing file is reported as such instead of as a read error.
        resource_type: Which canonical model to build.

    Raises:
        HoppCLIError: ``INVALID_FILE_TYPE``, ``FILE_NOT_FOUND``,
            ``MALFORMED_FILE``, ``MALFORMED_COLLECTION`` or
            ``MALFORMED_ENV_FILE``, all with the path as data.
    """
    if not path.endswith(".json"):
        raise error(ErrorCode.INVALID_FILE_TYPE, data=path)

    if not file_exists_in_path:
        raise error(ErrorCode.FILE_NOT_FOUND, data=path)

    try:
        content = json.loads(await asyncio.to_thread(_read_text, path))
    except (OSError, ValueError) as exc:
        logger.error("Failed to read JSON file '%s': %s", path, exc)
        raise error(ErrorCode.MALFORMED_FILE, data=path) from exc

    try:
        return _to_document(content, resource_type)
    except ValidationError as exc:
        logger.error("File '%s' is not a valid %s: %s", path, resource_type, exc)
        code = (
            ErrorCode.MALFORMED_COLLECTION
            if resource_type == "collection"
            else ErrorCode.MALFORMED_ENV_FILE
        )
        raise error(code, data=path) from exc
