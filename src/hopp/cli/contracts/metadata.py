# hopp/cli/contracts/metadata.py
"""
Request metadata contracts.

Headers and query parameters share one shape: a key/value pair that can be
toggled off without being removed from the request. Both may contain
``{{ variable }}`` templates that are resolved against an environment
before the request is sent.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class MetadataEntry(BaseModel):
    """A single header or query parameter as stored in a request document.

    Attributes:
        key: Header / parameter name, possibly templated.
        value: Header / parameter value, possibly templated.
        active: Disabled entries are kept in the document but never sent.
        description: Free-form note shown in the editor.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    key: str
    value: str = ""
    active: bool = True
    description: str = ""


class ResolvedEntry(BaseModel):
    """Metadata entry after template substitution."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str
    active: Literal[True] = True
