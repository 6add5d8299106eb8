# hopp/cli/contracts/environment.py
"""
Environment contracts.

An environment is a named, ordered set of variable bindings. The same model
is used as the binding set for template resolution and as the canonical
environment document returned by the resource loader.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EnvironmentVariable(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    key: str
    value: str = ""
    secret: bool = False


class Environment(BaseModel):
    """Read-only variable bindings.

    Attributes:
        v: Document schema version.
        id: Identifier assigned by a workspace, ``None`` for local files.
        name: Display name.
        variables: Bindings in declaration order.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    v: int = 1
    id: str | None = None
    name: str = ""
    variables: list[EnvironmentVariable] = Field(default_factory=list)

    def as_dict(self) -> dict[str, str]:
        """Key -> value view; the first binding of a key wins."""
        out: dict[str, str] = {}
        for var in self.variables:
            out.setdefault(var.key, var.value)
        return out
