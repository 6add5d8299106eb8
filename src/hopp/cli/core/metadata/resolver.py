# hopp/cli/core/metadata/resolver.py
"""
Effective request metadata.

Replaces every template in active headers/parameters with its environment
value. Validation is all-or-nothing over the list, but the failure carries
every per-entry outcome so each broken template can be reported at once.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from hopp.cli.contracts.environment import Environment
from hopp.cli.contracts.metadata import MetadataEntry, ResolvedEntry
from hopp.cli.core.errors import ErrorCode, HoppCLIError, error
from hopp.cli.core.metadata.template import TemplateParseError, parse_template_string
from hopp.cli.core.result import Err, Ok, Result


@dataclass(frozen=True)
class MetadataOutcome:
    """Substitution attempt for one active entry."""

    key: Result[str, TemplateParseError]
    value: Result[str, TemplateParseError]
    active: bool = True

    @property
    def ok(self) -> bool:
        return isinstance(self.key, Ok) and isinstance(self.value, Ok)

    def errors(self) -> list[TemplateParseError]:
        return [r.error for r in (self.key, self.value) if isinstance(r, Err)]


def _is_effective(entry: MetadataEntry) -> bool:
    return bool(entry.key) and entry.active


def resolve_metadata(
    entries: Iterable[MetadataEntry],
    environment: Environment,
) -> Result[list[ResolvedEntry], HoppCLIError]:
    """Resolve active, non-empty-key entries against ``environment``.

    Returns:
        ``Ok`` with the resolved entries in input order, or ``Err`` holding a
        ``PARSING_ERROR`` whose data is the full list of
        :class:`MetadataOutcome` (successes included).
    """
    outcomes = [
        MetadataOutcome(
            key=parse_template_string(entry.key, environment.variables),
            value=parse_template_string(entry.value, environment.variables),
        )
        for entry in entries
        if _is_effective(entry)
    ]

    if not all(o.ok for o in outcomes):
        return Err(error(ErrorCode.PARSING_ERROR, data=outcomes))

    return Ok(
        [ResolvedEntry(key=o.key.value, value=o.value.value) for o in outcomes]
    )


def metadata_pairs(entries: Iterable[MetadataEntry]) -> dict[str, str]:
    """Fold active, non-empty-key entries into a dict (last key wins)."""
    pairs: dict[str, str] = {}
    for entry in entries:
        if _is_effective(entry):
            pairs[entry.key] = entry.value
    return pairs
