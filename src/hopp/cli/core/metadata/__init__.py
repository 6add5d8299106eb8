"""Metadata subsystem: template substitution and effective headers/params."""
from hopp.cli.core.metadata.resolver import MetadataOutcome, metadata_pairs, resolve_metadata
from hopp.cli.core.metadata.template import TemplateParseError, parse_template_string

__all__ = [
    "MetadataOutcome", "metadata_pairs", "resolve_metadata",
    "TemplateParseError", "parse_template_string",
]
