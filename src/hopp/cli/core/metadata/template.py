# hopp/cli/core/metadata/template.py
"""
Jinja2-based environment variable substitution.

Request metadata references environment variables as ``{{ name }}``, where
``name`` is any environment key (``api-key`` and ``base.url`` included).
Templates come from collection documents, so rendering is sandboxed and
strict: a reference to an unbound variable is a failure, not
an empty string. Variable values may themselves contain templates, so
rendering is repeated until the text is stable or the expansion limit is
reached.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from jinja2 import (
    BaseLoader,
    StrictUndefined,
    TemplateError,
    TemplateSyntaxError,
    UndefinedError,
)
from jinja2.sandbox import ImmutableSandboxedEnvironment, SecurityError

from hopp.cli.contracts.environment import EnvironmentVariable
from hopp.cli.core.config import settings
from hopp.cli.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)

TEMPLATE_MARKER = re.compile(r"\{\{|\{%")

# `{{ api-key }}` is a lookup of the key "api-key", not an expression
VARIABLE_REFERENCE = re.compile(r"\{\{\s*([^{}]+?)\s*\}\}")

LOOKUP_NAME = "_var"

UNDEFINED_VARIABLE = "UNDEFINED_VARIABLE"
SYNTAX_ERROR = "SYNTAX_ERROR"
UNSAFE_TEMPLATE = "UNSAFE_TEMPLATE"
ENV_EXPAND_LOOP = "ENV_EXPAND_LOOP"


@dataclass(frozen=True)
class TemplateParseError:
    """Why a template could not be rendered."""

    code: str
    template: str
    message: str = ""


def _create_jinja_env() -> ImmutableSandboxedEnvironment:
    return ImmutableSandboxedEnvironment(
        loader=BaseLoader(),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


_jinja_env = _create_jinja_env()


def _bindings(variables: Iterable[EnvironmentVariable]) -> dict[str, str]:
    ctx: dict[str, str] = {}
    for var in variables:
        ctx.setdefault(var.key, var.value)
    return ctx


def _lookup(bindings: dict[str, str]):
    def lookup(key: str):
        if key in bindings:
            return bindings[key]
        return _jinja_env.undefined(name=key)

    return lookup


def _as_lookups(template: str) -> str:
    return VARIABLE_REFERENCE.sub(
        lambda m: "{{ %s(%r) }}" % (LOOKUP_NAME, m.group(1)), template
    )


def parse_template_string(
    template: str,
    variables: Iterable[EnvironmentVariable],
    *,
    max_depth: int | None = None,
) -> Result[str, TemplateParseError]:
    """Substitute environment variables into ``template``.

    Args:
        template: Raw header/parameter key or value.
        variables: Environment bindings; the first binding of a key wins.
        max_depth: Maximum rendering passes for nested templates. Defaults
            to ``settings.env_expand_limit``.

    Returns:
        ``Ok(rendered)`` or ``Err(TemplateParseError)``.
    """
    if not template or not TEMPLATE_MARKER.search(template):
        return Ok(template)

    if max_depth is None:
        max_depth = settings.env_expand_limit

    ctx = {LOOKUP_NAME: _lookup(_bindings(variables))}
    result = template

    for _ in range(max_depth):
        if not TEMPLATE_MARKER.search(result):
            return Ok(result)
        try:
            result = _jinja_env.from_string(_as_lookups(result)).render(ctx)
        except SecurityError as exc:
            logger.debug("Rejected unsafe template %r: %s", template, exc)
            return Err(TemplateParseError(UNSAFE_TEMPLATE, template, str(exc)))
        except UndefinedError as exc:
            logger.debug("Undefined variable in template %r: %s", template, exc)
            return Err(TemplateParseError(UNDEFINED_VARIABLE, template, str(exc)))
        except TemplateSyntaxError as exc:
            logger.debug("Template syntax error in %r: %s", template, exc)
            return Err(TemplateParseError(SYNTAX_ERROR, template, str(exc)))
        except TemplateError as exc:
            logger.debug("Template rendering failed for %r: %s", template, exc)
            return Err(TemplateParseError(SYNTAX_ERROR, template, str(exc)))

    if TEMPLATE_MARKER.search(result):
        return Err(
            TemplateParseError(
                ENV_EXPAND_LOOP,
                template,
                f"Template still unresolved after {max_depth} expansions",
            )
        )
    return Ok(result)
