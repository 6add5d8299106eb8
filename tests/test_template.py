"""
Unit tests for environment variable substitution.
"""
import pytest

from hopp.cli.contracts.environment import EnvironmentVariable
from hopp.cli.core.metadata.template import (
    ENV_EXPAND_LOOP,
    SYNTAX_ERROR,
    UNDEFINED_VARIABLE,
    parse_template_string,
)
from hopp.cli.core.result import Err, Ok


def _vars(**bindings):
    return [EnvironmentVariable(key=k, value=v) for k, v in bindings.items()]


class TestParseTemplateString:
    def test_variable_substitution(self):
        result = parse_template_string("Bearer {{token}}", _vars(token="abc"))
        assert result == Ok("Bearer abc")

    def test_whitespace_inside_braces(self):
        result = parse_template_string("{{ host }}/api", _vars(host="localhost"))
        assert result == Ok("localhost/api")

    def test_plain_text_passes_through(self):
        result = parse_template_string("application/json", [])
        assert result == Ok("application/json")

    def test_empty_string(self):
        assert parse_template_string("", _vars(a="b")) == Ok("")

    def test_undefined_variable_fails(self):
        result = parse_template_string("{{missing}}", [])
        assert isinstance(result, Err)
        assert result.error.code == UNDEFINED_VARIABLE
        assert result.error.template == "{{missing}}"
        assert "missing" in result.error.message

    def test_syntax_error_fails(self):
        result = parse_template_string("{{ token", _vars(token="abc"))
        assert isinstance(result, Err)
        assert result.error.code == SYNTAX_ERROR

    def test_nested_expansion(self):
        variables = _vars(url="{{scheme}}://{{host}}", scheme="https", host="example.com")
        result = parse_template_string("{{url}}/v1", variables)
        assert result == Ok("https://example.com/v1")

    def test_self_reference_hits_expand_limit(self):
        result = parse_template_string("{{a}}", _vars(a="{{a}}"))
        assert isinstance(result, Err)
        assert result.error.code == ENV_EXPAND_LOOP

    def test_max_depth_override(self):
        variables = _vars(a="{{b}}", b="done")
        assert isinstance(parse_template_string("{{a}}", variables, max_depth=1), Err)
        assert parse_template_string("{{a}}", variables, max_depth=2) == Ok("done")

    def test_first_binding_wins(self):
        variables = [
            EnvironmentVariable(key="token", value="first"),
            EnvironmentVariable(key="token", value="second"),
        ]
        assert parse_template_string("{{token}}", variables) == Ok("first")

    @pytest.mark.parametrize("template", ["{{token}}", "x-{{ token }}-y"])
    def test_deterministic(self, template):
        variables = _vars(token="abc")
        assert parse_template_string(template, variables) == parse_template_string(
            template, variables
        )

    def test_hyphenated_key(self):
        result = parse_template_string("{{api-key}}", _vars(**{"api-key": "s"}))
        assert result == Ok("s")

    def test_dotted_key(self):
        result = parse_template_string("{{ base.url }}/v1", _vars(**{"base.url": "http://x"}))
        assert result == Ok("http://x/v1")

    def test_expression_is_a_key_lookup(self):
        template = "{{ cycler.__init__.__globals__.os.popen('echo hacked').read() }}"
        result = parse_template_string(template, [])
        assert isinstance(result, Err)
        assert result.error.code == UNDEFINED_VARIABLE

    def test_statement_cannot_reach_python_internals(self):
        template = (
            "{% set g = cycler.__init__.__globals__ %}"
            "{% for line in g.os.popen('echo hacked').read() %}{% endfor %}"
        )
        result = parse_template_string(template, [])
        assert isinstance(result, Err)
        assert "hacked" not in result.error.message

    def test_nested_value_cannot_escape(self):
        variables = _vars(payload="{% print cycler.__init__.__globals__ %}")
        result = parse_template_string("{{payload}}", variables)
        assert isinstance(result, Err)
