"""
Tests for identifier normalization.
"""

import re

import pytest

from figvex.model import Collection, Mode, ResolvedType, Variable, VariableGraph
from figvex.names import normalize, prefixed, token_name, token_path

IDENTIFIER_RE = re.compile(r"^[a-z0-9-]*$")


def _graph() -> VariableGraph:
    collection = Collection(
        id="c1", name="Colors", modes=[Mode("m1", "Default")], default_mode_id="m1",
        variable_ids=["v1"],
    )
    variable = Variable(
        id="v1", name="brand/Primary", resolved_type=ResolvedType.COLOR, collection_id="c1"
    )
    return VariableGraph(variables=[variable], collections=[collection])


class TestNormalize:
    """Test normalize()."""

    def test_hierarchical_name(self):
        assert normalize("Color/Brand/Primary 500") == "color-brand-primary-500"

    def test_camel_case_split(self):
        assert normalize("backgroundColor") == "background-color"

    def test_uppercase_run_not_split(self):
        assert normalize("HTMLColor") == "htmlcolor"

    def test_invalid_characters_replaced(self):
        assert normalize("space.lg (24)") == "space-lg-24"

    def test_trims_and_collapses_hyphens(self):
        assert normalize("  --a//b--  ") == "a-b"

    def test_non_ascii_dropped(self):
        assert normalize("café/crème") == "caf-cr-me"

    def test_empty_and_non_string(self):
        assert normalize("") == ""
        assert normalize(None) == ""
        assert normalize(42) == ""

    @pytest.mark.parametrize("name", [
        "Color/Brand/Primary 500",
        "--weird__Name--",
        "a  b\tc",
        "ÄÖÜ/ß",
        "x/-/y",
        "///",
    ])
    def test_output_shape(self, name):
        """Output is lowercase alnum and single hyphens, never at the ends."""
        result = normalize(name)
        assert IDENTIFIER_RE.match(result)
        assert "--" not in result
        assert not result.startswith("-")
        assert not result.endswith("-")
        assert normalize(name) == result


class TestPrefixed:
    """Test prefixed()."""

    def test_with_prefix(self):
        assert prefixed("color-primary", "ds") == "ds-color-primary"

    def test_without_prefix(self):
        assert prefixed("color-primary") == "color-primary"
        assert prefixed("color-primary", "") == "color-primary"


class TestTokenNames:
    """Test collection-qualified names."""

    def test_qualified(self):
        graph = _graph()
        assert token_name(graph.variables[0], graph) == "colors-brand-primary"

    def test_unqualified(self):
        graph = _graph()
        assert token_name(graph.variables[0], graph, qualify=False) == "brand-primary"

    def test_path(self):
        graph = _graph()
        assert token_path(graph.variables[0], graph) == "Colors.brand.Primary"
        assert token_path(graph.variables[0], graph, qualify=False) == "brand.Primary"
