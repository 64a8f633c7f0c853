"""
Tests for the TypeScript declaration generator.
"""

from figvex.backends.typescript import NO_VARIABLES, export_typescript, variable_names
from figvex.config import ExportOptions
from figvex.examples import build_example_graph
from figvex.model import Collection, Mode, ResolvedType, Variable, VariableGraph


class TestVariableNames:
    """Test variable_names()."""

    def test_sorted(self):
        names = variable_names(build_example_graph())
        assert names == sorted(names)
        assert names[0] == "--colors-brand-blue-500"
        assert "--spacing-layout-gutter" in names

    def test_deduplicated(self):
        collection = Collection(id="c", name="T", modes=[Mode("m", "Default")], default_mode_id="m")
        graph = VariableGraph(
            variables=[
                Variable(id="1", name="Gap", resolved_type=ResolvedType.NUMBER, collection_id="c"),
                Variable(id="2", name="gap", resolved_type=ResolvedType.NUMBER, collection_id="c"),
            ],
            collections=[collection],
        )
        assert variable_names(graph) == ["--t-gap"]

    def test_prefix(self):
        names = variable_names(build_example_graph(), ExportOptions(prefix="ds"))
        assert all(name.startswith("--ds-") for name in names)


class TestExportTypescript:
    """Test export_typescript()."""

    def test_union_and_module_augmentation(self):
        ts = export_typescript(build_example_graph())
        assert "export type CSSVariableName =\n" in ts
        assert '  | "--colors-semantic-primary"\n' in ts
        assert "declare module 'csstype' {" in ts
        assert "    [key: CSSVariableName]: string | number;" in ts

    def test_union_terminated(self):
        ts = export_typescript(build_example_graph())
        assert '  | "--spacing-space-lg"\n;\n' in ts

    def test_empty_graph(self):
        assert export_typescript(VariableGraph()) == NO_VARIABLES

    def test_filtered_to_nothing(self):
        options = ExportOptions(selected_collections=frozenset({"missing"}))
        assert export_typescript(build_example_graph(), options) == NO_VARIABLES
