"""
Tests for snapshot serialization.

These tests ensure lossless JSON/YAML round-trip and that malformed
snapshots are rejected with SnapshotError at load time.
"""

import pytest

from figvex.errors import FigvexError, SnapshotError
from figvex.examples import build_example_graph
from figvex.model import Color, ResolvedType, VariableAlias
from figvex.serialization import (
    graph_from_dict,
    graph_from_json,
    graph_from_yaml,
    graph_to_dict,
    graph_to_json,
    graph_to_yaml,
    value_from_dict,
    value_to_dict,
)


def _snapshot() -> dict:
    return {
        "collections": [{
            "id": "c1",
            "name": "Colors",
            "modes": [{"modeId": "m1", "name": "Light"}, {"modeId": "m2", "name": "Dark"}],
            "defaultModeId": "m1",
            "variableIds": ["v1", "v2"],
        }],
        "variables": [
            {
                "id": "v1",
                "name": "brand/blue",
                "resolvedType": "COLOR",
                "valuesByMode": {"m1": {"r": 0, "g": 0.5, "b": 1, "a": 1}},
                "variableCollectionId": "c1",
            },
            {
                "id": "v2",
                "name": "semantic/primary",
                "resolvedType": "COLOR",
                "valuesByMode": {"m1": {"type": "VARIABLE_ALIAS", "id": "v1"}},
                "description": None,
                "variableCollectionId": "c1",
            },
        ],
    }


class TestRoundTrip:
    """Test lossless round trips."""

    def test_dict(self):
        graph = build_example_graph()
        assert graph_from_dict(graph_to_dict(graph)) == graph

    def test_json(self):
        graph = build_example_graph()
        assert graph_from_json(graph_to_json(graph)) == graph

    def test_yaml(self):
        graph = build_example_graph()
        assert graph_from_yaml(graph_to_yaml(graph)) == graph


class TestDecoding:
    """Test decoding of the host payload shape."""

    def test_snapshot(self):
        graph = graph_from_dict(_snapshot())
        blue = graph.get_variable("v1")
        primary = graph.get_variable("v2")

        assert blue.values_by_mode["m1"] == Color(0, 0.5, 1, 1)
        assert primary.values_by_mode["m1"] == VariableAlias("v1")
        assert primary.description == ""
        assert graph.get_collection("c1").default_mode_id == "m1"

    def test_float_is_number(self):
        snapshot = _snapshot()
        snapshot["variables"][0]["resolvedType"] = "FLOAT"
        snapshot["variables"][0]["valuesByMode"] = {"m1": 4}
        assert graph_from_dict(snapshot).get_variable("v1").resolved_type is ResolvedType.NUMBER

    def test_color_alpha_defaults(self):
        assert value_from_dict({"r": 1, "g": 1, "b": 1}) == Color(1, 1, 1, 1.0)

    def test_partial_color_kept_raw(self):
        assert value_from_dict({"r": 1}) == {"r": 1}

    def test_alias_encoding(self):
        assert value_to_dict(VariableAlias("v9")) == {"type": "VARIABLE_ALIAS", "id": "v9"}

    def test_default_mode_falls_back_to_first(self):
        snapshot = _snapshot()
        del snapshot["collections"][0]["defaultModeId"]
        assert graph_from_dict(snapshot).get_collection("c1").default_mode_id == "m1"

    def test_empty_snapshot(self):
        graph = graph_from_dict({})
        assert graph.variables == []
        assert graph.collections == []


class TestSnapshotErrors:
    """Malformed snapshots raise SnapshotError."""

    def test_is_figvex_error(self):
        assert issubclass(SnapshotError, FigvexError)

    def test_unknown_collection(self):
        snapshot = _snapshot()
        snapshot["variables"][0]["variableCollectionId"] = "nope"
        with pytest.raises(SnapshotError, match="missing collection"):
            graph_from_dict(snapshot)

    def test_value_for_foreign_mode(self):
        snapshot = _snapshot()
        snapshot["variables"][0]["valuesByMode"]["m9"] = 1
        with pytest.raises(SnapshotError, match="outside"):
            graph_from_dict(snapshot)

    def test_unknown_type(self):
        snapshot = _snapshot()
        snapshot["variables"][0]["resolvedType"] = "GRADIENT"
        with pytest.raises(SnapshotError, match="unknown resolvedType"):
            graph_from_dict(snapshot)

    def test_missing_id(self):
        snapshot = _snapshot()
        del snapshot["variables"][0]["id"]
        with pytest.raises(SnapshotError, match="Missing 'id'"):
            graph_from_dict(snapshot)

    def test_collection_without_modes(self):
        snapshot = _snapshot()
        snapshot["collections"][0]["modes"] = []
        with pytest.raises(SnapshotError, match="no modes"):
            graph_from_dict(snapshot)

    def test_default_mode_not_a_mode(self):
        snapshot = _snapshot()
        snapshot["collections"][0]["defaultModeId"] = "m9"
        with pytest.raises(SnapshotError, match="default mode"):
            graph_from_dict(snapshot)

    def test_not_an_object(self):
        with pytest.raises(SnapshotError):
            graph_from_json("[]")

    def test_invalid_json(self):
        with pytest.raises(SnapshotError, match="Invalid JSON"):
            graph_from_json("{not json")

    def test_invalid_yaml(self):
        with pytest.raises(SnapshotError, match="Invalid YAML"):
            graph_from_yaml("variables: [unclosed")


class TestLoosePayloads:
    """Payloads that load but are not well-formed colors or names."""

    @pytest.mark.parametrize("payload", [
        {"r": "1", "g": 0, "b": 0},
        {"r": None, "g": 0, "b": 0},
        {"r": True, "g": 0, "b": 0},
        {"r": 1, "g": 0, "b": 0, "a": "half"},
        {"r": float("nan"), "g": 0, "b": 0},
    ])
    def test_non_numeric_channels_stay_raw(self, payload):
        assert value_from_dict(payload) is payload

    def test_variable_name_must_be_string(self):
        snapshot = _snapshot()
        snapshot["variables"][0]["name"] = 5
        with pytest.raises(SnapshotError, match="variable 'v1'"):
            graph_from_dict(snapshot)

    def test_mode_name_must_be_string(self):
        snapshot = _snapshot()
        snapshot["collections"][0]["modes"][1]["name"] = None
        with pytest.raises(SnapshotError, match="mode 'm2'"):
            graph_from_dict(snapshot)

    def test_collection_name_must_be_string(self):
        snapshot = _snapshot()
        snapshot["collections"][0]["name"] = ["Colors"]
        with pytest.raises(SnapshotError, match="collection 'c1'"):
            graph_from_dict(snapshot)

    def test_missing_name_defaults_to_empty(self):
        snapshot = _snapshot()
        del snapshot["variables"][0]["name"]
        assert graph_from_dict(snapshot).get_variable("v1").name == ""
