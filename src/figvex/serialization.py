"""
Serialization helpers for variable snapshots.

Reads and writes the host bridge's payload shape:

    {
      "collections": [{"id", "name", "modes": [{"modeId", "name"}],
                       "defaultModeId", "variableIds"}],
      "variables":   [{"id", "name", "resolvedType", "valuesByMode",
                       "description", "variableCollectionId"}]
    }

Color values are {"r", "g", "b", "a"} objects; aliases are
{"type": "VARIABLE_ALIAS", "id": ...}. JSON and YAML go through the same
intermediate dict representation.

This is the only place structural problems are checked. A graph built
here satisfies the invariants the resolver relies on.
"""
from __future__ import annotations

import json
import math
from typing import Any, Dict, List

import yaml

from figvex.errors import SnapshotError
from figvex.model import (
    Collection,
    Color,
    Mode,
    RawValue,
    ResolvedType,
    Variable,
    VariableAlias,
    VariableGraph,
)

ALIAS_TYPE = "VARIABLE_ALIAS"

# The host platform calls numbers FLOAT.
_TYPE_NAMES: Dict[str, ResolvedType] = {t.value: t for t in ResolvedType}
_TYPE_NAMES["FLOAT"] = ResolvedType.NUMBER


def _require(d: Dict[str, Any], key: str, what: str) -> Any:
    if not isinstance(d, dict):
        raise SnapshotError(f"Expected an object for {what}, got {type(d).__name__}")
    if key not in d:
        raise SnapshotError(f"Missing '{key}' in {what}")
    return d[key]


def _name(d: Dict[str, Any], what: str) -> str:
    name = d.get("name", "")
    if not isinstance(name, str):
        raise SnapshotError(f"Name of {what} must be a string, got {name!r}")
    return name


def value_to_dict(value: RawValue) -> Any:
    if isinstance(value, VariableAlias):
        return {"type": ALIAS_TYPE, "id": value.id}
    if isinstance(value, Color):
        return {"r": value.r, "g": value.g, "b": value.b, "a": value.a}
    return value


def _is_channel(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool) and math.isfinite(x)


def value_from_dict(d: Any) -> RawValue:
    """
    Decode a stored value.

    A color needs finite numeric r, g, b (and a, when present). Dicts
    that are neither an alias nor such a color are kept as-is; the
    resolver renders those payloads through its string fallback.
    """
    if isinstance(d, dict):
        if d.get("type") == ALIAS_TYPE and "id" in d:
            return VariableAlias(id=str(d["id"]))
        channels = [d.get(c) for c in ("r", "g", "b")] + [d.get("a", 1.0)]
        if all(_is_channel(c) for c in channels):
            return Color(r=d["r"], g=d["g"], b=d["b"], a=d.get("a", 1.0))
    return d


def mode_to_dict(m: Mode) -> Dict[str, Any]:
    return {"modeId": m.mode_id, "name": m.name}


def mode_from_dict(d: Dict[str, Any]) -> Mode:
    mode_id = _require(d, "modeId", "mode")
    return Mode(mode_id=mode_id, name=_name(d, f"mode '{mode_id}'"))


def collection_to_dict(c: Collection) -> Dict[str, Any]:
    return {
        "id": c.id,
        "name": c.name,
        "modes": [mode_to_dict(m) for m in c.modes],
        "defaultModeId": c.default_mode_id,
        "variableIds": list(c.variable_ids),
    }


def collection_from_dict(d: Dict[str, Any]) -> Collection:
    collection_id = _require(d, "id", "collection")
    modes = [mode_from_dict(m) for m in d.get("modes", [])]
    if not modes:
        raise SnapshotError(f"Collection '{collection_id}' has no modes")
    default_mode_id = d.get("defaultModeId", modes[0].mode_id)
    if default_mode_id not in {m.mode_id for m in modes}:
        raise SnapshotError(
            f"Collection '{collection_id}' default mode '{default_mode_id}' is not one of its modes"
        )
    return Collection(
        id=collection_id,
        name=_name(d, f"collection '{collection_id}'"),
        modes=modes,
        default_mode_id=default_mode_id,
        variable_ids=list(d.get("variableIds", [])),
    )


def variable_to_dict(v: Variable) -> Dict[str, Any]:
    return {
        "id": v.id,
        "name": v.name,
        "resolvedType": v.resolved_type.value,
        "valuesByMode": {mode_id: value_to_dict(value) for mode_id, value in v.values_by_mode.items()},
        "description": v.description,
        "variableCollectionId": v.collection_id,
    }


def variable_from_dict(d: Dict[str, Any]) -> Variable:
    variable_id = _require(d, "id", "variable")
    type_name = str(_require(d, "resolvedType", f"variable '{variable_id}'")).upper()
    if type_name not in _TYPE_NAMES:
        raise SnapshotError(f"Variable '{variable_id}' has unknown resolvedType '{type_name}'")
    return Variable(
        id=variable_id,
        name=_name(d, f"variable '{variable_id}'"),
        resolved_type=_TYPE_NAMES[type_name],
        values_by_mode={
            mode_id: value_from_dict(value) for mode_id, value in d.get("valuesByMode", {}).items()
        },
        description=d.get("description") or "",
        collection_id=_require(d, "variableCollectionId", f"variable '{variable_id}'"),
    )


def _check_structure(variables: List[Variable], collections: List[Collection]) -> None:
    by_id = {c.id: c for c in collections}
    for v in variables:
        collection = by_id.get(v.collection_id)
        if collection is None:
            raise SnapshotError(
                f"Variable '{v.name}' references missing collection '{v.collection_id}'"
            )
        mode_ids = {m.mode_id for m in collection.modes}
        stray = sorted(set(v.values_by_mode) - mode_ids)
        if stray:
            raise SnapshotError(
                f"Variable '{v.name}' has values for modes outside '{collection.name}': {stray}"
            )


def graph_to_dict(g: VariableGraph) -> Dict[str, Any]:
    return {
        "collections": [collection_to_dict(c) for c in g.collections],
        "variables": [variable_to_dict(v) for v in g.variables],
    }


def graph_from_dict(d: Dict[str, Any]) -> VariableGraph:
    """
    Build a VariableGraph from a snapshot dict.

    Raises:
        SnapshotError: If the snapshot is malformed or breaks the
            collection/mode invariants
    """
    if not isinstance(d, dict):
        raise SnapshotError("Snapshot must be an object with 'variables' and 'collections'")
    collections = [collection_from_dict(c) for c in d.get("collections") or []]
    variables = [variable_from_dict(v) for v in d.get("variables") or []]
    _check_structure(variables, collections)
    return VariableGraph(variables=variables, collections=collections)


def graph_to_json(g: VariableGraph) -> str:
    return json.dumps(graph_to_dict(g), sort_keys=True)


def graph_from_json(s: str) -> VariableGraph:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON snapshot: {e}") from e
    return graph_from_dict(d)


def graph_to_yaml(g: VariableGraph) -> str:
    return yaml.safe_dump(graph_to_dict(g))


def graph_from_yaml(s: str) -> VariableGraph:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SnapshotError(f"Invalid YAML snapshot: {e}") from e
    return graph_from_dict(d)
