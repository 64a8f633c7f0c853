"""
DTCG-style JSON token generator.

Builds one nested group per collection, keyed by the "/"-separated
segments of each variable name:

    {
      "Colors": {
        "brand": {
          "primary": {"$type": "color", "$value": "#0080ff"}
        }
      }
    }

Single-mode collections store the literal in $value; multi-mode
collections store {mode name: literal}. Aliases are "{Collection.path}"
references and colors are always hex.
"""

import json
import logging
from typing import Any, Dict

from figvex.config import ExportOptions, Unit
from figvex.directives import parse
from figvex.model import Collection, ResolvedType, Variable, VariableGraph
from figvex.queries import collection_variables_by_name, filter_collections
from figvex.resolver import format_raw_value

logger = logging.getLogger(__name__)

EXTENSION_KEY = "com.figvex"

TOKEN_TYPES: Dict[ResolvedType, str] = {
    ResolvedType.COLOR: "color",
    ResolvedType.NUMBER: "number",
    ResolvedType.STRING: "string",
    ResolvedType.BOOLEAN: "boolean",
}


def _token(
    variable: Variable, collection: Collection, graph: VariableGraph, options: ExportOptions
) -> Dict[str, Any]:
    token: Dict[str, Any] = {"$type": TOKEN_TYPES[variable.resolved_type]}
    if variable.description:
        token["$description"] = variable.description

    visited = frozenset({variable.id})

    def raw(mode_id: str) -> Any:
        return format_raw_value(
            variable.values_by_mode[mode_id],
            variable.resolved_type,
            graph,
            mode_id,
            options.qualify_names,
            visited,
        )

    if len(collection.modes) == 1:
        if variable.values_by_mode.get(collection.default_mode_id) is not None:
            token["$value"] = raw(collection.default_mode_id)
    else:
        token["$value"] = {
            mode.name: raw(mode.mode_id)
            for mode in collection.modes
            if variable.values_by_mode.get(mode.mode_id) is not None
        }

    unit = parse(variable.description).get("unit")
    if unit is not None and unit is not Unit.PX:
        token["$extensions"] = {EXTENSION_KEY: {"unit": unit.value}}

    return token


def build_tokens(graph: VariableGraph, options: ExportOptions = ExportOptions()) -> Dict[str, Any]:
    """Token document as nested dicts, one top-level group per collection."""
    result: Dict[str, Any] = {}

    for collection in filter_collections(graph.collections, options.selected_collections):
        group: Dict[str, Any] = {}

        for variable in collection_variables_by_name(graph, collection.id):
            *parents, leaf = variable.name.split("/")

            current = group
            for part in parents:
                current = current.setdefault(part, {})
                if "$type" in current:
                    break
            if "$type" in current or leaf in current:
                logger.warning(
                    "Skipping %s: path collides with another token in %s",
                    variable.name, collection.name,
                )
                continue

            current[leaf] = _token(variable, collection, graph, options)

        result[collection.name] = group

    return result


def export_json(graph: VariableGraph, options: ExportOptions = ExportOptions()) -> str:
    """
    Generate the JSON token document for a graph.

    Returns:
        Indented JSON text; "{}" for an empty graph
    """
    return json.dumps(build_tokens(graph, options), indent=2, ensure_ascii=False)
