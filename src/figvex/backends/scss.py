"""
SCSS variable generator.

Emits one `$name: value;` line per variable, using each collection's
default mode. References produced by the resolver as var(--name) are
rewritten to SCSS's own $name syntax.
"""

import re
from typing import List

from figvex.config import ExportOptions
from figvex.model import VariableGraph
from figvex.names import prefixed, token_name
from figvex.queries import collection_variables, filter_collections
from figvex.resolver import resolve_variable

NO_VARIABLES = "// No variables found in this file"

# var(--name) with an optional fallback, which may hold one level of
# nested parentheses: var(--x, rgb(0, 0, 0)).
_VAR_RE = re.compile(r"var\(--([A-Za-z0-9_-]+)(?:\s*,(?:[^()]|\([^()]*\))*)?\)")


def var_to_scss(value: str) -> str:
    """Rewrite every var(--name[, fallback]) in `value` to $name."""
    return _VAR_RE.sub(r"$\1", value)


def scss_header(file_name: str) -> str:
    return "\n".join([
        "//",
        "// Auto-generated SCSS Variables",
        f"// Exported from Figma: {file_name}",
        "//",
        "",
    ])


def export_scss(graph: VariableGraph, options: ExportOptions = ExportOptions()) -> str:
    """
    Generate SCSS variables for a graph.

    Returns:
        SCSS text, or a "no variables" comment for an empty graph
    """
    if not graph.variables:
        return NO_VARIABLES

    collections = filter_collections(graph.collections, options.selected_collections)
    lines: List[str] = [scss_header(options.file_name)]

    for index, collection in enumerate(collections):
        if options.include_collection_comments:
            lines.append(f"// Collection: {collection.name}")

        for variable in collection_variables(graph, collection.id):
            value = resolve_variable(variable, collection.default_mode_id, graph, options)
            if value is None:
                continue
            name = prefixed(token_name(variable, graph, options.qualify_names), options.prefix)
            lines.append(f"${name}: {var_to_scss(value)};")

        if index < len(collections) - 1:
            lines.append("")

    return "\n".join(lines)
