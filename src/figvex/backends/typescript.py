"""
TypeScript declaration generator.

Emits a union type of every exported custom property name and augments
csstype's Properties so the names type-check in style objects.
"""

from typing import List

from figvex.config import ExportOptions
from figvex.model import VariableGraph
from figvex.names import prefixed, token_name
from figvex.queries import collection_variables, filter_collections

NO_VARIABLES = "// No variables found in this file"


def typescript_header(file_name: str) -> str:
    return "\n".join([
        "/**",
        " * Auto-generated TypeScript types for CSS Custom Properties",
        f" * Exported from Figma: {file_name}",
        " */",
        "",
    ])


def variable_names(graph: VariableGraph, options: ExportOptions = ExportOptions()) -> List[str]:
    """Sorted, de-duplicated custom property names ("--colors-primary")."""
    names = set()
    for collection in filter_collections(graph.collections, options.selected_collections):
        for variable in collection_variables(graph, collection.id):
            name = prefixed(token_name(variable, graph, options.qualify_names), options.prefix)
            names.add(f"--{name}")
    return sorted(names)


def export_typescript(graph: VariableGraph, options: ExportOptions = ExportOptions()) -> str:
    """
    Generate TypeScript declarations for a graph.

    Returns:
        Declaration text, or a "no variables" comment when nothing
        would be exported
    """
    names = variable_names(graph, options)
    if not names:
        return NO_VARIABLES

    lines = [typescript_header(options.file_name), "export type CSSVariableName ="]
    lines.extend(f'  | "{name}"' for name in names)
    lines.extend([
        ";",
        "",
        "declare module 'csstype' {",
        "  interface Properties {",
        "    [key: CSSVariableName]: string | number;",
        "  }",
        "}",
    ])
    return "\n".join(lines)
