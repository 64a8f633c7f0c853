"""
CSS custom property generator.

Converts a VariableGraph into a block of CSS custom properties.

Supports two layouts:
    - single block: one selector, every collection's default mode
    - modes as selectors: one block per (collection, mode), non-default
      modes scoped by a data-theme attribute and a theme class
"""

from typing import List, Optional

from figvex.config import DEFAULT_SELECTOR, ExportOptions
from figvex.model import Collection, Mode, Variable, VariableGraph
from figvex.names import normalize, prefixed, token_name
from figvex.queries import collection_variables, filter_collections
from figvex.resolver import resolve_variable

NO_VARIABLES = "/* No variables found in this file */"


def css_header(file_name: str) -> str:
    return "\n".join([
        "/**",
        " * Auto-generated CSS Custom Properties",
        f" * Exported from Figma: {file_name}",
        " */",
        "",
    ])


def _declaration(
    variable: Variable, mode_id: str, graph: VariableGraph, options: ExportOptions
) -> Optional[str]:
    value = resolve_variable(variable, mode_id, graph, options)
    if value is None:
        return None
    name = prefixed(token_name(variable, graph, options.qualify_names), options.prefix)
    return f"  --{name}: {value};"


def mode_selector(selector: str, mode: Mode) -> str:
    """
    Selector for a mode block; the mode named "default" keeps the base selector.

    The data-theme value is the lowercased mode name. The class form is
    the normalized name, since a class selector cannot contain spaces:
    "Light Mode" -> [data-theme="light mode"], .theme-light-mode
    """
    mode_name = mode.name.lower()
    if mode_name == "default":
        return selector
    return f'{selector}[data-theme="{mode_name}"], .theme-{normalize(mode.name)}'


def _mode_blocks(
    collections: List[Collection], graph: VariableGraph, options: ExportOptions, selector: str
) -> List[str]:
    lines: List[str] = []

    for collection in collections:
        if options.include_collection_comments:
            lines.append(f"/* Collection: {collection.name} */")

        variables = collection_variables(graph, collection.id)

        for mode in collection.modes:
            if options.include_mode_comments:
                lines.append(f"/* Mode: {mode.name} */")

            lines.append(f"{mode_selector(selector, mode)} {{")
            for variable in variables:
                line = _declaration(variable, mode.mode_id, graph, options)
                if line:
                    lines.append(line)
            lines.extend(["}", ""])

    return lines


def _single_block(
    collections: List[Collection], graph: VariableGraph, options: ExportOptions, selector: str
) -> List[str]:
    lines = [f"{selector} {{"]

    for index, collection in enumerate(collections):
        if options.include_collection_comments:
            lines.append(f"  /* {collection.name} */")

        for variable in collection_variables(graph, collection.id):
            line = _declaration(variable, collection.default_mode_id, graph, options)
            if line:
                lines.append(line)

        # Blank line between collections
        if index < len(collections) - 1:
            lines.append("")

    lines.append("}")
    return lines


def export_css(graph: VariableGraph, options: ExportOptions = ExportOptions()) -> str:
    """
    Generate CSS custom properties for a graph.

    Args:
        graph: Variables and collections to export
        options: Selector, comment, prefix and filter switches

    Returns:
        CSS text, or a "no variables" comment for an empty graph
    """
    if not graph.variables:
        return NO_VARIABLES

    collections = filter_collections(graph.collections, options.selected_collections)
    selector = (options.selector or "").strip() or DEFAULT_SELECTOR

    lines = [css_header(options.file_name)]
    if options.use_modes_as_selectors:
        lines.extend(_mode_blocks(collections, graph, options, selector))
    else:
        lines.extend(_single_block(collections, graph, options, selector))

    return "\n".join(lines)
