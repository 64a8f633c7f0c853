"""
Value Resolver: raw variable values -> output literals.

Given a value, the mode being exported and the whole variable graph,
produce the text a backend writes for that (variable, mode) pair.

Aliases are emitted as references (var(--name)), never as the target's
literal, so the exported files keep the design system's structure.
The resolver still walks the alias chain behind a reference, carrying an
explicit depth counter and a visited set, so that cycles and runaway
chains are reported instead of exported as references that can never
resolve.

IMPORTANT: Nothing in this module raises on bad data. Every failure is
rendered as one of the marker comments below.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, FrozenSet, Optional

from figvex.colors import format_color, to_hex
from figvex.config import DEFAULT_FORMAT, MAX_ALIAS_DEPTH, ExportOptions, FormatConfig
from figvex.directives import format_config
from figvex.model import Color, RawValue, ResolvedType, Variable, VariableAlias, VariableGraph
from figvex.names import prefixed, token_name, token_path
from figvex.numbers import clean_number, format_number

logger = logging.getLogger(__name__)

CIRCULAR_REFERENCE = "/* circular reference */"
UNRESOLVED_ALIAS = "/* unresolved alias */"


def _is_real(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _coerce(value: RawValue) -> str:
    """Last-resort text for a payload that does not match its declared type."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_real(value):
        return clean_number(value)
    return str(value)


def _is_color(value: RawValue) -> bool:
    if not isinstance(value, Color):
        return False
    return all(_is_real(c) and math.isfinite(c) for c in (value.r, value.g, value.b, value.a))


def _color(value: RawValue, config: FormatConfig) -> Optional[str]:
    if _is_color(value):
        return format_color(value, config.color_format)
    return None


def _number(value: RawValue, config: FormatConfig) -> Optional[str]:
    if _is_real(value) and math.isfinite(value):
        return format_number(value, config)
    return None


def _string(value: RawValue, config: FormatConfig) -> Optional[str]:
    if isinstance(value, str):
        escaped = value.replace('"', '\\"')
        return f'"{escaped}"'
    return None


def _boolean(value: RawValue, config: FormatConfig) -> Optional[str]:
    if isinstance(value, bool):
        return "1" if value else "0"
    return None


# One formatter per ResolvedType member. A formatter returns None when the
# payload's shape does not match, which sends it to _coerce.
TYPE_FORMATTERS: Dict[ResolvedType, Callable[[RawValue, FormatConfig], Optional[str]]] = {
    ResolvedType.COLOR: _color,
    ResolvedType.NUMBER: _number,
    ResolvedType.STRING: _string,
    ResolvedType.BOOLEAN: _boolean,
}


def resolve_value(
    value: RawValue,
    mode_id: str,
    graph: VariableGraph,
    resolved_type: ResolvedType,
    config: FormatConfig = DEFAULT_FORMAT,
    prefix: Optional[str] = None,
    qualify: bool = False,
    depth: int = 0,
    visited: Optional[FrozenSet[str]] = None,
) -> str:
    """
    Resolve one raw value to its style-sheet text.

    Args:
        value: The stored value (literal or VariableAlias)
        mode_id: Mode being exported
        graph: Every variable and collection (aliases are graph-wide)
        resolved_type: Declared type of the variable owning `value`
        config: Unit / color format for literals
        prefix: Identifier prefix applied to references
        qualify: Lead reference names with the target's collection name
        depth: Alias hops taken so far
        visited: Variable ids already on this alias chain

    Returns:
        A literal ("#ff0000", "1rem", "\"Inter\"", "1"), a reference
        ("var(--color-primary)"), or a marker comment
    """
    if depth > MAX_ALIAS_DEPTH:
        logger.debug("Alias chain deeper than %d hops", MAX_ALIAS_DEPTH)
        return CIRCULAR_REFERENCE

    visited = visited or frozenset()

    if isinstance(value, VariableAlias):
        if value.id in visited:
            logger.debug("Alias cycle through %s", value.id)
            return CIRCULAR_REFERENCE

        target = graph.get_variable(value.id)
        if target is None:
            logger.debug("Alias target %s not found", value.id)
            return UNRESOLVED_ALIAS

        # Walk the rest of the chain only to detect cycles and depth.
        behind = resolve_value(
            graph.value_for_mode(target, mode_id),
            mode_id,
            graph,
            target.resolved_type,
            format_config(target.description),
            prefix,
            qualify,
            depth + 1,
            visited | {target.id},
        )
        if behind == CIRCULAR_REFERENCE:
            return CIRCULAR_REFERENCE

        return f"var(--{prefixed(token_name(target, graph, qualify), prefix)})"

    formatted = TYPE_FORMATTERS[resolved_type](value, config)
    if formatted is None:
        return _coerce(value)
    return formatted


def resolve_variable(
    variable: Variable, mode_id: str, graph: VariableGraph, options: ExportOptions
) -> Optional[str]:
    """
    Style-sheet text for a variable in one mode.

    The variable's description directives are overlaid on the default
    format, and the variable itself seeds the visited set so a
    self-alias is caught on the first hop.

    Returns:
        The resolved text, or None when the variable has no value
        for `mode_id`
    """
    value = variable.values_by_mode.get(mode_id)
    if value is None:
        return None

    return resolve_value(
        value,
        mode_id,
        graph,
        variable.resolved_type,
        format_config(variable.description),
        options.prefix,
        options.qualify_names,
        visited=frozenset({variable.id}),
    )


def format_raw_value(
    value: RawValue,
    resolved_type: ResolvedType,
    graph: VariableGraph,
    mode_id: str = "",
    qualify: bool = True,
    visited: Optional[FrozenSet[str]] = None,
) -> Any:
    """
    JSON token value for a raw value.

    Differs from resolve_value:
        - aliases become "{Collection.path.to.token}" references
        - colors are always canonical hex, whatever the format directive
        - numbers, strings and booleans stay JSON scalars
    """
    if isinstance(value, VariableAlias):
        target = graph.get_variable(value.id)
        if target is None:
            logger.debug("Alias target %s not found", value.id)
            return UNRESOLVED_ALIAS

        if resolve_value(value, mode_id, graph, resolved_type, visited=visited) == CIRCULAR_REFERENCE:
            return CIRCULAR_REFERENCE

        return "{" + token_path(target, graph, qualify) + "}"

    if resolved_type is ResolvedType.COLOR and _is_color(value):
        return to_hex(value)
    if resolved_type is ResolvedType.NUMBER and _is_real(value) and math.isfinite(value):
        return value
    if resolved_type is ResolvedType.STRING and isinstance(value, str):
        return value
    if resolved_type is ResolvedType.BOOLEAN and isinstance(value, bool):
        return value

    return _coerce(value)
