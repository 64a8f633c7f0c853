"""
Identifier normalization.

Maps hierarchical variable names ("Color/Brand/Primary 500") to the flat
lowercase hyphenated identifiers every backend uses ("color-brand-primary-500").
"""
from __future__ import annotations

import re
from typing import Optional

from figvex.model import Variable, VariableGraph

_SEPARATOR_RE = re.compile(r"/|\s+")
_CAMEL_RE = re.compile(r"([a-z])([A-Z])")
_INVALID_RE = re.compile(r"[^A-Za-z0-9-]")
_HYPHENS_RE = re.compile(r"-+")


def normalize(name: str) -> str:
    """
    Convert a variable name to a custom-property-safe identifier.

    Steps, in order:
        "/" and whitespace runs -> "-"
        camelCase -> camel-Case (an uppercase run is not split)
        anything outside [a-z0-9-] -> "-"
        collapse "-" runs, trim "-" at both ends, lowercase

    Non-string or empty input yields "".
    """
    if not name or not isinstance(name, str):
        return ""

    name = _SEPARATOR_RE.sub("-", name)
    name = _CAMEL_RE.sub(r"\1-\2", name)
    name = _INVALID_RE.sub("-", name)
    name = _HYPHENS_RE.sub("-", name)
    return name.strip("-").lower()


def prefixed(name: str, prefix: Optional[str] = None) -> str:
    """Prepend "<prefix>-" when a non-empty prefix is given."""
    if not prefix:
        return name
    return f"{prefix}-{name}"


def _qualified_name(variable: Variable, graph: VariableGraph, qualify: bool) -> str:
    if qualify:
        collection = graph.collection_of(variable)
        if collection is not None and collection.name:
            return f"{collection.name}/{variable.name}"
    return variable.name


def token_name(variable: Variable, graph: VariableGraph, qualify: bool = True) -> str:
    """
    Normalized identifier for a variable.

    With `qualify`, the owning collection's name leads the identifier:
    collection "Colors" + variable "primary" -> "colors-primary".
    """
    return normalize(_qualified_name(variable, graph, qualify))


def token_path(variable: Variable, graph: VariableGraph, qualify: bool = True) -> str:
    """Dotted token path used by JSON references ("Colors.brand.primary")."""
    return _qualified_name(variable, graph, qualify).replace("/", ".")
