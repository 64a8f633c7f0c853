"""
Collection and variable queries shared by the backends.
"""

from typing import Iterable, List, Optional

from figvex.model import Collection, Variable, VariableGraph
from figvex.names import normalize


def filter_collections(
    collections: List[Collection], selected: Optional[Iterable[str]] = None
) -> List[Collection]:
    """
    Collections whose id is in `selected`, in their original order.

    An empty or missing selection means no filtering.
    """
    selected_ids = set(selected or ())
    if not selected_ids:
        return list(collections)
    return [c for c in collections if c.id in selected_ids]


def collection_variables(graph: VariableGraph, collection_id: str) -> List[Variable]:
    """Variables of a collection sorted by normalized name (stable for ties)."""
    members = [v for v in graph.variables if v.collection_id == collection_id]
    return sorted(members, key=lambda v: normalize(v.name))


def collection_variables_by_name(graph: VariableGraph, collection_id: str) -> List[Variable]:
    """
    Variables of a collection sorted by raw "/"-separated name (stable).

    The JSON token document nests by raw path segments, so it walks
    variables in this order.
    """
    members = [v for v in graph.variables if v.collection_id == collection_id]
    return sorted(members, key=lambda v: v.name)
