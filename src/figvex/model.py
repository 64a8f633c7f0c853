"""
Core Variable Model Objects

Defines the data structures the export engine consumes:
    - Colors and aliases (raw value payloads)
    - Modes (named value contexts)
    - Collections (groups of variables sharing modes)
    - Variables (named, typed design values)
    - VariableGraph (the id-keyed arena handed to every exporter)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about CSS/SCSS/JSON/TypeScript output
        - Are immutable snapshots for the duration of an export
        - Are fully serializable (see figvex.serialization)
        - Represent structure, not behavior
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class ResolvedType(Enum):
    """
    The declared type of a variable.

    Every value a variable stores is interpreted through this type.
    A payload whose runtime shape does not match (e.g. a COLOR variable
    holding a string) is still exported, through a generic fallback.
    """

    COLOR = "COLOR"
    NUMBER = "NUMBER"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"


@dataclass(frozen=True)
class Color:
    """
    An RGBA color with channels normalized to 0..1.

    Properties:
        r, g, b: Color channels in [0, 1]
        a: Alpha in [0, 1], fully opaque by default
    """

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class VariableAlias:
    """
    A value that points at another variable instead of holding a literal.

    Properties:
        id: Target variable id

    IMPORTANT:
        Aliases are not collection-scoped. The target may live in any
        collection of the graph. Existence is NOT validated here; the
        resolver degrades a dangling alias to a marker.
    """

    id: str


# Anything else the host supplies is kept verbatim and coerced to text
# by the resolver.
RawValue = Union[Color, VariableAlias, int, float, str, bool, None, Any]


@dataclass(frozen=True)
class Mode:
    """A named value context within a collection (e.g. Light, Dark)."""

    mode_id: str
    name: str


@dataclass(frozen=True)
class Collection:
    """
    A named group of variables sharing one ordered list of modes.

    Properties:
        id: Opaque unique identifier
        name: Display name (first segment of qualified token names)
        modes: Ordered modes; a single-mode collection has exactly one
        default_mode_id: Mode used when only one value is exported
        variable_ids: Ids of the member variables, in host order
    """

    id: str
    name: str
    modes: List[Mode] = field(default_factory=list)
    default_mode_id: str = ""
    variable_ids: List[str] = field(default_factory=list)

    def get_mode(self, mode_id: str) -> Optional[Mode]:
        for mode in self.modes:
            if mode.mode_id == mode_id:
                return mode
        return None


@dataclass(frozen=True)
class Variable:
    """
    A named, typed design value.

    Properties:
        id:
            Stable opaque identifier (aliases point at it)

        name:
            Hierarchical display name, segments separated by "/"
            Example: "Color/Brand/Primary 500"

        resolved_type:
            ResolvedType of every value in values_by_mode

        values_by_mode:
            Map from mode id to RawValue. A missing key means
            "no value for that mode", which exporters skip.

        description:
            Free text. May embed formatting directives such as
            "unit: rem" or "format: oklch" (see figvex.directives).

        collection_id:
            Id of the owning collection
    """

    id: str
    name: str
    resolved_type: ResolvedType
    values_by_mode: Dict[str, RawValue] = field(default_factory=dict)
    description: str = ""
    collection_id: str = ""


@dataclass
class VariableGraph:
    """
    Root container for one export: every variable and collection.

    This is the arena the resolver walks. Lookups are by id and are
    graph-wide, so aliases can cross collections.

    INVARIANTS (guaranteed by figvex.serialization, not re-checked here):
        - Every variable.collection_id names an existing collection
        - Every key of values_by_mode is a mode of that collection

    The engine never mutates a graph.
    """

    variables: List[Variable] = field(default_factory=list)
    collections: List[Collection] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._variables_by_id: Dict[str, Variable] = {v.id: v for v in self.variables}
        self._collections_by_id: Dict[str, Collection] = {c.id: c for c in self.collections}

    def get_variable(self, variable_id: str) -> Optional[Variable]:
        """
        Retrieve a variable by id.

        Args:
            variable_id: Variable identifier

        Returns:
            Variable object or None if not found
        """
        return self._variables_by_id.get(variable_id)

    def get_collection(self, collection_id: str) -> Optional[Collection]:
        """
        Retrieve a collection by id.

        Args:
            collection_id: Collection identifier

        Returns:
            Collection object or None if not found
        """
        return self._collections_by_id.get(collection_id)

    def collection_of(self, variable: Variable) -> Optional[Collection]:
        return self._collections_by_id.get(variable.collection_id)

    def value_for_mode(self, variable: Variable, mode_id: str) -> RawValue:
        """
        Value a variable holds for a mode.

        Aliases may lead into a collection that does not know `mode_id`;
        in that case the target collection's default mode is used.
        Returns None when no value exists.
        """
        if mode_id in variable.values_by_mode:
            return variable.values_by_mode[mode_id]
        collection = self.collection_of(variable)
        if collection is None or collection.get_mode(mode_id) is not None:
            return None
        return variable.values_by_mode.get(collection.default_mode_id)
