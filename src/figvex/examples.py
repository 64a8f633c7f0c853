"""
Example variable graph for demos and tests.

Builds a small design system: a two-mode color collection with brand
primitives and semantic aliases, and a single-mode spacing collection
using unit directives.
"""
from figvex.model import (
    Collection,
    Color,
    Mode,
    ResolvedType,
    Variable,
    VariableAlias,
    VariableGraph,
)


def build_example_graph() -> VariableGraph:
    light = Mode(mode_id="m-light", name="Light")
    dark = Mode(mode_id="m-dark", name="Dark")
    base = Mode(mode_id="m-base", name="Default")

    variables = [
        Variable(
            id="v-blue-500",
            name="Brand/Blue 500",
            resolved_type=ResolvedType.COLOR,
            values_by_mode={
                "m-light": Color(r=0, g=0.5, b=1),
                "m-dark": Color(r=0.2, g=0.6, b=1),
            },
            collection_id="c-colors",
        ),
        Variable(
            id="v-overlay",
            name="Surface/overlay",
            resolved_type=ResolvedType.COLOR,
            values_by_mode={
                "m-light": Color(r=0, g=0, b=0, a=0.5),
                "m-dark": Color(r=1, g=1, b=1, a=0.25),
            },
            description="Modal backdrop. format: rgb",
            collection_id="c-colors",
        ),
        Variable(
            id="v-primary",
            name="Semantic/primary",
            resolved_type=ResolvedType.COLOR,
            values_by_mode={
                "m-light": VariableAlias(id="v-blue-500"),
                "m-dark": VariableAlias(id="v-blue-500"),
            },
            collection_id="c-colors",
        ),
        Variable(
            id="v-space-base",
            name="space/base",
            resolved_type=ResolvedType.NUMBER,
            values_by_mode={"m-base": 16},
            description="unit: rem",
            collection_id="c-spacing",
        ),
        Variable(
            id="v-space-lg",
            name="space/lg",
            resolved_type=ResolvedType.NUMBER,
            values_by_mode={"m-base": 24},
            description="unit: rem",
            collection_id="c-spacing",
        ),
        Variable(
            id="v-gutter",
            name="layout/gutter",
            resolved_type=ResolvedType.NUMBER,
            values_by_mode={"m-base": VariableAlias(id="v-space-lg")},
            collection_id="c-spacing",
        ),
        Variable(
            id="v-font",
            name="font/family",
            resolved_type=ResolvedType.STRING,
            values_by_mode={"m-base": "Inter"},
            collection_id="c-spacing",
        ),
    ]

    collections = [
        Collection(
            id="c-colors",
            name="Colors",
            modes=[light, dark],
            default_mode_id="m-light",
            variable_ids=["v-blue-500", "v-overlay", "v-primary"],
        ),
        Collection(
            id="c-spacing",
            name="Spacing",
            modes=[base],
            default_mode_id="m-base",
            variable_ids=["v-space-base", "v-space-lg", "v-gutter", "v-font"],
        ),
    ]

    return VariableGraph(variables=variables, collections=collections)
