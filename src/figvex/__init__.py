"""
figvex: design variable export engine.

Turns a snapshot of design variables (collections, modes, aliases) into
CSS custom properties, SCSS variables, a DTCG-style JSON token document
and TypeScript declarations.

ARCHITECTURAL GUARANTEE:
------------------------
The engine never mutates the variable graph it is given and never raises
on bad variable data. Broken aliases, cycles and mismatched payloads are
rendered as inline markers so one bad variable cannot block an export.

Structural problems in the snapshot itself are rejected once, at load
time, by `figvex.serialization`.
"""

__version__ = "0.1.0"
