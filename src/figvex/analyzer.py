"""
Alias Analyzer: diagnostics for a variable graph before export.

This module provides lightweight analysis of VariableGraph objects:
    - Inventory of collections, variables and aliases
    - How often each variable is referenced by aliases
    - Dangling aliases and alias cycles
    - Alias chain depth against MAX_ALIAS_DEPTH
    - Aliases whose target type differs from the consumer's type

IMPORTANT: This does NOT modify the graph and does NOT change what the
exporters emit. Everything it flags still exports, as a marker or as a
permissive reference; the report only explains why.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from figvex.config import MAX_ALIAS_DEPTH
from figvex.model import VariableAlias, VariableGraph


def _alias_edges(graph: VariableGraph) -> Dict[str, List[str]]:
    """Variable id -> ids it aliases, across all modes, in first-seen order."""
    edges: Dict[str, List[str]] = defaultdict(list)
    for variable in graph.variables:
        for value in variable.values_by_mode.values():
            if isinstance(value, VariableAlias) and value.id not in edges[variable.id]:
                edges[variable.id].append(value.id)
    return edges


def _find_cycle_dfs(graph: Dict[str, List[str]], start: str, visited: Set[str]) -> Optional[List[str]]:
    """DFS to find a cycle starting from a node, using an explicit stack."""
    visited.add(start)
    path = [start]
    rec_stack = {start}
    pending = [iter(graph.get(start, []))]

    while pending:
        for neighbor in pending[-1]:
            if neighbor in rec_stack:
                cycle_start_idx = path.index(neighbor)
                return path[cycle_start_idx:] + [neighbor]
            if neighbor not in visited:
                visited.add(neighbor)
                rec_stack.add(neighbor)
                path.append(neighbor)
                pending.append(iter(graph.get(neighbor, [])))
                break
        else:
            pending.pop()
            rec_stack.discard(path.pop())

    return None


def _chain_depth(start: str, edges: Dict[str, List[str]], memo: Dict[str, int]) -> int:
    """
    Longest alias chain starting at `start`.

    Post-order walk over an explicit stack. A hop back onto the current
    path counts as one hop and ends the chain there.
    """
    if start in memo:
        return memo[start]

    path = [start]
    on_path = {start}
    best = {start: 0}
    pending = [iter(edges.get(start, []))]

    while pending:
        node = path[-1]
        for target in pending[-1]:
            if target in memo:
                best[node] = max(best[node], 1 + memo[target])
            elif target in on_path:
                best[node] = max(best[node], 1)
            else:
                path.append(target)
                on_path.add(target)
                best[target] = 0
                pending.append(iter(edges.get(target, [])))
                break
        else:
            pending.pop()
            path.pop()
            on_path.discard(node)
            memo[node] = best.pop(node)
            if path:
                parent = path[-1]
                best[parent] = max(best[parent], 1 + memo[node])

    return memo[start]


@dataclass
class AliasReport:
    """Analysis report for a variable graph."""

    total_collections: int = 0
    total_variables: int = 0
    total_aliases: int = 0

    # Alias usage
    alias_references: Dict[str, int] = field(default_factory=dict)  # target name -> count
    unresolved_aliases: List[Tuple[str, str]] = field(default_factory=list)  # (variable, target id)

    # Chain structure
    has_cycles: bool = False
    cycle_example: Optional[List[str]] = None
    max_chain_depth: int = 0
    too_deep: List[str] = field(default_factory=list)

    # Permissive behaviour the exporters keep
    type_mismatches: List[Tuple[str, str]] = field(default_factory=list)  # (variable, target)
    missing_values: List[Tuple[str, str]] = field(default_factory=list)  # (variable, mode name)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_graph(graph: VariableGraph) -> AliasReport:
    """
    Perform alias analysis of a VariableGraph.

    Checks for:
    - Alias references per target
    - Dangling aliases
    - Cycles and chains deeper than MAX_ALIAS_DEPTH
    - Type-mismatched aliases
    - Variables without a value for one of their collection's modes

    Returns an AliasReport with metrics and warnings.
    """
    report = AliasReport(
        total_collections=len(graph.collections),
        total_variables=len(graph.variables),
    )

    def name_of(variable_id: str) -> str:
        variable = graph.get_variable(variable_id)
        return variable.name if variable else variable_id

    # =========================================================================
    # 1. ALIAS INVENTORY
    # =========================================================================

    references: Dict[str, int] = defaultdict(int)

    for variable in graph.variables:
        for value in variable.values_by_mode.values():
            if not isinstance(value, VariableAlias):
                continue
            report.total_aliases += 1

            target = graph.get_variable(value.id)
            if target is None:
                if (variable.name, value.id) not in report.unresolved_aliases:
                    report.unresolved_aliases.append((variable.name, value.id))
                continue

            references[target.name] += 1
            if target.resolved_type != variable.resolved_type:
                pair = (variable.name, target.name)
                if pair not in report.type_mismatches:
                    report.type_mismatches.append(pair)

    report.alias_references = dict(references)

    # =========================================================================
    # 2. MODE COVERAGE
    # =========================================================================

    for variable in graph.variables:
        collection = graph.collection_of(variable)
        if collection is None:
            continue
        for mode in collection.modes:
            if variable.values_by_mode.get(mode.mode_id) is None:
                report.missing_values.append((variable.name, mode.name))

    # =========================================================================
    # 3. CHAIN STRUCTURE
    # =========================================================================

    edges = _alias_edges(graph)

    visited: Set[str] = set()
    for variable_id in list(edges.keys()):
        if variable_id not in visited:
            cycle = _find_cycle_dfs(edges, variable_id, visited)
            if cycle:
                report.has_cycles = True
                report.cycle_example = [name_of(v) for v in cycle]
                break

    memo: Dict[str, int] = {}
    for variable in graph.variables:
        depth = _chain_depth(variable.id, edges, memo)
        report.max_chain_depth = max(report.max_chain_depth, depth)
        if depth > MAX_ALIAS_DEPTH:
            report.too_deep.append(variable.name)

    # =========================================================================
    # 4. WARNING FLAGS
    # =========================================================================

    if report.unresolved_aliases:
        report.add_warning(
            "Unresolved aliases: "
            + ", ".join(f"{name} -> {target}" for name, target in report.unresolved_aliases)
        )

    if report.has_cycles:
        report.add_warning(f"Alias cycle detected: {' -> '.join(report.cycle_example)}")

    if report.too_deep:
        report.add_warning(
            f"Alias chains deeper than {MAX_ALIAS_DEPTH}: {', '.join(sorted(report.too_deep))}"
        )

    if report.type_mismatches:
        report.add_warning(
            "Aliases to a different type: "
            + ", ".join(f"{name} -> {target}" for name, target in report.type_mismatches)
        )

    return report
