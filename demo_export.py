#!/usr/bin/env python3
"""
Demo: Analyze the example variable graph and export it in every format.
"""

from figvex.analyzer import analyze_graph
from figvex.examples import build_example_graph
from figvex.export import ExportFormat, generate_exports, output_files, write_files
from figvex.serialization import graph_to_json


def print_report(report):
    """Pretty-print an AliasReport."""
    print()
    print("=" * 70)
    print("ALIAS ANALYSIS REPORT")
    print("=" * 70)
    print()

    print("📊 BASIC METRICS")
    print(f"  Collections:           {report.total_collections}")
    print(f"  Variables:             {report.total_variables}")
    print(f"  Aliases:               {report.total_aliases}")
    print(f"  Deepest Alias Chain:   {report.max_chain_depth}")
    print()

    if report.alias_references:
        print("🔗 ALIAS TARGETS")
        for name, count in sorted(report.alias_references.items()):
            print(f"    {name}: {count} reference(s)")
        print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS - every alias resolves")
    print()


def main():
    graph = build_example_graph()

    print_report(analyze_graph(graph))

    exports = generate_exports(graph, list(ExportFormat), {"file_name": "example"})

    for fmt, content in exports.items():
        print(f"\n{fmt.value.upper()}:")
        print("-" * 70)
        print(content)

    files = output_files(exports, "build", "example")
    write_files(files)
    with open("build/example_snapshot.json", "w", encoding="utf-8") as f:
        f.write(graph_to_json(graph))

    print("\n" + "=" * 70)
    for file in files:
        print(f"Saved to: {file.path}")
    print("Saved to: build/example_snapshot.json")
    print("Re-export it with:")
    print("  figvex export build/example_snapshot.json -o build --modes-as-selectors")
    print("=" * 70)


if __name__ == "__main__":
    main()
