"""
Export orchestration.

Runs one or more backends over the same graph with per-format option
defaults, and turns the results into files to write.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from figvex.backends import export_css, export_json, export_scss, export_typescript
from figvex.config import ExportOptions
from figvex.model import VariableGraph

logger = logging.getLogger(__name__)


class ExportFormat(Enum):
    """Output formats, valued by their CLI name."""

    CSS = "css"
    SCSS = "scss"
    JSON = "json"
    TYPESCRIPT = "typescript"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]


_EXTENSIONS: Dict[ExportFormat, str] = {
    ExportFormat.CSS: ".css",
    ExportFormat.SCSS: ".scss",
    ExportFormat.JSON: ".json",
    ExportFormat.TYPESCRIPT: ".d.ts",
}

EXPORTERS: Dict[ExportFormat, Callable[[VariableGraph, ExportOptions], str]] = {
    ExportFormat.CSS: export_css,
    ExportFormat.SCSS: export_scss,
    ExportFormat.JSON: export_json,
    ExportFormat.TYPESCRIPT: export_typescript,
}

# Format-specific changes to the ExportOptions defaults.
FORMAT_DEFAULTS: Dict[ExportFormat, Dict[str, Any]] = {
    ExportFormat.CSS: {},
    ExportFormat.SCSS: {},
    ExportFormat.JSON: {},
    ExportFormat.TYPESCRIPT: {
        "include_collection_comments": False,
        "include_mode_comments": False,
    },
}


def options_for(fmt: ExportFormat, overrides: Optional[Mapping[str, Any]] = None) -> ExportOptions:
    """Base defaults, then the format's defaults, then the caller's overrides."""
    merged = dict(FORMAT_DEFAULTS[fmt])
    merged.update(overrides or {})
    return ExportOptions().with_overrides(**merged)


def generate_exports(
    graph: VariableGraph,
    formats: Iterable[ExportFormat],
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[ExportFormat, str]:
    """
    Run the requested backends over `graph`.

    Returns:
        Mapping from format to generated text, in request order
    """
    exports: Dict[ExportFormat, str] = {}
    for fmt in formats:
        exports[fmt] = EXPORTERS[fmt](graph, options_for(fmt, overrides))
        logger.info("Generated %s export (%d chars)", fmt.value, len(exports[fmt]))
    return exports


@dataclass(frozen=True)
class FileWrite:
    """A file to persist: destination path and UTF-8 content."""

    path: Path
    content: str


def output_files(
    exports: Mapping[ExportFormat, str], out_dir: str | Path, basename: str = "variables"
) -> List[FileWrite]:
    """Name each export `<out_dir>/<basename><extension>`."""
    out_dir = Path(out_dir)
    return [
        FileWrite(path=out_dir / f"{basename}{fmt.extension}", content=content)
        for fmt, content in exports.items()
    ]


def write_files(files: Iterable[FileWrite]) -> None:
    """Write every file, creating parent directories as needed."""
    for file in files:
        file.path.parent.mkdir(parents=True, exist_ok=True)
        file.path.write_text(file.content, encoding="utf-8")
        logger.info("Wrote %s", file.path)
