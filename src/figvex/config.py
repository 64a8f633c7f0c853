"""
Formatting and export configuration.

Two layers, never mutated in place:
    - DEFAULT_FORMAT, the global formatting defaults
    - a partial per-variable override parsed from its description

They are combined by `overlay`, which returns a new FormatConfig.

ExportOptions carries the per-export switches (selector, comments,
prefix, collection filter). `load_options` reads them from a YAML file.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from figvex.errors import ConfigError

logger = logging.getLogger(__name__)

# Deepest alias chain the resolver follows before giving up.
MAX_ALIAS_DEPTH = 10

DEFAULT_SELECTOR = ":root"


class Unit(str, Enum):
    """Units a number variable can be exported with."""

    NONE = "none"
    PX = "px"
    REM = "rem"
    EM = "em"
    PERCENT = "%"
    MS = "ms"
    S = "s"


class ColorFormat(str, Enum):
    """Color notations a color variable can be exported with."""

    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    OKLCH = "oklch"


@dataclass(frozen=True)
class FormatConfig:
    """
    How one variable's value is rendered.

    Properties:
        unit: Unit suffix for numbers
        rem_base: Pixel size of 1rem/1em, used by the rem conversion
        color_format: Notation for colors (JSON always uses hex)
    """

    unit: Unit = Unit.PX
    rem_base: float = 16
    color_format: ColorFormat = ColorFormat.HEX


DEFAULT_FORMAT = FormatConfig()


def overlay(base: FormatConfig, partial: Mapping[str, Any]) -> FormatConfig:
    """Return `base` with the keys of `partial` applied on top."""
    if not partial:
        return base
    return replace(base, **partial)


@dataclass(frozen=True)
class ExportOptions:
    """
    Switches for one export pass.

    Properties:
        selector: CSS selector wrapping the declarations
        include_collection_comments: Emit a comment per collection
        include_mode_comments: Emit a comment per mode block
        use_modes_as_selectors: One CSS block per (collection, mode)
        prefix: Optional identifier prefix ("ds" -> --ds-color-primary)
        selected_collections: Collection ids to export; empty means all
        qualify_names: Start identifiers with the collection name
        file_name: Source file name quoted in output headers
    """

    selector: str = DEFAULT_SELECTOR
    include_collection_comments: bool = True
    include_mode_comments: bool = True
    use_modes_as_selectors: bool = False
    prefix: Optional[str] = None
    selected_collections: Optional[FrozenSet[str]] = None
    qualify_names: bool = True
    file_name: str = "Figma"

    def with_overrides(self, **overrides: Any) -> "ExportOptions":
        if "selected_collections" in overrides and overrides["selected_collections"] is not None:
            overrides["selected_collections"] = frozenset(overrides["selected_collections"])
        return replace(self, **overrides)


class OptionsFile(BaseModel):
    """
    Schema of a YAML export options file.

    Every key is optional and maps to the ExportOptions field of the
    same name. Unknown keys and mistyped values are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    selector: str = Field(default=DEFAULT_SELECTOR, description="CSS selector wrapping the declarations")
    include_collection_comments: bool = Field(default=True, description="Emit a comment per collection")
    include_mode_comments: bool = Field(default=True, description="Emit a comment per mode block")
    use_modes_as_selectors: bool = Field(default=False, description="One CSS block per collection mode")
    prefix: Optional[str] = Field(default=None, description="Identifier prefix")
    selected_collections: Optional[List[str]] = Field(
        default=None, description="Collection ids to export; empty means all"
    )
    qualify_names: bool = Field(default=True, description="Start identifiers with the collection name")
    file_name: str = Field(default="Figma", description="Source file name quoted in headers")

    @field_validator("selector", mode="after")
    @classmethod
    def validate_selector(cls, v: str) -> str:
        """Reject a blank selector."""
        if not v.strip():
            raise ValueError("selector must not be blank")
        return v


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in e['loc']) or 'options'}: {e['msg']}" for e in error.errors()
    )


def options_from_dict(d: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate a mapping of ExportOptions overrides.

    Returns only the keys present in `d`, so unset options keep the
    ExportOptions defaults.

    Raises:
        ConfigError: On unknown keys or values of the wrong type
    """
    try:
        parsed = OptionsFile.model_validate(dict(d))
    except ValidationError as e:
        raise ConfigError(f"Invalid export options: {_describe(e)}") from None
    return parsed.model_dump(exclude_unset=True)


def load_options(path: str | Path) -> Dict[str, Any]:
    """
    Read ExportOptions overrides from a YAML file.

    An empty file yields no overrides.

    Raises:
        ConfigError: If the file is missing, not YAML, or not a mapping
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    logger.debug("Loaded export options from %s: %s", path, list(data))
    return options_from_dict(data)
