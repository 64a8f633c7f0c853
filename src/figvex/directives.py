"""
Directive parser for variable descriptions.

Designers put small formatting instructions in a variable's free-text
description:

    unit: rem            -> numbers as rem (base 16)
    unit: rem:20         -> numbers as rem with a 20px base
    unit: %              -> numbers as percentages
    format: oklch        -> colors as oklch()

Syntax Notes:
    - Case-insensitive, whitespace tolerant, order independent
    - Anything else in the description is ignored
    - Keywords are checked against the closed Unit / ColorFormat sets;
      unknown keywords are dropped, never an error
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from figvex.config import DEFAULT_FORMAT, ColorFormat, FormatConfig, Unit, overlay

# Words, integers, "%" and ":" are the only tokens that matter; the rest
# of the description is prose and is skipped.
_TOKEN_RE = re.compile(r"[a-z]+|\d+(?:\.\d+)?|%|:")

_UNITS = {u.value: u for u in Unit}
_COLOR_FORMATS = {f.value: f for f in ColorFormat}


def _tokenize(description: str) -> List[str]:
    return _TOKEN_RE.findall(description.lower())


def _keyword_after(tokens: List[str], pos: int) -> Tuple[Optional[str], int]:
    """Return the token following "<directive> :" at `pos`, if present."""
    if pos + 2 < len(tokens) and tokens[pos + 1] == ":":
        return tokens[pos + 2], pos + 3
    return None, pos + 1


def _parse_base(tokens: List[str], pos: int) -> Optional[int]:
    """An optional ":<integer>" custom rem/em base."""
    if pos + 1 < len(tokens) and tokens[pos] == ":" and tokens[pos + 1].isdigit():
        base = int(tokens[pos + 1])
        if base > 0:
            return base
    return None


def parse(description: str) -> Dict[str, Any]:
    """
    Extract formatting directives from a description.

    Returns a partial FormatConfig as a dict with any of the keys
    "unit", "rem_base" and "color_format". Keys are absent when the
    matching directive is absent, so the caller's defaults prevail.

    Examples:
        parse("unit: rem:20")   -> {"unit": Unit.REM, "rem_base": 20}
        parse("format: HSL")    -> {"color_format": ColorFormat.HSL}
        parse("")               -> {}
    """
    if not description or not isinstance(description, str):
        return {}

    config: Dict[str, Any] = {}
    tokens = _tokenize(description)
    pos = 0

    while pos < len(tokens):
        token = tokens[pos]

        if token == "unit" and "unit" not in config:
            keyword, after = _keyword_after(tokens, pos)
            if keyword in _UNITS:
                config["unit"] = _UNITS[keyword]
                base = _parse_base(tokens, after)
                if base is not None:
                    config["rem_base"] = base
                pos = after
                continue

        elif token == "format" and "color_format" not in config:
            keyword, after = _keyword_after(tokens, pos)
            if keyword in _COLOR_FORMATS:
                config["color_format"] = _COLOR_FORMATS[keyword]
                pos = after
                continue

        pos += 1

    return config


def format_config(description: str, base: FormatConfig = DEFAULT_FORMAT) -> FormatConfig:
    """The FormatConfig for a variable: `base` overlaid with its directives."""
    return overlay(base, parse(description))
