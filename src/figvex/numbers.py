"""
Number formatting with units.
"""

import math
from typing import Callable, Dict

from figvex.config import FormatConfig, Unit


def clean_number(value: float, decimals: int = 4) -> str:
    """
    Format a number without noise.

    Integral values print without a decimal point; other values are
    rounded to `decimals` places with trailing zeros removed.
    Non-finite values print as Infinity, -Infinity or NaN.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{decimals}f}".rstrip("0").rstrip(".")


def _suffixed(suffix: str) -> Callable[[float, FormatConfig], str]:
    return lambda value, config: f"{clean_number(value)}{suffix}"


def _rem(value: float, config: FormatConfig) -> str:
    return f"{clean_number(value / config.rem_base)}rem"


# One formatter per Unit member; test_numbers checks coverage.
UNIT_FORMATTERS: Dict[Unit, Callable[[float, FormatConfig], str]] = {
    Unit.NONE: _suffixed(""),
    Unit.PX: _suffixed("px"),
    Unit.REM: _rem,
    Unit.EM: _suffixed("em"),
    Unit.PERCENT: _suffixed("%"),
    Unit.MS: _suffixed("ms"),
    Unit.S: _suffixed("s"),
}


def format_number(value: float, config: FormatConfig) -> str:
    """Render `value` with the unit configured in `config`."""
    return UNIT_FORMATTERS[Unit(config.unit)](value, config)
