"""
Color notation converters.

Every converter takes a Color with 0..1 channels and returns a CSS color
string. `format_color` picks one by ColorFormat.
"""

import math
from typing import Callable, Dict

from figvex.config import ColorFormat
from figvex.model import Color


def _round(x: float) -> int:
    """Round half up, so 127.5 -> 128 the way browsers and design tools do."""
    return int(math.floor(x + 0.5))


def _byte(channel: float) -> int:
    return min(255, max(0, _round(channel * 255)))


def _is_translucent(color: Color) -> bool:
    return color.a is not None and color.a < 1


def to_hex(color: Color) -> str:
    """#rrggbb, or #rrggbbaa when the color is not fully opaque."""
    hex_str = "#{:02x}{:02x}{:02x}".format(_byte(color.r), _byte(color.g), _byte(color.b))
    if _is_translucent(color):
        hex_str += "{:02x}".format(_byte(color.a))
    return hex_str


def to_rgb(color: Color) -> str:
    """rgb(r, g, b), or rgba(r, g, b, a) when the color is not fully opaque."""
    r, g, b = _byte(color.r), _byte(color.g), _byte(color.b)
    if _is_translucent(color):
        return f"rgba({r}, {g}, {b}, {color.a:.3f})"
    return f"rgb({r}, {g}, {b})"


def to_hsl(color: Color) -> str:
    """hsl(h, s%, l%), or hsla(...) when the color is not fully opaque."""
    r, g, b = color.r, color.g, color.b

    hi = max(r, g, b)
    lo = min(r, g, b)
    light = (hi + lo) / 2

    hue = 0.0
    sat = 0.0

    if hi != lo:
        d = hi - lo
        sat = d / (2 - hi - lo) if light > 0.5 else d / (hi + lo)

        if hi == r:
            hue = ((g - b) / d + (6 if g < b else 0)) / 6
        elif hi == g:
            hue = ((b - r) / d + 2) / 6
        else:
            hue = ((r - g) / d + 4) / 6

    h_deg = _round(hue * 360)
    s_pct = _round(sat * 100)
    l_pct = _round(light * 100)

    if _is_translucent(color):
        return f"hsla({h_deg}, {s_pct}%, {l_pct}%, {color.a:.3f})"
    return f"hsl({h_deg}, {s_pct}%, {l_pct}%)"


def _to_linear(c: float) -> float:
    """sRGB transfer function, inverted."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1 / 3), x)


def to_oklch(color: Color) -> str:
    """
    oklch(L% C H) in the OKLab perceptual space.

    sRGB -> linear RGB -> LMS (cone response) -> cube root -> OKLab,
    then polar coordinates for chroma and hue.
    """
    lr = _to_linear(color.r)
    lg = _to_linear(color.g)
    lb = _to_linear(color.b)

    l_ = _cbrt(0.4122214708 * lr + 0.5363325363 * lg + 0.0514459929 * lb)
    m_ = _cbrt(0.2119034982 * lr + 0.6806995451 * lg + 0.1073969566 * lb)
    s_ = _cbrt(0.0883024619 * lr + 0.2817188376 * lg + 0.6299787005 * lb)

    lightness = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    b = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    chroma = math.sqrt(a * a + b * b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360

    body = f"{lightness * 100:.2f}% {chroma:.4f} {hue:.2f}"
    if _is_translucent(color):
        return f"oklch({body} / {color.a:.3f})"
    return f"oklch({body})"


# One converter per ColorFormat member; test_colors checks coverage.
COLOR_FORMATTERS: Dict[ColorFormat, Callable[[Color], str]] = {
    ColorFormat.HEX: to_hex,
    ColorFormat.RGB: to_rgb,
    ColorFormat.RGBA: to_rgb,
    ColorFormat.HSL: to_hsl,
    ColorFormat.OKLCH: to_oklch,
}


def format_color(color: Color, color_format: ColorFormat = ColorFormat.HEX) -> str:
    """Render `color` in the requested notation."""
    return COLOR_FORMATTERS[ColorFormat(color_format)](color)
