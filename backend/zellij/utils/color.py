"""Colour helpers: hex parsing, HSB conversion, shimmer jitter. No engine imports."""

from __future__ import annotations

import math
import re
from typing import Protocol

_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class RandomSource(Protocol):
    def random(self) -> float: ...


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and bool(_HEX_RE.match(value))


def parse_hex(color: str) -> tuple[int, int, int]:
    """Parse '#rrggbb' to (r, g, b)."""
    if not is_hex_color(color):
        raise ValueError(f"Not a #rrggbb colour: {color!r}")
    return (int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16))


def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, v))


def _round_half_up(v: float) -> int:
    return math.floor(v + 0.5)


def hex_to_hsb(color: str) -> tuple[float, float, float]:
    """'#rrggbb' → (hue, saturation, brightness), each in [0, 1]."""
    r, g, b = (c / 255 for c in parse_hex(color))
    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn

    h = 0.0
    s = 0.0 if mx == 0 else d / mx
    if d != 0:
        if mx == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif mx == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6
    return h, s, mx


def hsb_to_rgb(h: float, s: float, b: float) -> tuple[int, int, int]:
    h = h % 1
    s = _clamp01(s)
    b = _clamp01(b)

    if s == 0:
        v = _round_half_up(b * 255)
        return v, v, v

    i = math.floor(h * 6)
    f = h * 6 - i
    p = b * (1 - s)
    q = b * (1 - f * s)
    t = b * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        rgb = (b, t, p)
    elif sector == 1:
        rgb = (q, b, p)
    elif sector == 2:
        rgb = (p, b, t)
    elif sector == 3:
        rgb = (p, q, b)
    elif sector == 4:
        rgb = (t, p, b)
    else:
        rgb = (b, p, q)
    return _round_half_up(rgb[0] * 255), _round_half_up(rgb[1] * 255), _round_half_up(rgb[2] * 255)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "#" + "".join(f"{c:02x}" for c in (r, g, b))


def apply_shimmer(color: str, level: int, rng: RandomSource, scale: float = 0.15) -> str:
    """Jitter brightness and, by half as much, saturation of a colour.

    Consumes exactly two draws when ``level >= 0``; ``level < 0`` returns the
    colour untouched without drawing.
    """
    if level < 0:
        return color

    intensity = level * scale
    h, s, b = hex_to_hsb(color)

    new_b = _clamp01(b + (rng.random() - 0.5) * intensity)
    new_s = _clamp01(s + (rng.random() - 0.5) * (intensity * 0.5))

    return rgb_to_hex(*hsb_to_rgb(h, new_s, new_b))
