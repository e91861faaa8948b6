"""Colour blends and gradient text for the terminal."""

from __future__ import annotations

import math
from collections.abc import Sequence

from rich.text import Text

PRIMARY_COLOR = "#ffb87e"
SECONDARY_COLOR = "#4c9999"

_WHITE = (0.95047, 1.0, 1.08883)


def _parse_hex(value: str) -> tuple[float, float, float]:
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"invalid colour: {value!r}")
    try:
        raw = int(digits, 16)
    except ValueError:
        raise ValueError(f"invalid colour: {value!r}") from None
    return ((raw >> 16) & 0xFF) / 255, ((raw >> 8) & 0xFF) / 255, (raw & 0xFF) / 255


def _to_hex(rgb: tuple[float, float, float]) -> str:
    return "#" + "".join(f"{int(min(max(v, 0.0), 1.0) * 255 + 0.5):02x}" for v in rgb)


def _linearize(v: float) -> float:
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


def _delinearize(v: float) -> float:
    return 12.92 * v if v <= 0.0031308 else 1.055 * v ** (1 / 2.4) - 0.055


def _lab_f(t: float) -> float:
    if t > (6 / 29) ** 3:
        return t ** (1 / 3)
    return t / 3 * (29 / 6) ** 2 + 4 / 29


def _lab_finv(t: float) -> float:
    if t > 6 / 29:
        return t**3
    return 3 * (6 / 29) ** 2 * (t - 4 / 29)


def _to_hcl(rgb: tuple[float, float, float]) -> tuple[float, float, float]:
    r, g, b = (_linearize(v) for v in rgb)
    x = 0.4124564 * r + 0.3575761 * g + 0.1804375 * b
    y = 0.2126729 * r + 0.7151522 * g + 0.0721750 * b
    z = 0.0193339 * r + 0.1191920 * g + 0.9503041 * b
    fx, fy, fz = _lab_f(x / _WHITE[0]), _lab_f(y / _WHITE[1]), _lab_f(z / _WHITE[2])
    lightness = 1.16 * fy - 0.16
    a = 5 * (fx - fy)
    bb = 2 * (fy - fz)
    if abs(bb - a) > 1e-4 and abs(a) > 1e-4:
        hue = math.degrees(math.atan2(bb, a)) % 360
    else:
        hue = 0.0
    return hue, math.hypot(a, bb), lightness


def _from_hcl(hue: float, chroma: float, lightness: float) -> tuple[float, float, float]:
    a = chroma * math.cos(math.radians(hue))
    bb = chroma * math.sin(math.radians(hue))
    fy = (lightness + 0.16) / 1.16
    fx = fy + a / 5
    fz = fy - bb / 2
    x, y, z = _WHITE[0] * _lab_finv(fx), _WHITE[1] * _lab_finv(fy), _WHITE[2] * _lab_finv(fz)
    r = 3.2404542 * x - 1.5371385 * y - 0.4985314 * z
    g = -0.9692660 * x + 1.8760108 * y + 0.0415560 * z
    b = 0.0556434 * x - 0.2040259 * y + 1.0572252 * z
    return _delinearize(r), _delinearize(g), _delinearize(b)


def _interp_angle(a0: float, a1: float, t: float) -> float:
    delta = ((a1 - a0) + 360 + 180) % 360 - 180
    return (a0 + t * delta + 360) % 360


def blend_colors(start: str, end: str, steps: int) -> list[str]:
    """Return ``steps`` hex colours blended in HCL space from ``start`` to ``end``."""
    h1, c1, l1 = _to_hcl(_parse_hex(start))
    h2, c2, l2 = _to_hcl(_parse_hex(end))
    colors = []
    for i in range(steps):
        t = i / (steps - 1) if steps > 1 else 0.0
        hcl = (_interp_angle(h1, h2, t), c1 + t * (c2 - c1), l1 + t * (l2 - l1))
        colors.append(_to_hex(_from_hcl(*hcl)))
    return colors


def create_blend(text: str) -> list[str]:
    """Blend between the two brand colours, one colour per character of ``text``."""
    return blend_colors(PRIMARY_COLOR, SECONDARY_COLOR, len(text))


def rotate_blend(blend: Sequence[str]) -> list[str]:
    """Return the blend rotated right by one place."""
    if not blend:
        return list(blend)
    return [blend[-1], *blend[:-1]]


def rainbow(text: str, colors: Sequence[str]) -> Text:
    """Colour each character of ``text``, cycling through ``colors``."""
    if text and not colors:
        raise ValueError("no colours to draw with")
    result = Text()
    for index, char in enumerate(text):
        result.append(char, style=colors[index % len(colors)])
    return result


def make_gradient(text: str, blend: Sequence[str] | None = None) -> Text:
    """Render ``text`` as gradient text, using the default blend when none is given."""
    return rainbow(text, create_blend(text) if blend is None else blend)